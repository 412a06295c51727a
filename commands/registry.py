"""
Command Registry
Loads command modules into named groups and supports hot reload
"""

import importlib
import inspect
import pkgutil
import sys
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Optional, Tuple

from commands.permissions import is_valid_permission, normalize_permissions
from utils.errors import CommandLoadError, CommandNotFoundError
from utils.logger import get_logger

# Command handler type alias: run(client, message, args, prefix, lang)
CommandRunner = Callable[[Any, Any, List[str], str, Any], Awaitable[Any]]

# Group used by commands that do not declare one
UNCATEGORIZED = "uncategorized"


class CommandDefinition:
    """Definition of a command, read from a module's COMMAND dict."""

    def __init__(
        self,
        name: str,
        group: Optional[str] = None,
        description: str = "",
        usage: str = "",
        required_permissions: Optional[Any] = None,
        guild_only: bool = False,
        owner_only: bool = False,
    ):
        self.name = name.lower()
        self.group = group or UNCATEGORIZED
        self.description = description
        self.usage = usage
        self.required_permissions = normalize_permissions(required_permissions)
        self.guild_only = guild_only
        self.owner_only = owner_only

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "CommandDefinition":
        return cls(
            name=config["name"],
            group=config.get("group"),
            description=config.get("description", ""),
            usage=config.get("usage", ""),
            required_permissions=config.get("required_permissions"),
            guild_only=config.get("guild_only", False),
            owner_only=config.get("owner_only", False),
        )


class Command:
    """Registered command: definition, handler and the module it came from."""

    def __init__(self, definition: CommandDefinition, run: CommandRunner, source: str):
        self.definition = definition
        self.run = run
        self.source = source

    @property
    def name(self) -> str:
        return self.definition.name

    @property
    def group(self) -> str:
        return self.definition.group

    @property
    def description(self) -> str:
        return self.definition.description

    @property
    def usage(self) -> str:
        return self.definition.usage

    @property
    def required_permissions(self) -> Tuple[str, ...]:
        return self.definition.required_permissions

    @property
    def guild_only(self) -> bool:
        return self.definition.guild_only

    @property
    def owner_only(self) -> bool:
        return self.definition.owner_only

    def __repr__(self) -> str:
        return f"<Command name={self.name!r} group={self.group!r} source={self.source!r}>"


class Group:
    """A named category of commands."""

    def __init__(self, client: Any, name: str):
        self.client = client
        self.name = name

    @property
    def display_key(self) -> str:
        """Localization key of the group's display name."""
        return f"group_{self.name}"

    def __repr__(self) -> str:
        return f"<Group name={self.name!r}>"


class CommandRegistry:
    """Command and group registration with load, unload and reload."""

    def __init__(self, client: Any = None, package: str = "commands"):
        self.logger = get_logger("CommandRegistry")
        self.client = client
        self.package = package
        self.commands: Dict[str, Command] = {}
        self.groups: Dict[str, Group] = {}

    def load_command(self, source: str) -> Command:
        """
        Load one command module and register it.

        A command with the same name as an existing one replaces it.

        Args:
            source: Dotted module path, e.g. "commands.settings.modlogs"

        Returns:
            The registered command
        """
        command = self._build(source)
        self.register(command)
        self.logger.debug(f"successfully loaded {command.name} command.")
        return command

    def load_groups(self, groups: Iterable[str]) -> None:
        """
        Load every command module of the given group packages.

        Args:
            groups: Group package names under the commands package
        """
        self.logger.info("loading the commands...")
        for group in groups:
            package = importlib.import_module(f"{self.package}.{group}")
            modules = sorted(pkgutil.iter_modules(package.__path__), key=lambda m: m.name)
            for module in modules:
                if module.name.startswith("_") or module.ispkg:
                    continue
                self.load_command(f"{package.__name__}.{module.name}")
        self.logger.info(f"successfully loaded all commands ({len(self.commands)}).")

    def reload_command(self, name: str) -> Command:
        """
        Re-import a registered command from the module it was loaded from.

        The new module is imported before the old entry is removed, so a
        module that fails to import leaves the old command in place.

        Args:
            name: Registered command name

        Returns:
            The newly registered command

        Raises:
            CommandNotFoundError: If no command has this name
        """
        old = self.get(name)
        if old is None:
            raise CommandNotFoundError(name)

        sys.modules.pop(old.source, None)
        importlib.invalidate_caches()
        command = self._build(old.source)

        del self.commands[old.name]
        self.register(command)

        self.logger.info(f"reloaded {old.name} command from {old.source}.")
        return command

    def unload_command(self, name: str) -> Command:
        """
        Remove a command from the registry.

        Raises:
            CommandNotFoundError: If no command has this name
        """
        command = self.commands.pop(name.lower(), None)
        if command is None:
            raise CommandNotFoundError(name)

        sys.modules.pop(command.source, None)
        self.logger.info(f"unloaded {command.name} command.")
        return command

    def get(self, name: str) -> Optional[Command]:
        return self.commands.get(name.lower())

    def has(self, name: str) -> bool:
        return name.lower() in self.commands

    def get_all(self) -> List[Command]:
        return list(self.commands.values())

    def get_by_group(self, group: str) -> List[Command]:
        """Commands of a group, in registration order."""
        return [cmd for cmd in self.commands.values() if cmd.group == group]

    def get_groups(self) -> List[Group]:
        return list(self.groups.values())

    def __len__(self) -> int:
        return len(self.commands)

    def register(self, command: Command) -> None:
        """Insert a command, creating its group on first use."""
        if command.group not in self.groups:
            self.groups[command.group] = Group(self.client, command.group)
        self.commands[command.name] = command

    def _build(self, source: str) -> Command:
        """Import a command module and check it against the module contract."""
        module = importlib.import_module(source)

        config = getattr(module, "COMMAND", None)
        if not isinstance(config, dict) or not config.get("name"):
            raise CommandLoadError("command module has no COMMAND name", source=source)

        run = getattr(module, "run", None)
        if not inspect.iscoroutinefunction(run):
            raise CommandLoadError("command module has no async run()", source=source)

        definition = CommandDefinition.from_config(config)
        for flag in definition.required_permissions:
            if not is_valid_permission(flag):
                raise CommandLoadError("unknown permission flag", source=source, permission=flag)

        return Command(definition, run, source)
