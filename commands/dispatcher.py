"""
Command Dispatcher
Turns incoming messages into command invocations
"""

from typing import Any, Callable, Iterable

from bot.localization import LanguageRegistry
from commands.parser import split_command
from commands.permissions import validate_permissions
from commands.registry import CommandRegistry
from repositories.language_repository import LanguageRepository
from utils.discord import DiscordUtils
from utils.logger import get_logger

# Name of the client event that receives every command failure
COMMAND_ERROR_EVENT = "command_error"


class CommandDispatcher:
    """
    Parses, authorizes and runs commands for incoming messages.

    Per message: prefix and bot filter, parse, command lookup, user
    language lookup, guild-only and owner-only gates, permission check,
    run. Unknown commands and owner-only rejections are silent, guild-only
    rejections get one localized reply. Failures of the permission check
    or of the command itself are emitted as a single command_error event.

    A stored language code that is not loaded (a bundle dropped by a
    reload, or a changed default) raises KeyError from dispatch before any
    gate runs. It is not turned into a command_error event.
    """

    def __init__(
        self,
        client: Any,
        registry: CommandRegistry,
        languages: LanguageRegistry,
        language_repository: LanguageRepository,
        emit: Callable[..., Any],
        prefix: str = "!",
        owners: Iterable[int] = (),
    ):
        self.logger = get_logger("Dispatcher")
        self.client = client
        self.registry = registry
        self.languages = languages
        self.language_repository = language_repository
        self.emit = emit
        self.prefix = prefix
        self.owners = frozenset(owners)

    def is_owner(self, user_id: int) -> bool:
        return user_id in self.owners

    async def dispatch(self, message: Any) -> None:
        """
        Handle one incoming message.

        Args:
            message: Discord message
        """
        if message.author.bot or not message.content.lower().startswith(self.prefix.lower()):
            return

        command_name, args = split_command(message.content, self.prefix)

        command = self.registry.get(command_name) if command_name else None
        if command is None:
            return

        record = await self.language_repository.find_or_create(
            message.author.id,
            {"lang": self.languages.default},
        )
        lang = self.languages.get(record["lang"])

        if command.guild_only and message.guild is None:
            await DiscordUtils.safe_send(message.channel, lang.cant_use_command_in_dm)
            return

        if command.owner_only and not self.is_owner(message.author.id):
            return

        try:
            if command.required_permissions:
                validate_permissions(message.author, command.required_permissions)
            await command.run(self.client, message, args, self.prefix, lang)
        except Exception as error:
            self.emit(COMMAND_ERROR_EVENT, command.name, message, error, True, lang)
            return

        self.logger.info(
            f"{DiscordUtils.format_user(message.author)} used {command.name} command "
            f"in {DiscordUtils.origin_name(message)}"
        )
