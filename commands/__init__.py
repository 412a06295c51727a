"""
Command system: parsing, registry, permission checks and dispatch.

Command modules live in group subpackages (general, settings, owner).
"""

from .parser import parse_args, split_command
from .permissions import validate_permissions
from .registry import CommandRegistry, Command, CommandDefinition, Group, UNCATEGORIZED
from .dispatcher import CommandDispatcher, COMMAND_ERROR_EVENT

__all__ = [
    "parse_args",
    "split_command",
    "validate_permissions",
    "CommandRegistry",
    "Command",
    "CommandDefinition",
    "Group",
    "UNCATEGORIZED",
    "CommandDispatcher",
    "COMMAND_ERROR_EVENT",
]
