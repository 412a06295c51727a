"""
Error types raised by the command framework.

Rejections that are part of normal dispatch (unknown command, direct
message to a guild-only command, non-owner calling an owner command)
are not errors and have no class here.
"""

from typing import Any


class BotError(Exception):
    """Base exception for all framework errors."""

    def __init__(self, message: str = "", **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(message)

    def __str__(self) -> str:
        parts = [self.message or self.__class__.__name__]
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            parts.append(f"({ctx})")
        return " ".join(parts)


class MissingPermissionError(BotError):
    """The invoking member lacks a permission the command requires.

    Attributes:
        permission: The first missing permission flag, e.g. "manage_guild".
    """

    def __init__(self, permission: str) -> None:
        self.permission = permission
        super().__init__("missing permission.", permission=permission)


class CommandNotFoundError(BotError):
    """An administrative operation named a command that is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__("command does not exist.", command=name)


class CommandLoadError(BotError):
    """A command module does not satisfy the command module contract."""


class LanguageLoadError(BotError):
    """A language module does not export a STRINGS mapping."""
