"""
Permission checks for command invocations.

Permission flags are discord.py Permissions attribute names
("manage_guild", "ban_members", ...).
"""

from typing import Any, Sequence, Tuple, Union

import discord

from utils.errors import MissingPermissionError

RequiredPermissions = Union[str, Sequence[str]]


def is_valid_permission(flag: str) -> bool:
    """Check that a flag names a discord.py permission."""
    return flag in discord.Permissions.VALID_FLAGS


def normalize_permissions(required: Union[None, RequiredPermissions]) -> Tuple[str, ...]:
    """
    Normalize a command's required permissions to a tuple.

    Args:
        required: None, a single flag, or a sequence of flags

    Returns:
        Tuple of flags in declaration order
    """
    if not required:
        return ()
    if isinstance(required, str):
        return (required,)
    return tuple(required)


def validate_permissions(member: Any, required: RequiredPermissions) -> None:
    """
    Check that a member holds every required permission.

    The check is done fresh on every call. A member without guild
    permissions (a direct-message author) holds none.

    Args:
        member: Message author
        required: A single flag or a sequence of flags

    Raises:
        MissingPermissionError: For the first missing flag, in order
    """
    permissions = getattr(member, "guild_permissions", None)

    for flag in normalize_permissions(required):
        if permissions is None or not getattr(permissions, flag, False):
            raise MissingPermissionError(flag)
