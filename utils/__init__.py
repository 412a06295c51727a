"""
Utility modules for the command client.
"""

from .logger import get_logger, set_debug, setup_logging
from .discord import DiscordUtils
from .validation import ValidationUtils, ValidationResult
from .errors import (
    BotError,
    CommandLoadError,
    CommandNotFoundError,
    LanguageLoadError,
    MissingPermissionError,
)
from .error_handler import ErrorHandler

__all__ = [
    "get_logger",
    "set_debug",
    "setup_logging",
    "DiscordUtils",
    "ValidationUtils",
    "ValidationResult",
    "BotError",
    "CommandLoadError",
    "CommandNotFoundError",
    "LanguageLoadError",
    "MissingPermissionError",
    "ErrorHandler",
]
