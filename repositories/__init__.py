"""
Database repositories for the command client.
"""

from .base_repository import BaseRepository
from .language_repository import LanguageRepository
from .modlog_repository import ModlogRepository

__all__ = [
    "BaseRepository",
    "LanguageRepository",
    "ModlogRepository",
]
