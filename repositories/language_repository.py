"""
Language Repository
Stores the language each user wants answers in
"""

from typing import Any, Dict, Optional

from bot.database import Database
from repositories.base_repository import BaseRepository


class LanguageRepository(BaseRepository):
    """Repository for languages table."""

    def __init__(self, database: Database, default_language: str = "en"):
        """
        Create LanguageRepository instance.

        Args:
            database: Database owning the connection pool
            default_language: Language of users without a record
        """
        super().__init__(database, "languages", "user_id")
        self.default_language = default_language

    async def find_or_create(self, user_id: Any, defaults: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Get a user's language record, creating it with the default language.

        Args:
            user_id: Discord user ID

        Returns:
            Record with at least "user_id" and "lang"
        """
        return await super().find_or_create(
            str(user_id),
            defaults or {"lang": self.default_language},
        )

    async def set_language(self, user_id: Any, lang: str) -> bool:
        """
        Store a user's language.

        Returns:
            True if stored, False without a database
        """
        row = await self.upsert({"user_id": str(user_id), "lang": lang})
        return row is not None
