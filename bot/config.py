"""
Configuration management for the command client.
Loads environment variables and provides configuration settings.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

ENV_PATH = Path(__file__).parent.parent / ".env"


def _split_list(value: str) -> Tuple[str, ...]:
    return tuple(part.strip() for part in value.split(",") if part.strip())


@dataclass(frozen=True)
class Config:
    """Bot configuration settings."""

    # Discord
    DISCORD_TOKEN: str

    # Database
    DATABASE_URL: str = ""

    # Commands
    PREFIX: str = "!"
    OWNERS: Tuple[int, ...] = ()
    COMMAND_GROUPS: Tuple[str, ...] = ("general", "settings", "owner")

    # Localization
    DEFAULT_LANGUAGE: str = "en"

    # Channel that receives command error reports
    SUPPORT_CHANNEL_ID: Optional[int] = None

    # Debug
    DEBUG: bool = False

    @classmethod
    def from_env(cls, env_path: Optional[Path] = ENV_PATH) -> "Config":
        """Load configuration from environment variables (and a .env file)."""
        if env_path is not None:
            load_dotenv(dotenv_path=env_path)

        support_channel = os.getenv("SUPPORT_CHANNEL_ID", "").strip()
        groups = _split_list(os.getenv("COMMAND_GROUPS", ""))

        return cls(
            DISCORD_TOKEN=os.getenv("DISCORD_TOKEN", ""),
            DATABASE_URL=os.getenv("DATABASE_URL", ""),
            PREFIX=os.getenv("PREFIX", "!"),
            OWNERS=tuple(int(owner) for owner in _split_list(os.getenv("OWNERS", ""))),
            COMMAND_GROUPS=groups or cls.COMMAND_GROUPS,
            DEFAULT_LANGUAGE=os.getenv("DEFAULT_LANGUAGE", "en"),
            SUPPORT_CHANNEL_ID=int(support_channel) if support_channel else None,
            DEBUG=os.getenv("DEBUG", "false").lower() == "true",
        )

    def validate(self) -> None:
        """Validate required configuration."""
        if not self.DISCORD_TOKEN:
            raise ValueError("DISCORD_TOKEN is required")
        if not self.PREFIX:
            raise ValueError("PREFIX must not be empty")
