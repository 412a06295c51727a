"""
Discord command client setup using discord.py.
"""

import asyncio
import signal
from typing import Any, Optional

import discord

from bot.config import Config
from bot.database import Database
from bot.localization import LanguageRegistry
from commands.dispatcher import CommandDispatcher
from commands.registry import CommandRegistry
from repositories.language_repository import LanguageRepository
from repositories.modlog_repository import ModlogRepository
from utils.error_handler import ErrorHandler
from utils.logger import get_logger, set_debug, setup_library_logging

logger = get_logger("Client")


class CommandClient(discord.Client):
    """Discord client that dispatches prefixed messages to command modules."""

    def __init__(self, config: Config):
        intents = discord.Intents.default()
        intents.message_content = True  # Required to read command text
        super().__init__(intents=intents)

        self.config = config
        self.prefix = config.PREFIX
        self.owners = frozenset(config.OWNERS)

        set_debug(config.DEBUG)
        setup_library_logging("discord")
        logger.info("logger initialized.")

        self.languages = LanguageRegistry(default=config.DEFAULT_LANGUAGE)
        self.languages.load_all()

        self.registry = CommandRegistry(self)

        self.database = Database(config.DATABASE_URL)
        self.language_repository = LanguageRepository(self.database, config.DEFAULT_LANGUAGE)
        self.modlog_repository = ModlogRepository(self.database)

        self.error_handler = ErrorHandler(self, config.SUPPORT_CHANNEL_ID)

        self.dispatcher = CommandDispatcher(
            self,
            registry=self.registry,
            languages=self.languages,
            language_repository=self.language_repository,
            emit=self.dispatch,
            prefix=self.prefix,
            owners=self.owners,
        )

        logger.info("client initialized.")

    async def setup_hook(self) -> None:
        """Called after login, before connecting to the Gateway."""
        await self.database.connect()
        self.registry.load_groups(self.config.COMMAND_GROUPS)

    async def on_ready(self) -> None:
        logger.info(f"Logged in as: {self.user} (prefix {self.prefix})")

    async def on_message(self, message: discord.Message) -> None:
        await self.dispatcher.dispatch(message)

    async def on_command_error(
        self,
        command_name: str,
        message: discord.Message,
        error: Exception,
        from_command: bool,
        lang: Any,
    ) -> None:
        await self.error_handler.handle_command_error(command_name, message, error, from_command, lang)

    def reload_command(self, name: str) -> None:
        """Reload one command module (owner operation)."""
        self.registry.reload_command(name)

    def reload_languages(self) -> None:
        """Reload every language bundle (owner operation)."""
        self.languages.reload()

    async def close(self) -> None:
        """Clean shutdown."""
        logger.info("Shutting down client...")
        await self.database.close()
        await super().close()


def create_client(config: Optional[Config] = None) -> CommandClient:
    """Create a client from the given or environment configuration."""
    return CommandClient(config or Config.from_env())


async def run_bot(config: Optional[Config] = None) -> None:
    """Run the client until it is closed."""
    config = config or Config.from_env()
    config.validate()

    client = create_client(config)

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, lambda s=sig: asyncio.create_task(_shutdown(client, s)))
        except NotImplementedError:
            # Windows doesn't support add_signal_handler
            pass

    logger.info("trying to login now...")
    async with client:
        await client.start(config.DISCORD_TOKEN)


async def _shutdown(client: CommandClient, sig: signal.Signals) -> None:
    logger.info(f"Received {sig.name}, shutting down...")
    await client.close()
