"""
Entry point for the command client.
"""

import asyncio
import sys

from bot.client import run_bot
from bot.config import Config
from utils.logger import get_logger

logger = get_logger("Main")


def main():
    """Main entry point."""
    try:
        config = Config.from_env()
        logger.info("Starting command client...")
        asyncio.run(run_bot(config))
    except KeyboardInterrupt:
        logger.info("Bot stopped by user")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
