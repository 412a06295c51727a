"""
Error Handler
Receives command errors and reports them to users and the support channel
"""

import traceback
from typing import Any, Optional

import discord

from utils.discord import DiscordUtils
from utils.errors import MissingPermissionError
from utils.logger import get_logger

# Discord message length limit, kept below for the code block markup
REPORT_TRACEBACK_LIMIT = 1500


class ErrorHandler:
    """Handles the client-wide command_error event."""

    def __init__(self, client: Any, support_channel_id: Optional[int] = None):
        self.logger = get_logger("ErrorHandler")
        self.client = client
        self.support_channel_id = support_channel_id

    async def handle_command_error(
        self,
        command_name: str,
        message: Any,
        error: Exception,
        from_command: bool,
        lang: Any,
    ) -> None:
        """
        Handle an error raised while dispatching a command.

        A missing permission is the user's problem and only gets a reply.
        Anything else is logged, answered with a generic message and
        reported to the support channel.

        Args:
            command_name: Name of the command that failed
            message: Message that invoked it
            error: The exception
            from_command: True when raised by command dispatch
            lang: Language bundle of the invoking user
        """
        if isinstance(error, MissingPermissionError):
            permission = lang.get(f"permission_{error.permission}", error.permission)
            self.logger.debug(f"{command_name}: {message.author} is missing {error.permission}")
            await DiscordUtils.safe_send(message.channel, lang.missing_permission(permission))
            return

        self.handle_exception(error, context=command_name)
        await DiscordUtils.safe_send(message.channel, lang.command_error)
        await self.report(command_name, message, error, from_command)

    def handle_exception(self, error: BaseException, context: str = "") -> None:
        """
        Log an exception with its traceback.

        Args:
            error: The exception that occurred
            context: Optional context string
        """
        if context:
            self.logger.error(f"[{context}] {type(error).__name__}: {error}")
        else:
            self.logger.error(f"{type(error).__name__}: {error}")

        self.logger.debug(f"Traceback:\n{self.format_traceback(error)}")

    async def report(self, command_name: str, message: Any, error: Exception, from_command: bool) -> None:
        """Post an error report to the support channel, if one is configured."""
        if not self.support_channel_id:
            return

        channel = self.client.get_channel(self.support_channel_id)
        if channel is None:
            self.logger.warning(f"Support channel {self.support_channel_id} not found")
            return

        source = "command" if from_command else "event"
        tb = self.format_traceback(error)[-REPORT_TRACEBACK_LIMIT:]
        report = "\n".join([
            f"⚠️ **Error in {source} `{command_name}`**",
            f"**User:** {DiscordUtils.format_user(message.author)} ({message.author.id})",
            f"**Origin:** {DiscordUtils.origin_name(message)}",
            f"**Content:** {message.content[:200]}",
            f"```py\n{tb}\n```",
        ])
        await DiscordUtils.safe_send(channel, report, allowed_mentions=discord.AllowedMentions.none())

    @staticmethod
    def format_traceback(error: BaseException) -> str:
        return "".join(traceback.format_exception(type(error), error, error.__traceback__))
