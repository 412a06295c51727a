"""
End-to-end tests for CommandDispatcher with fake messages.
"""

from unittest.mock import AsyncMock, MagicMock

import discord
import pytest

from bot.database import Database
from commands.dispatcher import COMMAND_ERROR_EVENT, CommandDispatcher
from commands.registry import Command, CommandDefinition, CommandRegistry
from repositories.language_repository import LanguageRepository
from utils.errors import MissingPermissionError

OWNER_ID = 99


def _command(name, run=None, **options):
    return Command(CommandDefinition(name, **options), run or AsyncMock(), f"tests.fake.{name}")


def _dispatcher(languages, *commands, language_repository=None, prefix="!"):
    registry = CommandRegistry()
    for command in commands:
        registry.register(command)
    client = MagicMock()
    emit = MagicMock()
    dispatcher = CommandDispatcher(
        client,
        registry=registry,
        languages=languages,
        language_repository=language_repository or LanguageRepository(Database("")),
        emit=emit,
        prefix=prefix,
        owners=[OWNER_ID],
    )
    return dispatcher, client, emit


class TestFiltering:
    @pytest.mark.asyncio
    async def test_unknown_command_is_ignored(self, languages, make_message):
        repository = MagicMock()
        repository.find_or_create = AsyncMock()
        dispatcher, _, emit = _dispatcher(languages, language_repository=repository)
        message = make_message("!ping")

        await dispatcher.dispatch(message)

        emit.assert_not_called()
        message.channel.send.assert_not_awaited()
        repository.find_or_create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_message_without_prefix_is_ignored(self, languages, make_message):
        ping = _command("ping")
        dispatcher, _, emit = _dispatcher(languages, ping)

        await dispatcher.dispatch(make_message("ping"))

        ping.run.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_bot_authors_are_ignored(self, languages, make_message):
        ping = _command("ping")
        dispatcher, _, _ = _dispatcher(languages, ping)

        await dispatcher.dispatch(make_message("!ping", bot=True))

        ping.run.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_prefix_match_is_case_insensitive(self, languages, make_message):
        ping = _command("ping")
        dispatcher, _, _ = _dispatcher(languages, ping, prefix="yey!")

        await dispatcher.dispatch(make_message("YEY!Ping"))

        ping.run.assert_awaited_once()


class TestExecution:
    @pytest.mark.asyncio
    async def test_runs_with_context_args_prefix_and_language(self, languages, make_message):
        echo = _command("echo")
        dispatcher, client, emit = _dispatcher(languages, echo)
        message = make_message('!ECHO Hello "Big World"')

        await dispatcher.dispatch(message)

        echo.run.assert_awaited_once_with(
            client, message, ["Hello", "Big World"], "!", languages.get("en")
        )
        emit.assert_not_called()

    @pytest.mark.asyncio
    async def test_uses_stored_user_language(self, languages, make_message):
        repository = MagicMock()
        repository.find_or_create = AsyncMock(return_value={"user_id": "1", "lang": "ru"})
        echo = _command("echo")
        dispatcher, _, _ = _dispatcher(languages, echo, language_repository=repository)

        await dispatcher.dispatch(make_message("!echo"))

        repository.find_or_create.assert_awaited_once_with(1, {"lang": "en"})
        assert echo.run.await_args.args[4] is languages.get("ru")

    @pytest.mark.asyncio
    async def test_stored_language_no_longer_loaded_raises(self, languages, make_message):
        repository = MagicMock()
        repository.find_or_create = AsyncMock(return_value={"user_id": "1", "lang": "de"})
        echo = _command("echo")
        dispatcher, _, emit = _dispatcher(languages, echo, language_repository=repository)

        with pytest.raises(KeyError):
            await dispatcher.dispatch(make_message("!echo"))

        echo.run.assert_not_awaited()
        emit.assert_not_called()

    @pytest.mark.asyncio
    async def test_handler_error_emits_one_event(self, languages, make_message):
        error = RuntimeError("boom")
        broken = _command("broken", run=AsyncMock(side_effect=error))
        dispatcher, _, emit = _dispatcher(languages, broken)
        message = make_message("!broken")

        await dispatcher.dispatch(message)

        emit.assert_called_once_with(
            COMMAND_ERROR_EVENT, "broken", message, error, True, languages.get("en")
        )


class TestAuthorization:
    @pytest.mark.asyncio
    async def test_guild_only_in_dm_replies_and_stops(self, languages, make_message):
        kick = _command("kick", guild_only=True)
        dispatcher, _, emit = _dispatcher(languages, kick)
        message = make_message("!kick", in_guild=False)

        await dispatcher.dispatch(message)

        message.channel.send.assert_awaited_once_with(languages.get("en").cant_use_command_in_dm)
        kick.run.assert_not_awaited()
        emit.assert_not_called()

    @pytest.mark.asyncio
    async def test_owner_only_from_non_owner_is_silent(self, languages, make_message):
        shutdown = _command("shutdown", owner_only=True)
        dispatcher, _, emit = _dispatcher(languages, shutdown)
        message = make_message("!shutdown", author_id=1)

        await dispatcher.dispatch(message)

        shutdown.run.assert_not_awaited()
        message.channel.send.assert_not_awaited()
        emit.assert_not_called()

    @pytest.mark.asyncio
    async def test_owner_only_from_owner_runs(self, languages, make_message):
        shutdown = _command("shutdown", owner_only=True)
        dispatcher, _, _ = _dispatcher(languages, shutdown)

        await dispatcher.dispatch(make_message("!shutdown", author_id=OWNER_ID))

        shutdown.run.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_missing_permission_goes_to_error_event(self, languages, make_message):
        ban = _command("ban", required_permissions=["kick_members", "ban_members"])
        dispatcher, _, emit = _dispatcher(languages, ban)
        message = make_message("!ban", permissions=discord.Permissions(kick_members=True))

        await dispatcher.dispatch(message)

        ban.run.assert_not_awaited()
        emit.assert_called_once()
        event, name, _, error, from_command, _ = emit.call_args.args
        assert (event, name, from_command) == (COMMAND_ERROR_EVENT, "ban", True)
        assert isinstance(error, MissingPermissionError)
        assert error.permission == "ban_members"

    @pytest.mark.asyncio
    async def test_permitted_member_runs(self, languages, make_message):
        ban = _command("ban", required_permissions="ban_members")
        dispatcher, _, emit = _dispatcher(languages, ban)

        await dispatcher.dispatch(make_message("!ban", permissions=discord.Permissions(ban_members=True)))

        ban.run.assert_awaited_once()
        emit.assert_not_called()


class TestReloadDuringDispatch:
    @pytest.mark.asyncio
    async def test_in_flight_dispatch_keeps_its_command(self, languages, make_message):
        registry_holder = {}

        async def old_run(client, message, args, prefix, lang):
            registry_holder["registry"].register(_command("swap", run=AsyncMock()))

        swap = _command("swap", run=AsyncMock(side_effect=old_run))
        dispatcher, _, emit = _dispatcher(languages, swap)
        registry_holder["registry"] = dispatcher.registry

        await dispatcher.dispatch(make_message("!swap"))

        swap.run.assert_awaited_once()
        assert dispatcher.registry.get("swap") is not swap
        emit.assert_not_called()
