"""
Shared fixtures: fake Discord messages and throwaway importable packages.
"""

import importlib
import sys
import textwrap
import uuid
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import discord
import pytest

from bot.localization import LanguageRegistry


def _make_message(
    content: str,
    *,
    author_id: int = 1,
    bot: bool = False,
    in_guild: bool = True,
    permissions: discord.Permissions = None,
):
    """Build a message-like object with an awaitable channel.send."""
    author = SimpleNamespace(id=author_id, name="tester", discriminator="0", bot=bot)
    if in_guild:
        author.guild_permissions = permissions or discord.Permissions.none()

    channel = MagicMock()
    channel.send = AsyncMock()

    guild = SimpleNamespace(id=10, name="Test Guild", me=MagicMock()) if in_guild else None
    return SimpleNamespace(content=content, author=author, channel=channel, guild=guild)


@pytest.fixture
def make_message():
    return _make_message


@pytest.fixture
def languages():
    registry = LanguageRegistry()
    registry.load_all()
    return registry


@pytest.fixture
def make_package(tmp_path, monkeypatch):
    """
    Write a package to a temporary directory and make it importable.

    Files are given as {relative path: source}; every directory gets an
    __init__.py. Returns the generated package name.
    """
    monkeypatch.syspath_prepend(str(tmp_path))
    # Rewritten modules must be read from source, never from a stale .pyc
    monkeypatch.setattr(sys, "dont_write_bytecode", True)
    created = []

    def _make(files):
        name = f"pkg_{uuid.uuid4().hex[:8]}"
        root = tmp_path / name
        root.mkdir()
        (root / "__init__.py").write_text("")
        for rel, source in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            init = path.parent / "__init__.py"
            if not init.exists():
                init.write_text("")
            path.write_text(textwrap.dedent(source))
        importlib.invalidate_caches()
        created.append(name)
        return name

    _make.root = tmp_path
    yield _make

    for name in created:
        for module in [m for m in sys.modules if m == name or m.startswith(name + ".")]:
            del sys.modules[module]
