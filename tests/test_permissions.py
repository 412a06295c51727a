"""
Tests for the permission validator.
"""

from types import SimpleNamespace

import discord
import pytest

from commands.permissions import is_valid_permission, normalize_permissions, validate_permissions
from utils.errors import MissingPermissionError


def _member(**flags):
    return SimpleNamespace(guild_permissions=discord.Permissions(**flags))


class TestValidatePermissions:
    def test_all_present_passes(self):
        validate_permissions(_member(manage_guild=True, ban_members=True), ["manage_guild", "ban_members"])

    def test_reports_the_missing_flag(self):
        with pytest.raises(MissingPermissionError) as exc_info:
            validate_permissions(_member(manage_guild=True), ["manage_guild", "ban_members"])
        assert exc_info.value.permission == "ban_members"

    def test_reports_the_first_missing_flag(self):
        with pytest.raises(MissingPermissionError) as exc_info:
            validate_permissions(_member(), ["manage_guild", "ban_members"])
        assert exc_info.value.permission == "manage_guild"

    def test_single_flag(self):
        with pytest.raises(MissingPermissionError) as exc_info:
            validate_permissions(_member(kick_members=True), "ban_members")
        assert exc_info.value.permission == "ban_members"

    def test_checks_fresh_every_call(self):
        member = _member()
        with pytest.raises(MissingPermissionError):
            validate_permissions(member, "manage_guild")
        member.guild_permissions = discord.Permissions(manage_guild=True)
        validate_permissions(member, "manage_guild")

    def test_author_without_guild_permissions_has_none(self):
        with pytest.raises(MissingPermissionError) as exc_info:
            validate_permissions(SimpleNamespace(id=1), ["send_messages"])
        assert exc_info.value.permission == "send_messages"


class TestHelpers:
    def test_normalize(self):
        assert normalize_permissions(None) == ()
        assert normalize_permissions("manage_guild") == ("manage_guild",)
        assert normalize_permissions(["a", "b"]) == ("a", "b")

    def test_valid_flags(self):
        assert is_valid_permission("manage_guild")
        assert not is_valid_permission("manageGuild")
