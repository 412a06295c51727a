"""English (default language)."""

STRINGS = {
    "language_name": "English",

    # Dispatch
    "cant_use_command_in_dm": "❌ This command can't be used in direct messages.",
    "missing_permission": lambda permission: f"❌ You need the **{permission}** permission to use this command.",
    "command_error": "❌ Something went wrong while running this command. The error has been reported.",

    # Permission display names
    "permission_manage_guild": "Manage Server",
    "permission_manage_channels": "Manage Channels",
    "permission_manage_messages": "Manage Messages",
    "permission_kick_members": "Kick Members",
    "permission_ban_members": "Ban Members",
    "permission_administrator": "Administrator",

    # Groups
    "group_general": "General",
    "group_settings": "Settings",
    "group_owner": "Owner",
    "group_uncategorized": "Uncategorized",

    # help
    "help_description": "Show the list of commands or details about one command.",
    "help_usage": "help [command]",
    "help_title": "📖 **Commands**",
    "help_footer": lambda prefix: f"Use `{prefix}help <command>` for details about a command.",
    "help_unknown_command": lambda name: f"❌ Unknown command: `{name}`",
    "help_command_title": lambda name: f"📖 **Command:** `{name}`",
    "help_description_label": "Description",
    "help_usage_label": "Usage",
    "help_guild_only": "Only usable in servers.",

    # modlogs
    "modlogs": "Mod logs",
    "modlogs_description": "Show or change the channel moderation logs are sent to.",
    "modlogs_usage": "modlogs [#channel | disable]",
    "modlogs_enabled": lambda channel: f"Moderation logs are sent to {channel}.",
    "modlogs_disabled": "Moderation logs are disabled.",
    "modlogs_tip": lambda prefix: f"Use {prefix}modlogs #channel to change the channel or {prefix}modlogs disable to turn them off.",
    "modlogs_disable_success": "✅ Moderation logs disabled.",
    "modlogs_dont_have_perms": "I can't post there",
    "modlogs_dont_have_perms_desc": "I need the Send Messages and Embed Links permissions in that channel.",
    "modlogs_success": lambda channel: f"✅ Moderation logs will be sent to #{channel}.",
    "invalid_channel": "❌ That is not a text channel I can see.",

    # language
    "language_description": "Show or change the language the bot answers you in.",
    "language_usage": "language [code]",
    "language_current": lambda name: f"Your language is **{name}**.",
    "language_available": lambda codes: f"Available languages: {codes}",
    "language_unknown": lambda code: f"❌ Unknown language: `{code}`",
    "language_success": lambda name: f"✅ Your language is now **{name}**.",

    # reload
    "reload_description": "Reload a command module or every language file.",
    "reload_usage": "reload <command | languages>",
    "reload_no_args": "❌ Tell me what to reload: a command name or `languages`.",
    "reload_command_success": lambda name: f"✅ Reloaded the `{name}` command.",
    "reload_command_not_found": lambda name: f"❌ There is no `{name}` command.",
    "reload_languages_success": lambda count: f"✅ Reloaded {count} languages.",
}
