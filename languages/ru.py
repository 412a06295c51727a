"""Russian. Keys missing here fall back to English."""

STRINGS = {
    "language_name": "Русский",

    "cant_use_command_in_dm": "❌ Эту команду нельзя использовать в личных сообщениях.",
    "missing_permission": lambda permission: f"❌ Для этой команды нужно право **{permission}**.",
    "command_error": "❌ При выполнении команды произошла ошибка. Мы уже сообщили о ней.",

    "permission_manage_guild": "Управлять сервером",
    "permission_ban_members": "Банить участников",
    "permission_kick_members": "Выгонять участников",

    "group_general": "Общее",
    "group_settings": "Настройки",

    "help_description": "Показать список команд или описание одной команды.",
    "help_usage": "help [команда]",
    "help_title": "📖 **Команды**",
    "help_footer": lambda prefix: f"Используйте `{prefix}help <команда>`, чтобы узнать подробнее.",
    "help_unknown_command": lambda name: f"❌ Неизвестная команда: `{name}`",

    "modlogs": "Журнал модерации",
    "modlogs_description": "Показать или изменить канал журнала модерации.",
    "modlogs_usage": "modlogs [#канал | disable]",
    "modlogs_enabled": lambda channel: f"Журнал модерации отправляется в {channel}.",
    "modlogs_disabled": "Журнал модерации выключен.",
    "modlogs_disable_success": "✅ Журнал модерации выключен.",
    "modlogs_success": lambda channel: f"✅ Журнал модерации будет отправляться в #{channel}.",
    "invalid_channel": "❌ Это не текстовый канал, который я вижу.",

    "language_description": "Показать или изменить язык ответов бота.",
    "language_usage": "language [код]",
    "language_current": lambda name: f"Ваш язык: **{name}**.",
    "language_unknown": lambda code: f"❌ Неизвестный язык: `{code}`",
    "language_success": lambda name: f"✅ Теперь ваш язык: **{name}**.",
}
