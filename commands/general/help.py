"""
Help Command
Shows available commands and command details
"""

from typing import Any, List

from utils.discord import DiscordUtils

COMMAND = {
    "name": "help",
    "group": "general",
    "description": "help_description",
    "usage": "help_usage",
}


def generate_help(client: Any, prefix: str, lang: Any) -> str:
    """
    Generate help text for every command visible to everyone.

    Returns:
        Formatted help string
    """
    lines = [lang.help_title, ""]

    for group in client.registry.get_groups():
        commands = [cmd for cmd in client.registry.get_by_group(group.name) if not cmd.owner_only]
        if not commands:
            continue

        lines.append(f"**{lang.get(group.display_key, group.name)}:**")
        for cmd in commands:
            lines.append(f"• `{prefix}{cmd.name}` - {lang.get(cmd.description, '')}")
        lines.append("")

    lines.append(lang.help_footer(prefix))
    return "\n".join(lines)


def generate_command_help(command: Any, prefix: str, lang: Any) -> str:
    """Generate detailed help for one command."""
    lines = [
        lang.help_command_title(command.name),
        "",
        f"**{lang.help_description_label}:** {lang.get(command.description, '')}",
        f"**{lang.help_usage_label}:** `{prefix}{lang.get(command.usage, command.name)}`",
    ]
    if command.guild_only:
        lines.append(lang.help_guild_only)
    return "\n".join(lines)


async def run(client: Any, message: Any, args: List[str], prefix: str, lang: Any) -> None:
    if not args:
        await DiscordUtils.safe_send(message.channel, generate_help(client, prefix, lang))
        return

    name = args[0].lower()
    if name.startswith(prefix):
        name = name[len(prefix):]

    command = client.registry.get(name)
    if command is None or command.owner_only:
        await DiscordUtils.safe_send(message.channel, lang.help_unknown_command(name))
        return

    await DiscordUtils.safe_send(message.channel, generate_command_help(command, prefix, lang))
