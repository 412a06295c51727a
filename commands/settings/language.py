"""
Language Command
Shows or changes the language the bot answers a user in
"""

from typing import Any, List

from utils.discord import DiscordUtils
from utils.validation import ValidationUtils

COMMAND = {
    "name": "language",
    "group": "settings",
    "description": "language_description",
    "usage": "language_usage",
}


async def run(client: Any, message: Any, args: List[str], prefix: str, lang: Any) -> None:
    if not args:
        codes = ", ".join(
            f"`{code}` ({client.languages.get(code).language_name})"
            for code in client.languages.codes
        )
        await DiscordUtils.safe_send(
            message.channel,
            f"{lang.language_current(lang.language_name)}\n{lang.language_available(codes)}",
        )
        return

    validation = ValidationUtils.validate_language_code(args[0])
    if not validation or validation.sanitized not in client.languages:
        await DiscordUtils.safe_send(message.channel, lang.language_unknown(args[0]))
        return

    await client.language_repository.set_language(message.author.id, validation.sanitized)

    new_lang = client.languages.get(validation.sanitized)
    await DiscordUtils.safe_send(message.channel, new_lang.language_success(new_lang.language_name))
