"""
Argument parsing for prefixed command messages.
"""

from typing import List, Tuple


def parse_args(content: str) -> List[str]:
    """
    Split message content into argument tokens.

    A token starting with a double quote runs to the next double quote
    (quotes removed, no escaping). Without a closing quote the token is
    the run of non-whitespace characters, like any other token.

    Args:
        content: Raw message content

    Returns:
        Ordered list of tokens, empty for blank content
    """
    args: List[str] = []
    remaining = content.strip()

    while remaining:
        closing = remaining.find('"', 1)
        if remaining.startswith('"') and closing > 0:
            arg = remaining[1:closing]
            remaining = remaining[closing + 1:]
        else:
            arg = remaining.split(None, 1)[0]
            remaining = remaining[len(arg):]

        args.append(arg.strip())
        remaining = remaining.strip()

    return args


def split_command(content: str, prefix: str) -> Tuple[str, List[str]]:
    """
    Parse a prefixed message into a command name and its arguments.

    Only the command name is lowercased; arguments keep their casing.

    Args:
        content: Message content, already known to start with the prefix
        prefix: Command prefix

    Returns:
        Tuple of (command_name, args)
    """
    args = parse_args(content)
    if not args:
        return "", []
    command_name = args.pop(0).lower()[len(prefix):]
    return command_name, args
