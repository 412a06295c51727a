"""
Logging utilities for the command client.
Uses Rich for colored console output.
"""

import logging
from typing import Dict, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

# Custom theme for logging
CUSTOM_THEME = Theme({
    "logging.level.command": "cyan",
    "logging.level.debug": "dim cyan",
})

console = Console(theme=CUSTOM_THEME)

# Default level for loggers created through get_logger
_default_level = logging.INFO

# Loggers configured by this module, keyed by name
_loggers: Dict[str, logging.Logger] = {}


def _make_handler(level: int) -> RichHandler:
    handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            fmt="[%(name)s] %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    return handler


def setup_logging(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Set up a logger with RichHandler.

    Args:
        name: Logger name
        level: Logging level (default: the module default, INFO unless debug is on)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if level is None:
        level = _default_level

    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers = []
    logger.addHandler(_make_handler(level))
    logger.propagate = False

    _loggers[name] = logger
    return logger


def set_debug(enabled: bool) -> None:
    """
    Switch every project logger between DEBUG and INFO.

    Args:
        enabled: True for DEBUG output
    """
    global _default_level
    _default_level = logging.DEBUG if enabled else logging.INFO

    for logger in _loggers.values():
        logger.setLevel(_default_level)
        for handler in logger.handlers:
            handler.setLevel(_default_level)


def setup_library_logging(name: str = "discord") -> logging.Logger:
    """Route a third-party library's logging through the Rich console."""
    level = logging.DEBUG if _default_level == logging.DEBUG else logging.WARNING
    return setup_logging(name, level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance, reusing one already configured."""
    logger = _loggers.get(name)
    if logger is not None:
        return logger
    return setup_logging(name)
