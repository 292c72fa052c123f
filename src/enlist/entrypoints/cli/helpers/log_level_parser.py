"""Helpers for parsing ``-L/--logger-level`` CLI options.

Values look like ``NAME=LEVEL`` and may be repeated or packed into one
comma/space-separated string (as they arrive from ``ENLIST_LOGGER_LEVELS``).
LEVEL is a standard level name (case-insensitive) or a non-negative integer.
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS = {"asyncio": logging.WARNING}
_SEPARATORS = re.compile(r"[,\s]+")


def _split_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten option value(s) into individual ``NAME=LEVEL`` items."""
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _SEPARATORS.split(chunk) if item]


def _parse_level(level_str: str) -> int:
    """Convert a level name or number to a numeric logging level.

    Raises:
        click.BadParameter: If the level is neither a known name nor a number.
    """
    text = level_str.strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelNamesMapping().get(text.upper())
    if level is None:
        raise click.BadParameter(f"Invalid log level: {level_str}")
    return level


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback that parses NAME=LEVEL pairs into a name->level dict.

    Starts from DEFAULT_LIB_LEVELS; later items override earlier ones.

    Returns:
        dict[str, int]: Mapping of logger names to numeric logging levels.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is invalid.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _split_items(value):
        name, sep, level_str = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        levels[name.strip()] = _parse_level(level_str)
    return levels
