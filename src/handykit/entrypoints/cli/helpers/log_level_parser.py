"""Parsing of ``-L NAME=LEVEL`` logger-level options.

Values arrive either as repeated options or as one comma/space separated
string (from ``HANDYKIT_LOGGER_LEVELS``).
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS = {"asyncio": logging.WARNING}

_ITEM_SEPARATORS = re.compile(r"[,\s]+")


def _normalize_items(value: str | list[str] | tuple[str, ...] | None) -> list[str]:
    """Flatten a string or a sequence of strings into non-empty items."""
    if value is None:
        return []
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _ITEM_SEPARATORS.split(chunk) if item]


def parse_log_level(
    ctx: click.Context | None,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...] | None,
) -> dict[str, int]:
    """Click callback that parses NAME=LEVEL pairs into a name->level dict.

    Starts from ``DEFAULT_LIB_LEVELS``; later items override earlier ones.

    Returns:
        dict[str, int]: Mapping of logger names to numeric logging levels.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is unknown.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        name, sep, level_str = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        lvl = logging.getLevelNamesMapping().get(level_str.strip().upper())
        if lvl is None:
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels
