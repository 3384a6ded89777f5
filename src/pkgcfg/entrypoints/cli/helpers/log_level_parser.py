"""Parsing of ``-L/--logger-level NAME=LEVEL`` options.

Values may be repeated on the command line or given as one comma/space
separated string (as read from ``PKGCFG_LOGGER_LEVEL``). The HTTP stack used
by ``pkgcfg fetch`` is chatty at DEBUG, so its loggers default to WARNING.
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS = {"httpx": logging.WARNING, "httpcore": logging.WARNING}

_ITEM_SEPARATORS = re.compile(r"[,\s]+")


def split_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten option value(s) into non-empty ``NAME=LEVEL`` items."""
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _ITEM_SEPARATORS.split(chunk) if item]


def parse_level_name(level_name: str) -> int:
    """Convert a level name such as ``"info"`` into its numeric value.

    Raises:
        click.BadParameter: If the name is not a standard logging level.
    """
    level = logging.getLevelNamesMapping().get(level_name.strip().upper())
    if level is None:
        raise click.BadParameter(f"Invalid log level: {level_name}")
    return level


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback that parses NAME=LEVEL pairs into a name->level dict.

    Starts from DEFAULT_LIB_LEVELS; later items override earlier ones.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is invalid.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in split_items(value):
        name, equals, level_name = item.partition("=")
        if not equals or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        levels[name.strip()] = parse_level_name(level_name)
    return levels
