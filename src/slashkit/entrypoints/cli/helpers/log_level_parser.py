"""Parsing of ``-L NAME=LEVEL`` logger overrides.

Values arrive either as repeated CLI options or as a single comma/space
separated string from ``SLASHKIT_LOGGER_LEVELS``; both shapes are flattened
into individual ``NAME=LEVEL`` items before conversion to numeric levels.
"""

import logging
import re

import click

# Third-party loggers quieted unless overridden
DEFAULT_LIB_LEVELS = {"click_extra": logging.WARNING}

ITEM_SEPARATOR_RE = re.compile(r"[,\s]+")


def _split_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten the raw option value into non-empty ``NAME=LEVEL`` items.

    Args:
        value: One string, or a sequence of strings from a repeatable option.

    Returns:
        list[str]: The individual items, in input order.
    """
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in ITEM_SEPARATOR_RE.split(chunk) if item]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback turning ``NAME=LEVEL`` items into a name->level dict.

    Starts from `DEFAULT_LIB_LEVELS`; later items override earlier ones. Level
    names are case-insensitive.

    Args:
        ctx: Click context (unused).
        param: Click parameter (unused).
        value: The raw option value(s).

    Returns:
        dict[str, int]: Mapping of logger names to numeric logging levels.

    Raises:
        click.BadParameter: If an item is not ``NAME=LEVEL`` or LEVEL is unknown.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _split_items(value):
        name, sep, level_name = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        level = logging.getLevelNamesMapping().get(level_name.strip().upper())
        if level is None:
            raise click.BadParameter(f"Invalid log level: {level_name}")
        levels[name.strip()] = level
    return levels
