"""Callback for the ``-L/--logger-level`` option.

Each item is ``NAME=LEVEL``. Items come either one per repeated flag or as a
single comma/space separated string when read from ``AEROCODE_LOGGER_LEVELS``.
"""

import logging
import re
from collections.abc import Iterable

import click

DEFAULT_LIB_LEVELS = {"click_extra": logging.WARNING}

_SEPARATORS = re.compile(r"[,\s]+")


def _split_items(value: str | Iterable[str]) -> list[str]:
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _SEPARATORS.split(chunk) if item]


def _parse_item(item: str) -> tuple[str, int]:
    name, sep, level_name = item.partition("=")
    if not sep or not name.strip():
        raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
    level = logging.getLevelNamesMapping().get(level_name.strip().upper())
    if level is None:
        raise click.BadParameter(f"Invalid log level: {level_name}")
    return name.strip(), level


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | Iterable[str],
) -> dict[str, int]:
    """Turn ``NAME=LEVEL`` items into a logger name to level mapping.

    Starts from ``DEFAULT_LIB_LEVELS``; later items win over earlier ones.
    Level names are case-insensitive.

    Raises:
        click.BadParameter: On an item without ``=`` or an unknown level name.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    levels.update(_parse_item(item) for item in _split_items(value))
    return levels
