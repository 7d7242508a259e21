"""Parsing of ``-L/--logger-level NAME=LEVEL`` values.

Values may be repeated on the command line or given as one comma/space
separated string (``CARTSOURCE_LOGGER_LEVELS``). Later entries win.
"""

import logging
import re

import click

_SEPARATORS = re.compile(r"[,\s]+")


def _normalize_items(value: str | list[str] | tuple[str, ...] | None) -> list[str]:
    """Flatten the option value into non-empty ``NAME=LEVEL`` fragments."""
    if value is None:
        return []
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _SEPARATORS.split(chunk) if item]


def _parse_item(item: str) -> tuple[str, int]:
    name, sep, level_name = item.partition("=")
    if not sep or not name.strip():
        raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
    level = logging.getLevelName(level_name.strip().upper())
    if not isinstance(level, int):
        raise click.BadParameter(f"Invalid log level: {level_name}")
    return name.strip(), level


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...] | None,
) -> dict[str, int]:
    """Click callback turning ``NAME=LEVEL`` items into a name -> level mapping.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or names an unknown level.
    """
    return dict(_parse_item(item) for item in _normalize_items(value))
