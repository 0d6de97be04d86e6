"""Parsing for the repeatable ``-L/--logger-level NAME=LEVEL`` option.

The option may be given several times, or once through
``NONEMPTY_LOGGER_LEVELS`` as a comma/space separated list. LEVEL is a level
name in any case (``info``, ``WARNING``) or a plain number (``15``).
"""

import logging
import re
from collections.abc import Iterable, Iterator

import click

from nonempty.config import DEFAULT_LOGGER_LEVELS

_SEPARATORS = re.compile(r"[,\s]+")


def _split_items(value: str | Iterable[str]) -> Iterator[str]:
    """Yield the non-empty NAME=LEVEL tokens of one or more raw option values."""
    for chunk in [value] if isinstance(value, str) else value:
        yield from filter(None, _SEPARATORS.split(chunk))


def _parse_level(text: str) -> int:
    text = text.strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelNamesMapping().get(text.upper())
    if level is None:
        raise click.BadParameter(f"Invalid log level: {text!r}")
    return level


def _parse_pair(item: str) -> tuple[str, int]:
    name, sep, level = item.partition("=")
    if not sep or not name.strip():
        raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
    return name.strip(), _parse_level(level)


def parse_log_level(
    ctx: click.Context | None,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | Iterable[str],
) -> dict[str, int]:
    """Click callback turning NAME=LEVEL items into a logger-name to level map.

    The result starts from `DEFAULT_LOGGER_LEVELS`; when a name repeats, the
    last occurrence wins.

    Raises:
        click.BadParameter: On an item without ``=``, an empty NAME or an
            unknown LEVEL.
    """
    levels = dict(DEFAULT_LOGGER_LEVELS)
    levels.update(_parse_pair(item) for item in _split_items(value))
    return levels
