"""One-line status messages for the nonempty CLI.

Messages go to stderr, leaving stdout for the lines a command prints. Each kind
carries an emoji that degrades to an ASCII tag when stderr cannot encode it
(e.g. a ``cp1252`` console or ``PYTHONIOENCODING=ascii``).
"""

from typing import NamedTuple

import click


class _Kind(NamedTuple):
    emoji: str
    ascii: str
    color: str


_CAUTION = _Kind("⚠️", "[!]", "yellow")  # pragma: no mutate
_SUCCESS = _Kind("✅", "[OK]", "green")  # pragma: no mutate
_ERROR = _Kind("❌", "[X]", "red")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Whether the current stderr stream can encode ``character``."""
    encoding = click.get_text_stream("stderr").encoding or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(kind: _Kind) -> str:
    return kind.emoji if _supports_character(kind.emoji) else kind.ascii


def _emit(kind: _Kind, msg: str) -> None:
    click.secho(f"{_glyph(kind)}  {msg}", fg=kind.color, bold=True, err=True)


def warn(msg: str) -> None:
    """Print a bold yellow warning, e.g. ``⚠️  Nothing to truncate: 3 line(s) left.``"""
    _emit(_CAUTION, msg)


def success(msg: str) -> None:
    """Print a bold green confirmation, e.g. ``✅  Kept 2 line(s), split off 1.``"""
    _emit(_SUCCESS, msg)


def error(msg: str) -> None:
    """Print a bold red error, e.g. ``❌  No input lines to collect.``"""
    _emit(_ERROR, msg)
