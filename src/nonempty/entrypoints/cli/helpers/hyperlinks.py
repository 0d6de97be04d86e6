"""Clickable terminal links for help epilogs.

Links use the OSC-8 escape sequence. Terminals that do not understand it would
print the raw escape bytes, so we only emit it when the environment names a
terminal known to render it.
"""

import os
import sys
from collections.abc import Callable
from typing import TextIO

_OSC8_PROGRAMS = frozenset({"apple_terminal", "iterm.app", "kitty", "vscode", "wezterm"})
_OSC8_TERM_PREFIXES = ("alacritty", "konsole")

_SIGNALS: tuple[Callable[[], bool], ...] = (
    lambda: os.getenv("TERM_PROGRAM", "").lower() in _OSC8_PROGRAMS,
    lambda: bool(os.getenv("WT_SESSION")),  # Windows Terminal
    lambda: bool(os.getenv("VTE_VERSION")),  # GNOME Terminal, Tilix
    lambda: os.getenv("TERM", "").startswith(_OSC8_TERM_PREFIXES),
)


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Guess whether ``stream`` (stdout by default) renders OSC-8 links.

    Redirected output never does.
    """
    target = stream if stream is not None else sys.stdout
    isatty = getattr(target, "isatty", None)
    if isatty is None or not isatty():
        return False
    return any(signal() for signal in _SIGNALS)


def hyperlink(url: str, label: str | None = None) -> str:
    """Render ``url`` as a clickable link showing ``label``.

    Falls back to the bare URL (never the label, which would hide the target)
    when the terminal is not known to support OSC-8.
    """
    if not supports_osc8():
        return url
    text = label if label else url
    return "\x1b]8;;" + url + "\x07" + text + "\x1b]8;;\x07"
