"""Logging setup for the nonempty CLI.

Two handlers hang off the root logger:

* a Rich console handler on stderr whose threshold follows ``-v``/``-q``;
* a "flight recorder": a `MemoryHandler` that keeps the most recent records
  at DEBUG granularity and writes them to a file only when something goes
  wrong (a WARNING or worse), or on exit when asked to.

The root logger itself is opened up to DEBUG; the handlers do the filtering.
Per-logger minimum levels (``-L NAME=LEVEL``) apply to both handlers.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from importlib.metadata import version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Handler, Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "nonempty"

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
FILE_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)

type ColorSystem = Literal["auto", "standard", "256", "truecolor", "windows"]


@dataclass(frozen=True, slots=True)
class LoggingSettings:
    """Everything the CLI knows about how to log.

    ``log_path=None`` turns the flight recorder off.
    """

    console_level: int = logging.WARNING
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    capacity: int = 2000
    force_flush: bool = False
    logger_levels: Mapping[str, int] = field(default_factory=dict)

    @property
    def flight_recorder(self) -> bool:
        return self.log_path is not None


def verbosity_to_level(verbose: int = 0, quiet: int = 0) -> int:
    """Map ``-v``/``-q`` counts onto a level, one step of 10 per flag.

    Starts from WARNING and is clamped to the DEBUG..CRITICAL range.
    """
    level = logging.WARNING + 10 * (quiet - verbose)
    return min(max(level, logging.DEBUG), logging.CRITICAL)


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from outside the project with their top-level package.

    Sets ``record.prefix`` to e.g. ``"[asyncio]"`` for foreign loggers and to
    ``""`` for ``nonempty.*``. Records are never dropped.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        ours = record.name.startswith(PROJECT_PREFIX)
        record.prefix = "" if ours else f"[{record.name.partition('.')[0]}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    Debug mode forces the threshold to DEBUG and shows timestamps, logger names
    and source locations. Outside debug mode foreign records get a short
    ``[package]`` prefix instead.
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build the flight recorder writing to ``path``.

    Up to ``capacity`` records are held in memory. A record at ``flush_level``
    or above (or a full buffer) writes them all out. The file is truncated and
    created lazily, on the first flush, so a clean run leaves no log behind.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(FILE_FORMAT))
    return MemoryHandler(
        capacity, flushLevel=flush_level, target=target, flushOnClose=flush_on_close
    )


def configure_logging(settings: LoggingSettings) -> list[Handler]:
    """Install the handlers described by ``settings`` on the root logger.

    Replaces whatever handlers the root logger had before.

    Returns:
        The installed handlers, console first.
    """
    handlers: list[Handler] = [
        config_console_handler(settings.console_level, settings.debug, settings.color)
    ]
    if settings.log_path is not None:
        handlers.append(
            config_flight_recorder(
                settings.log_path,
                capacity=settings.capacity,
                flush_on_close=settings.force_flush,
            )
        )
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def log_startup(
    logger: Logger,
    settings: LoggingSettings,
    handlers: list[Handler],
    app_version: str,
) -> None:
    """Log a one-line INFO banner followed by DEBUG environment details.

    The DEBUG lines only reach the console with ``-vv``, but the flight
    recorder always keeps them, which is what makes a flushed log useful.
    """
    logger.info(
        "NONEMPTY %s - console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(settings.console_level),
        "ON" if settings.flight_recorder else "OFF",
    )
    logger.debug("Python: %s", platform.python_version())
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("Executable: %s", sys.executable)
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    for dist in ("click", "click-extra", "rich"):
        logger.debug("%s: %s", dist.title().replace("-", " "), version(dist))
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if settings.flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            settings.log_path,
            settings.capacity,
            settings.force_flush,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {
            name: logging.getLevelName(level)
            for name, level in settings.logger_levels.items()
        }
        or "<none>",
    )
