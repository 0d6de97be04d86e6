"""nonempty CLI entry point.

Defines the top-level ``nonempty`` command (via Click-Extra), wires up
logging, and registers the line-oriented subcommands.

Notes
- The CLI version is sourced from `nonempty.__version__` and displayed
  automatically by Click-Extra (``--version``).

Examples
    $ nonempty --version
    $ printf 'b\\na\\n' | nonempty summary --sort
"""

import logging
from pathlib import Path

import click
import click_extra as clickx

from nonempty import __version__
from nonempty.config import get_log_path
from nonempty.logging import (
    LoggingSettings,
    configure_logging,
    log_startup,
    verbosity_to_level,
)

from .commands import first, last, split, summary
from .helpers import hyperlink, parse_log_level

logger = logging.getLogger(__name__)


HELP = """nonempty command-line interface.

    Reads lines from a file or stdin into a list that is guaranteed to hold at
    least one element, and reports on it. Empty input is an error.
    """


LIST_DOCS_URL = "https://docs.python.org/3/tutorial/datastructures.html#more-on-lists"


def build_epilog() -> str:
    """The "See Also" block of ``nonempty --help``."""
    return "\b\n" + "\n".join(
        [
            f"{click.style('See Also:', fg='blue', bold=True, underline=True)}",
            "  Python lists: " + hyperlink(LIST_DOCS_URL, "More on Lists"),
        ]
    )


EPILOG = build_epilog()


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (timestamps and source paths in console logs).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file written by the flight recorder.",
    default=get_log_path,
    envvar="NONEMPTY_LOG_PATH",
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="NONEMPTY_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last N log records at DEBUG granularity (unaffected by -v/-q) "
        "and write them to --log-path when a WARNING/ERROR occurs, or on exit "
        "if --force-flush is set."
    ),
    default=True,
    envvar="NONEMPTY_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Write the flight recorder buffer to --log-path on program exit.",
    default=False,
    envvar="NONEMPTY_FORCE_FLUSH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to BOTH "
        "console and flight-recorder. Repeatable (e.g. -L asyncio=INFO) or via "
        "NONEMPTY_LOGGER_LEVELS (comma/space list)."
    ),
    envvar="NONEMPTY_LOGGER_LEVELS",
    show_envvar=True,
)
@clickx.pass_context
def nonempty(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """nonempty command-line interface."""
    settings = LoggingSettings(
        console_level=verbosity_to_level(verbose_count, quiet_count),
        debug=debug,
        color=ctx.color is not False,  # None means "let Rich decide"
        log_path=log_path if flight_recorder else None,
        capacity=flight_recorder_capacity,
        force_flush=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(settings)
    log_startup(logger, settings, handlers, app_version=__version__)
    ctx.call_on_close(logging.shutdown)


for command in (first, last, summary, split):
    nonempty.add_command(command)
