"""Line-oriented commands built on `NonEmptyList`.

Every command reads the non-blank lines of FILE (``-`` or omitted for stdin)
and collects them into a ``NonEmptyList[str]``. Empty input and input that is
not valid UTF-8 are the expected failures: they are reported on
stderr and exit with status 1.

Commands
- ``first``   print the first line.
- ``last``    print the last line.
- ``summary`` print count/first/last, optionally after sort/dedup/truncate.
- ``split``   split the lines at a position and print one side.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from typing import TextIO

import click

from nonempty.domain.collect import try_collect
from nonempty.domain.errors import EmptyInputError
from nonempty.domain.non_empty_list import NonEmptyList

from .helpers import error, success, warn

logger = logging.getLogger(__name__)

NO_INPUT_MSG = "No input lines to collect."
BAD_ENCODING_MSG = "Input is not valid UTF-8."

source_argument = click.argument(
    "source",
    type=click.File("r", encoding="utf-8"),
    default="-",
)


def _read_lines(source: TextIO) -> Iterator[str]:
    return (line.rstrip("\r\n") for line in source if line.strip())


def collect_lines(source: TextIO) -> NonEmptyList[str]:
    """Collect the non-blank lines of ``source``.

    Raises:
        click.exceptions.Exit: With status 1 when there is no line to collect
            or the input is not valid UTF-8.
    """
    name = getattr(source, "name", "<stream>")
    try:
        lines = try_collect(_read_lines(source))
    except EmptyInputError as e:
        logger.info("Nothing to collect from %s", name)
        error(NO_INPUT_MSG)
        raise click.exceptions.Exit(1) from e
    except UnicodeDecodeError as e:
        logger.info("Undecodable input from %s: %s", name, e)
        error(BAD_ENCODING_MSG)
        raise click.exceptions.Exit(1) from e
    logger.info("Collected %d line(s) from %s", len(lines), name)
    return lines


@click.command()
@source_argument
def first(source: TextIO) -> None:
    """Print the first non-blank line of SOURCE."""
    click.echo(collect_lines(source).first())


@click.command()
@source_argument
def last(source: TextIO) -> None:
    """Print the last non-blank line of SOURCE."""
    click.echo(collect_lines(source).last())


@click.command()
@source_argument
@click.option("--sort", "sort_lines", is_flag=True, help="Sort lines first.")
@click.option(
    "--dedup", is_flag=True, help="Drop consecutive duplicate lines (after --sort)."
)
@click.option(
    "--truncate",
    type=click.IntRange(min=1),
    default=None,
    help="Keep only the first N lines (after --sort and --dedup). N >= 1.",
)
@click.option("--json", "as_json", is_flag=True, help="Emit a JSON object.")
def summary(
    source: TextIO,
    sort_lines: bool,
    dedup: bool,
    truncate: int | None,
    as_json: bool,
) -> None:
    """Print the line count and the first and last lines of SOURCE."""
    lines = collect_lines(source)
    if sort_lines:
        lines.sort()
    if dedup:
        lines.dedup()
    if truncate is not None:
        if truncate >= len(lines):
            warn(f"Nothing to truncate: {len(lines)} line(s) left.")
        lines.truncate(truncate)

    report = {"count": len(lines), "first": lines.first(), "last": lines.last()}
    if as_json:
        click.echo(json.dumps(report))
        return
    for key, value in report.items():
        click.echo(f"{key:<6}: {value}")


@click.command()
@source_argument
@click.option(
    "--at",
    type=click.IntRange(min=1),
    required=True,
    help="Number of lines kept in the head. N >= 1.",
)
@click.option("--tail", "show_tail", is_flag=True, help="Print the tail instead.")
def split(source: TextIO, at: int, show_tail: bool) -> None:
    """Split the lines of SOURCE after the first AT lines.

    The head always keeps at least one line; the tail may be empty.
    """
    lines = collect_lines(source)
    if at > len(lines):
        raise click.ClickException(
            f"--at {at} is past the end of the input ({len(lines)} line(s))."
        )
    tail = lines.split_off(at)
    for line in tail if show_tail else lines:
        click.echo(line)
    success(f"Kept {len(lines)} line(s), split off {len(tail)}.")
