"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` command that emits one message per level on a
project logger and on a third-party logger, plus fixtures to register it, get
a CliRunner and run inside an isolated filesystem.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from nonempty.entrypoints.cli.main import nonempty

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit representative log messages for CLI/flight-recorder tests."""
    logger = logging.getLogger("nonempty.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and any Click-Extra sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command for the duration of a test."""
    nonempty.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(nonempty, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner, monkeypatch):
    """Run inside an isolated filesystem with the log path pointed into it."""
    with runner.isolated_filesystem():
        monkeypatch.setenv("NONEMPTY_LOG_PATH", "latest.log")
        yield


@pytest.fixture
def invoke(runner, fs):  # pylint: disable=unused-argument
    """Invoke ``nonempty`` with arguments and optional stdin text."""

    def _invoke(args, input=None, env=None):  # pylint: disable=redefined-builtin
        return runner.invoke(nonempty, args, input=input, env=env)

    return _invoke
