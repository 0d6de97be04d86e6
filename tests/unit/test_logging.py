"""Unit tests for nonempty.logging."""

import logging
from logging.handlers import MemoryHandler
from pathlib import Path

import pytest
from rich.logging import RichHandler

from nonempty.logging import (
    LoggingSettings,
    ThirdPartyPrefixFilter,
    config_console_handler,
    config_flight_recorder,
    configure_logging,
    log_startup,
    verbosity_to_level,
)

# pylint: disable=magic-value-comparison


def make_record(name: str) -> logging.LogRecord:
    """Build a bare INFO record for logger ``name``."""
    return logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)


@pytest.mark.parametrize(
    ("verbose", "quiet", "level"),
    [
        (0, 0, logging.WARNING),
        (1, 0, logging.INFO),
        (2, 0, logging.DEBUG),
        (5, 0, logging.DEBUG),
        (0, 1, logging.ERROR),
        (0, 4, logging.CRITICAL),
        (2, 1, logging.INFO),
    ],
)
def test_verbosity_to_level(verbose, quiet, level):
    assert verbosity_to_level(verbose, quiet) == level


@pytest.mark.parametrize(
    ("name", "prefix"),
    [
        ("nonempty.domain.non_empty_list", ""),
        ("asyncio", "[asyncio]"),
        ("urllib3.connectionpool", "[urllib3]"),
    ],
)
def test_third_party_prefix(name, prefix):
    """Foreign records get a bracketed prefix; project records none."""
    record = make_record(name)
    assert ThirdPartyPrefixFilter().filter(record) is True
    assert record.prefix == prefix


class TestConsoleHandler:
    """`config_console_handler`."""

    @staticmethod
    def test_defaults():
        handler = config_console_handler(level=logging.WARNING)
        assert isinstance(handler, RichHandler)
        assert handler.level == logging.WARNING
        assert any(isinstance(f, ThirdPartyPrefixFilter) for f in handler.filters)

    @staticmethod
    def test_debug_mode():
        """Debug mode forces DEBUG and drops the prefix filter."""
        handler = config_console_handler(level=logging.ERROR, debug_mode=True)
        assert handler.level == logging.DEBUG
        assert not handler.filters


def test_flight_recorder_flushes_on_warning(tmp_path):
    """Buffered records reach the file once a WARNING arrives."""
    path = tmp_path / "fr.log"
    handler = config_flight_recorder(path, capacity=10)
    assert isinstance(handler, MemoryHandler)
    logger = logging.getLogger("nonempty.tests.flight")
    logger.setLevel(logging.DEBUG)
    logger.addHandler(handler)
    try:
        logger.debug("buffered detail")
        assert not path.exists()
        logger.warning("trouble")
    finally:
        logger.removeHandler(handler)
        handler.close()
    content = path.read_text(encoding="utf-8")
    assert "buffered detail" in content
    assert "WARNING nonempty.tests.flight" in content


class TestConfigureLogging:
    """`configure_logging` installs handlers on the root logger."""

    @staticmethod
    def test_console_only():
        handlers = configure_logging(LoggingSettings(console_level=logging.INFO))
        assert [type(h) for h in handlers] == [RichHandler]
        assert logging.getLogger().handlers == handlers
        assert logging.getLogger().level == logging.DEBUG

    @staticmethod
    def test_with_flight_recorder_and_levels(tmp_path):
        settings = LoggingSettings(
            log_path=tmp_path / "fr.log",
            capacity=3,
            logger_levels={"nonempty.tests.quiet": logging.ERROR},
        )
        handlers = configure_logging(settings)
        assert [type(h) for h in handlers] == [RichHandler, MemoryHandler]
        assert handlers[1].capacity == 3
        assert logging.getLogger("nonempty.tests.quiet").level == logging.ERROR
        logging.getLogger("nonempty.tests.quiet").setLevel(logging.NOTSET)


def test_settings_flight_recorder_flag():
    assert LoggingSettings().flight_recorder is False
    assert LoggingSettings(log_path=Path("x.log")).flight_recorder is True


def test_log_startup(caplog):
    """Startup logging summarizes configuration and diagnostics."""
    logger = logging.getLogger("nonempty.tests.startup")
    settings = LoggingSettings(
        console_level=logging.WARNING,
        log_path=Path("fr.log"),
        capacity=5,
        logger_levels={"asyncio": logging.WARNING},
    )
    with caplog.at_level(logging.DEBUG, logger="nonempty.tests.startup"):
        log_startup(logger, settings, [logging.NullHandler()], app_version="1.2.3")
    assert "NONEMPTY 1.2.3 - console=WARNING, flight-recorder=ON" in caplog.text
    assert "Handlers: ['NullHandler']" in caplog.text
    assert "Flight recorder: path=fr.log, capacity=5, flush_on_close=False" in caplog.text
    assert "Per-logger overrides: {'asyncio': 'WARNING'}" in caplog.text


def test_log_startup_without_overrides(caplog):
    logger = logging.getLogger("nonempty.tests.startup")
    with caplog.at_level(logging.DEBUG, logger="nonempty.tests.startup"):
        log_startup(logger, LoggingSettings(), [], app_version="1.2.3")
    assert "flight-recorder=OFF" in caplog.text
    assert "Flight recorder:" not in caplog.text
    assert "Per-logger overrides: <none>" in caplog.text
