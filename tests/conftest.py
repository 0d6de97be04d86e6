"""Global pytest configuration for nonempty.

Every test is marked after the top-level folder it lives in (``unit`` or
``e2e``), so ``-m unit`` selects the fast in-process suite.
"""

from __future__ import annotations

import logging
from logging.handlers import MemoryHandler
from pathlib import Path

import pytest
from rich.logging import RichHandler

TESTS_ROOT = Path(__file__).parent.resolve()
FOLDER_MARKERS = {"unit": pytest.mark.unit, "e2e": pytest.mark.e2e}


def folder_marker(path: Path) -> pytest.MarkDecorator | None:
    """Marker for the top-level test folder containing ``path``, if any."""
    try:
        folder = path.resolve().relative_to(TESTS_ROOT).parts[0]
    except (ValueError, IndexError):
        return None
    return FOLDER_MARKERS.get(folder)


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Add the folder marker unless the test already carries it."""
    for item in items:
        marker = folder_marker(item.path)
        if marker is not None and item.get_closest_marker(marker.name) is None:
            item.add_marker(marker)


@pytest.fixture(autouse=True)
def drop_cli_log_handlers():
    """Detach handlers left on the root logger by CLI invocations.

    The CLI calls ``logging.basicConfig(force=True)`` with handlers bound to
    the runner's streams, which are closed once the invocation returns.
    """
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if isinstance(handler, (RichHandler, MemoryHandler)):
            root.removeHandler(handler)
            handler.close()
