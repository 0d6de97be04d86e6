"""Configuration utilities for nonempty.

This module centralizes small helpers and constants related to CLI configuration.
Every CLI option can also be set through an environment variable prefixed
with ``NONEMPTY_``.
"""

import logging
import os
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "nonempty"
ENVVAR_PREFIX = "NONEMPTY"
LOG_PATH_ENVVAR = f"{ENVVAR_PREFIX}_LOG_PATH"  # pragma: no mutate
DEFAULT_LOG_FILENAME = "latest.log"  # pragma: no mutate

DEFAULT_LOGGER_LEVELS = {"asyncio": logging.WARNING}
"""Per-logger minimum levels applied unless overridden with ``-L NAME=LEVEL``."""


def get_log_path() -> Path:
    """Get the flight-recorder log path.

    Returns:
        The value of ``NONEMPTY_LOG_PATH`` when set and non-empty, otherwise
        ``latest.log`` inside the per-user log directory (created if missing).
    """
    if path := os.environ.get(LOG_PATH_ENVVAR):
        return Path(path)
    log_dir = user_log_dir(APP_NAME, appauthor=False, ensure_exists=True)
    return Path(log_dir) / DEFAULT_LOG_FILENAME
