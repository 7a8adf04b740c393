"""Configuration utilities for SLASHKIT.

This module centralizes the environment variables read by the command-line
interface and the defaults derived from them. The library functions never
read configuration; only the CLI does.
"""

import os
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "slashkit"

BASE_URL_ENV = "SLASHKIT_BASE_URL"  # pragma: no mutate
LOG_PATH_ENV = "SLASHKIT_LOG_PATH"  # pragma: no mutate
FLIGHT_RECORDER_CAPACITY_ENV = "SLASHKIT_FLIGHT_RECORDER_CAPACITY"  # pragma: no mutate
LOGGER_LEVELS_ENV = "SLASHKIT_LOGGER_LEVELS"  # pragma: no mutate

DEFAULT_FLIGHT_RECORDER_CAPACITY = 2000


class BaseUrlNotSetError(Exception):
    """Raised when the SLASHKIT_BASE_URL environment variable is not set."""


def get_default_base() -> str | None:
    """Get the default base for relative references from the environment.

    Returns:
        The value of `SLASHKIT_BASE_URL`, or ``None`` when it is unset or empty.
    """
    return os.environ.get(BASE_URL_ENV) or None


def require_default_base() -> str:
    """Get the default base, failing when none is configured.

    Raises:
        BaseUrlNotSetError: If `SLASHKIT_BASE_URL` is not set.
    """
    if not (base := get_default_base()):
        raise BaseUrlNotSetError
    return base


def default_log_path() -> Path:
    """Default destination of the flight-recorder log file.

    The directory is created by the flight recorder, not here, so merely
    running a command never touches the file system.
    """
    return Path(user_log_dir(APP_NAME, appauthor=False)) / "latest.log"
