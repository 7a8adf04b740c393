"""Handlers for the SLASHKIT CLI: a Rich console and a flight recorder.

The library modules only create module-level loggers and emit DEBUG records;
handlers are attached by the CLI entry point. The flight recorder keeps
recent records in memory and writes them to a file once something at
WARNING or above happens.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from importlib.metadata import PackageNotFoundError, version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]

CONSOLE_FORMAT = "%(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
FLIGHT_RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"
)


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    stdout is left to command results. `debug_mode` forces DEBUG and shows
    the logger name and source location of every record.
    """
    # mirrors click-extra's --color / --no-color
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    handler.setFormatter(
        logging.Formatter(DEBUG_CONSOLE_FORMAT if debug_mode else CONSOLE_FORMAT)
    )
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build a memory-buffered handler that dumps to `path` when needed.

    Up to `capacity` records are held. They are written when a record at
    `flush_level` or above arrives, or on close if `flush_on_close` is set.
    The file (and its directory) only appears once something is written.

    Args:
        path: Destination file, truncated on first write.
        capacity: Number of records to buffer.
        flush_level: Level that triggers a flush.
        flush_on_close: Flush pending records when the handler closes.

    Returns:
        MemoryHandler: The buffer, targeting a lazily opened FileHandler.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FLIGHT_RECORDER_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def _distribution_version(name: str) -> str:
    try:
        return version(name)
    except PackageNotFoundError:  # pragma: no cover
        return "<not installed>"


def log_startup(
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_capacity: int | None,
    force_flush_fr: bool,
    logger_levels: dict[str, int],
) -> None:
    """Log a one-line INFO summary, then DEBUG diagnostics.

    The flight recorder counts as enabled when `log_path` is given.
    """
    logger.info(
        "SLASHKIT %s: console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if log_path else "OFF",
    )

    diagnostics = {
        "Python": sys.version.split()[0],
        "Platform": f"{platform.system()} {platform.release()}",
        "PID": os.getpid(),
        "CWD": Path.cwd(),
        "Click": _distribution_version("click"),
        "Rich": _distribution_version("rich"),
        "Handlers": [type(h).__name__ for h in handlers],
    }
    for label, value in diagnostics.items():
        logger.debug("%s: %s", label, value)

    if log_path:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            log_path,
            flight_capacity,
            force_flush_fr,
        )
    overrides = {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
    logger.debug("Per-logger overrides: %s", overrides or "<none>")
