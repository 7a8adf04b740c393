"""Unit tests for slashkit.logging."""

import logging
from logging.handlers import MemoryHandler

import pytest
from rich.logging import RichHandler

from slashkit.logging import (
    config_console_handler,
    config_flight_recorder,
    log_startup,
)

# pylint: disable=magic-value-comparison


def make_record(name: str, level: int = logging.WARNING, msg: str = "boom"):
    """Build a bare LogRecord for the given logger name."""
    return logging.makeLogRecord(
        {"name": name, "levelno": level, "levelname": logging.getLevelName(level), "msg": msg}
    )


class TestConsoleHandler:
    """Tests for config_console_handler."""

    @staticmethod
    def test_normal_mode():
        """Normal mode keeps the requested level and prints bare messages."""
        handler = config_console_handler(level=logging.INFO)
        assert isinstance(handler, RichHandler)
        assert handler.level == logging.INFO
        assert handler.formatter.format(make_record("click_extra.x")) == "boom"

    @staticmethod
    def test_debug_mode():
        """Debug mode forces DEBUG and names the emitting logger."""
        handler = config_console_handler(level=logging.ERROR, debug_mode=True)
        assert handler.level == logging.DEBUG
        assert "click_extra.x: boom" in handler.formatter.format(make_record("click_extra.x"))

    @staticmethod
    def test_no_color():
        """Disabling color leaves the console without a color system."""
        handler = config_console_handler(color=False)
        assert handler.console.color_system is None


class TestFlightRecorder:
    """Tests for config_flight_recorder."""

    @staticmethod
    def test_buffers_until_warning(tmp_path):
        """Records stay in memory until one at the flush level arrives."""
        path = tmp_path / "flight.log"
        handler = config_flight_recorder(path, capacity=10)
        target = handler.target
        try:
            assert isinstance(handler, MemoryHandler)
            handler.handle(make_record("slashkit.a", logging.DEBUG, "early detail"))
            assert not path.exists()
            handler.handle(make_record("slashkit.a", logging.WARNING, "trouble"))
            content = path.read_text(encoding="utf-8")
            assert "early detail" in content
            assert "WARNING slashkit.a:0: trouble" in content
        finally:
            handler.close()
            target.close()

    @staticmethod
    def test_flush_on_close(tmp_path):
        """With flush_on_close, pending DEBUG records are written on close."""
        path = tmp_path / "flight.log"
        handler = config_flight_recorder(path, flush_on_close=True)
        target = handler.target
        handler.handle(make_record("slashkit.a", logging.DEBUG, "last words"))
        handler.close()
        target.close()
        assert "last words" in path.read_text(encoding="utf-8")


def test_log_startup(caplog):
    """The startup summary and the per-logger overrides are logged."""
    logger = logging.getLogger("slashkit.startup_test")
    with caplog.at_level(logging.DEBUG, logger="slashkit.startup_test"):
        log_startup(
            logger,
            app_version="9.9.9",
            level=logging.WARNING,
            handlers=[],
            log_path=None,
            flight_capacity=None,
            force_flush_fr=False,
            logger_levels={"click_extra": logging.WARNING},
        )
    assert "SLASHKIT 9.9.9: console=WARNING, flight-recorder=OFF" in caplog.text
    assert "Click: " in caplog.text
    assert "Rich: " in caplog.text
    assert "Per-logger overrides: {'click_extra': 'WARNING'}" in caplog.text
    assert "Flight recorder:" not in caplog.text


@pytest.mark.parametrize(
    ("logger_levels", "expected"),
    [
        ({}, "Per-logger overrides: <none>"),
        ({"slashkit.urls": logging.DEBUG}, "Per-logger overrides: {'slashkit.urls': 'DEBUG'}"),
    ],
)
def test_log_startup_with_flight_recorder(caplog, tmp_path, logger_levels, expected):
    """A log path switches the summary to ON and adds the recorder settings."""
    logger = logging.getLogger("slashkit.startup_test")
    log_path = tmp_path / "fr.log"
    with caplog.at_level(logging.DEBUG, logger="slashkit.startup_test"):
        log_startup(
            logger,
            app_version="9.9.9",
            level=logging.INFO,
            handlers=[],
            log_path=log_path,
            flight_capacity=50,
            force_flush_fr=True,
            logger_levels=logger_levels,
        )
    assert "flight-recorder=ON" in caplog.text
    assert f"Flight recorder: path={log_path}, capacity=50, flush_on_close=True" in caplog.text
    assert expected in caplog.text
