"""SLASHKIT CLI entry point.

Defines the top-level ``slashkit`` command (via Click-Extra) and registers
the path subcommands from `slashkit.entrypoints.cli.paths`.

Notes
- The CLI version is sourced from `slashkit.__version__` and displayed
  automatically by Click-Extra (``--version``).
- Logging goes to stderr (Rich) and, optionally, to a flight-recorder file;
  command results go to stdout.

Examples
    $ slashkit --version
    $ slashkit normalize "./a/b/../c.txt"
    $ slashkit resolve ./to/file.txt --base npm:react
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx

from slashkit import __version__, config
from slashkit.logging import config_console_handler, config_flight_recorder, log_startup

from .helpers import hyperlink, parse_log_level
from .paths import COMMANDS

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """SLASHKIT command-line interface.

    SLASHKIT classifies, normalizes, joins and resolves path and URL strings,
    including npm: and jsr: package specifiers. Every command is a pure string
    transformation: nothing is read from or written to the paths themselves.
    """


EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('See Also:', fg='blue', bold=True, underline=True)}",
        "  RFC 3986: " + hyperlink("https://www.rfc-editor.org/rfc/rfc3986"),
        "  WHATWG  : " + hyperlink("https://url.spec.whatwg.org/"),
    ]
)


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
    help="Enable debug mode (enables extra developer diagnostics beyond -vv).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file (overrides default flight recorder path).",
    default=config.default_log_path,
    envvar=config.LOG_PATH_ENV,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=config.DEFAULT_FLIGHT_RECORDER_CAPACITY,
    hidden=True,
    envvar=config.FLIGHT_RECORDER_CAPACITY_ENV,
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Enable the in-memory flight recorder. Keeps the last N log records "
        "at DEBUG granularity (unaffected by -v/-q) and writes them to "
        "--log-path when a WARNING/ERROR occurs, or on clean exit if "
        "--force-flush is set."
    ),
    default=False,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Force-flush the flight recorder buffer to --log-path on program exit.",
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar=config.LOGGER_LEVELS_ENV,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to both "
        "console and flight-recorder. Repeatable (e.g. -L slashkit.urls=DEBUG) "
        "or via SLASHKIT_LOGGER_LEVELS (comma/space list)."
    ),
    default=("click_extra=WARNING",),
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def slashkit(  # pylint: disable=too-many-arguments, too-many-positional-arguments
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
    """SLASHKIT command-line interface."""

    # 0) compute effective verbosity
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = []

    # 1) console handler
    use_color = ctx.color is not False  # None or True => allow color
    handlers.append(
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    )

    # 2) flight recorder
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    # 3) root logger captures everything; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 4) per-logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    # 5) startup info
    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path if flight_recorder else None,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        force_flush_fr=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )

    # 6) flush/close handlers after the command returns
    ctx.call_on_close(logging.shutdown)


for command in COMMANDS:
    slashkit.add_command(command)
