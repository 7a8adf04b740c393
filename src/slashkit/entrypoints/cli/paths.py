"""SLASHKIT path commands.

Thin wrappers around the library functions. Results go to **stdout**, one
per line, in input order; warnings and errors go to **stderr**.

Failure modes
- Any `SlashkitError` (malformed package specifier, unsupported or missing
  base, invalid URL) → exit code 1 with the error message on stderr.
- A relative path passed to ``resolve`` with neither ``--base`` nor
  ``SLASHKIT_BASE_URL`` → exit code 1 with guidance.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import asdict
from typing import IO, Any

import click

from slashkit import config
from slashkit.common import common_path, common_path_replace
from slashkit.domain.errors import SlashkitError
from slashkit.domain.value_objects import UriScheme
from slashkit.filepath import parse_filepath_info
from slashkit.normalize import (
    CLI_ARG_SEPARATORS,
    join_slash,
    normalize_path,
    normalize_unix_path,
    paths_to_cli_arg,
)
from slashkit.packages import parse_package_url
from slashkit.schemes import get_uri_scheme
from slashkit.urls import resolve_as_url

from .helpers import error, warn

logger = logging.getLogger(__name__)

MISSING_BASE_MSG = (
    "A relative path needs a base to resolve against.\n\n"
    "Pass one with --base, or set it for every call, e.g.:\n"
    "  export SLASHKIT_BASE_URL='https://cdn.example.com/assets/'"
)

NO_COMMON_DIR_MSG = "The paths share no common directory."


class LibraryError(click.ClickException):
    """A library error surfaced as a CLI failure (exit code 1)."""

    def show(self, file: IO[Any] | None = None) -> None:
        error(self.format_message())


@contextmanager
def _reporting_errors() -> Iterator[None]:
    try:
        yield
    except SlashkitError as e:
        logger.debug("Command failed", exc_info=True)
        raise LibraryError(str(e)) from e


def _echo_fields(values: dict[str, Any]) -> None:
    width = max(len(name) for name in values)
    for name, value in values.items():
        click.echo(f"{name:<{width}} : {'' if value is None else value}")


@click.command()
@click.argument("paths", nargs=-1)
def scheme(paths: tuple[str, ...]) -> None:
    """Print the scheme of each PATH."""
    for path in paths:
        click.echo(get_uri_scheme(path).value)


@click.command()
@click.argument("paths", nargs=-1)
@click.option(
    "--unix",
    is_flag=True,
    help="Treat backslashes as ordinary characters (no Windows separator conversion).",
)
def normalize(paths: tuple[str, ...], unix: bool) -> None:
    """Print each PATH with its dot-segments reduced."""
    normalizer = normalize_unix_path if unix else normalize_path
    for path in paths:
        click.echo(normalizer(path))


@click.command()
@click.argument("segments", nargs=-1)
def join(segments: tuple[str, ...]) -> None:
    """Join SEGMENTS with single slashes."""
    click.echo(join_slash(*segments))


@click.command()
@click.argument("path")
@click.option(
    "--base",
    "-b",
    help=f"Base for relative paths (default: ${config.BASE_URL_ENV}).",
)
def resolve(path: str, base: str | None) -> None:
    """Print PATH as an absolute URL."""
    if base is None and get_uri_scheme(path) is UriScheme.RELATIVE:
        try:
            base = config.require_default_base()
        except config.BaseUrlNotSetError as e:
            raise LibraryError(MISSING_BASE_MSG) from e
    with _reporting_errors():
        url = resolve_as_url(path, base)
    click.echo(url.href)


@click.command()
@click.argument("specifier")
def package(specifier: str) -> None:
    """Print the parts of an npm:/jsr: package SPECIFIER."""
    with _reporting_errors():
        parsed = parse_package_url(specifier)
    _echo_fields(asdict(parsed))


@click.command()
@click.argument("paths", nargs=-1, required=True)
def common(paths: tuple[str, ...]) -> None:
    """Print the directory common to all PATHS."""
    common_dir = common_path(paths)
    if not common_dir:
        warn(NO_COMMON_DIR_MSG)
    click.echo(common_dir)


@click.command()
@click.argument("new_dir")
@click.argument("paths", nargs=-1, required=True)
def replace(new_dir: str, paths: tuple[str, ...]) -> None:
    """Replace the common directory of PATHS with NEW_DIR."""
    for path in common_path_replace(paths, new_dir):
        click.echo(path)


@click.command()
@click.argument("path")
def info(path: str) -> None:
    """Print the directory, name and extension parts of PATH."""
    _echo_fields(asdict(parse_filepath_info(path)))


@click.command(name="cli-arg")
@click.option(
    "--separator",
    "-s",
    type=click.Choice(CLI_ARG_SEPARATORS),
    default=":",
    show_default=True,
    help="List separator: ';' on Windows, ':' elsewhere.",
)
@click.argument("paths", nargs=-1)
def cli_arg(separator: str, paths: tuple[str, ...]) -> None:
    """Print PATHS as one quoted list, e.g. for PATH-like variables."""
    click.echo(paths_to_cli_arg(separator, paths))


COMMANDS = (scheme, normalize, join, resolve, package, common, replace, info, cli_arg)
