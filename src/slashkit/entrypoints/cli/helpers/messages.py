"""Terminal message helpers for the SLASHKIT CLI.

Status lines go to stderr so stdout carries nothing but command results,
which keeps ``slashkit normalize ... | xargs ...`` style pipelines clean.
Glyphs fall back to ASCII on terminals that cannot encode them.
"""

import click

GLYPHS = {
    "warn": ("⚠️", "[!]"),
    "error": ("❌", "[X]"),
}


def _can_encode(character: str) -> bool:
    """Return True if *character* can be written to stderr's encoding."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(kind: str) -> str:
    """Return the glyph for a message kind, or its ASCII fallback.

    Args:
        kind: ``"warn"`` or ``"error"``.
    """
    emoji, fallback = GLYPHS[kind]
    return emoji if _can_encode(emoji) else fallback


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to stderr."""
    click.secho(f"{glyph('warn')}  {msg}", fg="yellow", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to stderr.

    Example:
        ``❌  Invalid package specifier: 'pnpm:react'.``
    """
    click.secho(f"{glyph('error')}  {msg}", fg="red", bold=True, err=True)
