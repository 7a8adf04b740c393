"""OSC-8 hyperlinks for the SLASHKIT CLI help text.

URLs are wrapped in OSC-8 escape sequences only when the output stream is a
terminal known to render them; everywhere else the bare URL is printed.
"""

import os
import sys
from typing import TextIO

OSC8_TERM_PROGRAMS = frozenset(
    {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}
)
OSC8_TERM_PREFIXES = ("alacritty", "konsole")


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Guess whether `stream` renders OSC-8 hyperlinks.

    Args:
        stream: Stream to probe; defaults to ``sys.stdout``.

    Returns:
        bool: False for non-TTY streams; otherwise True when the terminal is
        on a small allowlist (by ``TERM_PROGRAM``, ``WT_SESSION``,
        ``VTE_VERSION`` or ``TERM``).
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    return bool(
        (os.getenv("TERM_PROGRAM") or "").lower() in OSC8_TERM_PROGRAMS
        or os.getenv("WT_SESSION")
        or os.getenv("VTE_VERSION")
        or os.getenv("TERM", "").startswith(OSC8_TERM_PREFIXES)
    )


def hyperlink(url: str) -> str:
    """Render `url` as a clickable link when supported, else as plain text."""
    if not supports_osc8():
        return url
    return f"\x1b]8;;{url}\x07{url}\x1b]8;;\x07"
