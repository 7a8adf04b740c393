"""CLI helpers for SLASHKIT.

Utilities used by the command-line interface: OSC-8 terminal hyperlinks,
stderr message emitters with emoji→ASCII fallbacks, and the ``-L`` logger
level parser.
"""

from .hyperlinks import hyperlink
from .log_level_parser import parse_log_level
from .messages import error, warn

__all__ = ["hyperlink", "parse_log_level", "error", "warn"]
