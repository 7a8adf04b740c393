"""Slash handling and dot-segment normalization for path strings.

Two normalizers live here:

- `normalize_unix_path` reduces ``.`` and ``..`` segments of a plain path,
  keeping any ``..`` that cannot be collapsed and keeping empty segments
  produced by repeated slashes.
- `remove_dot_segments` is the URL flavour: ``..`` never climbs above the
  root of an absolute path.

Neither one touches the file system.
"""

import re
from collections.abc import Sequence

SEP = "/"

WINDOWS_SLASHES_RE = re.compile(r"\\+")
LEADING_SLASHES_RE = re.compile(r"^/+")
TRAILING_SLASHES_RE = re.compile(r"/+\Z")
LEADING_SLASHES_AND_DOT_SLASHES_RE = re.compile(r"^(\.?/)+")

CLI_ARG_SEPARATORS = (";", ":")


def quote(text: str) -> str:
    """Surround a string with double quotes."""
    return f'"{text}"'


def trim_start_slashes(text: str) -> str:
    """Remove every leading ``/``.

    ``"///helloworld/nyaa.si//"`` becomes ``"helloworld/nyaa.si//"``.
    """
    return LEADING_SLASHES_RE.sub("", text)


def trim_end_slashes(text: str) -> str:
    """Remove every trailing ``/``."""
    return TRAILING_SLASHES_RE.sub("", text)


def trim_slashes(text: str) -> str:
    """Remove leading and trailing ``/``."""
    return trim_end_slashes(trim_start_slashes(text))


def trim_dot_slashes(text: str) -> str:
    """Remove leading ``/`` and ``./`` runs, and trailing ``/``.

    Leading ``../`` is kept: ``"//./././///././//../a/b//"`` becomes ``"../a/b"``.
    """
    return trim_end_slashes(LEADING_SLASHES_AND_DOT_SLASHES_RE.sub("", text))


def ensure_start_slash(text: str) -> str:
    """Prepend ``/`` unless the string already starts with one."""
    return text if text.startswith(SEP) else SEP + text


def ensure_start_dot_slash(text: str) -> str:
    """Make the string start with ``./``.

    A leading ``/`` is turned into ``./`` rather than prefixed.
    """
    if text.startswith("./"):
        return text
    if text.startswith(SEP):
        return "." + text
    return "./" + text


def ensure_end_slash(text: str) -> str:
    """Append ``/`` unless the string already ends with one."""
    return text if text.endswith(SEP) else text + SEP


def join_slash(*segments: str) -> str:
    """Join path segments with a single ``/`` between them.

    Each segment first loses its leading ``/`` and ``./`` runs and its
    trailing slashes, so no join point ends up with a doubled separator.
    Slashes inside a segment are left alone.

    Args:
        *segments: Path segments, preferably using ``/`` as the separator.

    Returns:
        The joined path, without leading slashes.

    Examples:
        ```py
        >>> join_slash("///helloworld//", "nyaa.si//")
        'helloworld/nyaa.si'
        >>> join_slash("file:///helloworld/", "nyaa.si//", "./hello.txt")
        'file:///helloworld/nyaa.si/hello.txt'
        ```
    """
    return trim_start_slashes("".join(SEP + trim_dot_slashes(s) for s in segments))


def path_to_unix_path(path: str) -> str:
    """Convert each run of Windows separators (``\\``) into a single ``/``."""
    return WINDOWS_SLASHES_RE.sub(SEP, path)


def normalize_unix_path(path: str) -> str:
    """Reduce the ``.`` and ``..`` segments of a ``/``-separated path.

    The walk starts from a stack seeded with a ``..`` sentinel: a ``..``
    segment pops the top of the stack unless the top is itself ``..``, in
    which case it is pushed. Leading ``../`` runs therefore survive, however
    many there are. Empty segments (from repeated slashes) are kept.

    Windows separators are *not* converted; see `normalize_path`.

    Args:
        path: A unix-style path.

    Returns:
        The path without ``./`` segments and without collapsible ``../``.

    Examples:
        ```py
        >>> normalize_unix_path("../helloworld/./temp/../././/hello.txt")
        '../helloworld//hello.txt'
        >>> normalize_unix_path("///hello/world/.././././//file.txt")
        '///hello///file.txt'
        ```
    """
    output = [".."]
    for segment in path.split(SEP):
        if segment == "..":
            if output[-1] != "..":
                output.pop()
            else:
                output.append(segment)
        elif segment != ".":
            output.append(segment)
    # drop the sentinel
    return SEP.join(output[1:])


def normalize_path(path: str) -> str:
    """Normalize a path that may use Windows separators.

    The output always uses ``/``. Applying it twice changes nothing.
    """
    return normalize_unix_path(path_to_unix_path(path))


def remove_dot_segments(path: str) -> str:
    """Remove ``.`` and ``..`` segments from an absolute URL path.

    Follows RFC 3986 §5.2.4 on a ``/``-split path: ``..`` stops at the root,
    and a path ending in ``.`` or ``..`` keeps a trailing slash. Empty
    segments are preserved. Paths that do not start with ``/`` (opaque paths)
    are returned unchanged.

    Examples:
        ```py
        >>> remove_dot_segments("/a/b/../../../c")
        '/c'
        >>> remove_dot_segments("/a/b/..")
        '/a/'
        ```
    """
    if not path.startswith(SEP):
        return path
    segments = path.split(SEP)[1:]
    output: list[str] = []
    for segment in segments:
        if segment == "..":
            if output:
                output.pop()
        elif segment != ".":
            output.append(segment)
    if segments[-1] in (".", ".."):
        output.append("")
    return SEP + SEP.join(output)


def paths_to_cli_arg(separator: str, paths: Sequence[str]) -> str:
    """Render paths as one quoted, separator-delimited CLI argument.

    Suitable for environment variables such as ``PATH`` or ``CLASSPATH``.

    Args:
        separator: ``";"`` (Windows) or ``":"`` (unix).
        paths: The paths to join; Windows separators are converted to ``/``.

    Returns:
        The joined paths wrapped in double quotes.

    Raises:
        ValueError: If `separator` is neither ``";"`` nor ``":"``.
    """
    if separator not in CLI_ARG_SEPARATORS:
        raise ValueError(f"Expected one of {CLI_ARG_SEPARATORS}, got {separator!r}")
    return quote(path_to_unix_path(separator.join(paths)))
