"""Breaking a file path into directory, name and extension parts."""

import re

from slashkit.domain.value_objects import FilepathInfo
from slashkit.normalize import normalize_path, trim_start_slashes

# the last segment of a path, with its leading slash if any
FILENAME_RE = re.compile(r"/?[^/]+\Z")
BASENAME_AND_EXTNAME_RE = re.compile(r"(?P<basename>.+?)(?P<ext>\.[^.]+)?")


def _parse_filename(path: str) -> str:
    # empty when the path ends with "/"
    match = FILENAME_RE.search(path)
    return trim_start_slashes(match[0]) if match else ""


def _split_extension(filename: str) -> tuple[str, str]:
    match = BASENAME_AND_EXTNAME_RE.fullmatch(filename)
    if match is None:
        return "", ""
    return match["basename"], match["ext"] or ""


def parse_filepath_info(file_path: str) -> FilepathInfo:
    """Parse a file path into the parts described by `FilepathInfo`.

    A path ending with ``/`` is a directory (empty filename); anything else
    is a file. The path is normalized first.

    Note:
        ``dirname`` is taken from between the last two slashes of
        ``dirpath``, so ``"/home/user///file.txt"`` has an empty dirname.

    Args:
        file_path: The path to parse; Windows separators are allowed.

    Returns:
        FilepathInfo: The parsed parts.

    Examples:
        ```py
        >>> info = parse_filepath_info("C:\\\\home\\\\user/.file.tar.gz")
        >>> info.dirpath, info.dirname, info.basename, info.extname
        ('C:/home/user/', 'user', '.file.tar', '.gz')
        ```
    """
    path = normalize_path(file_path)
    filename = _parse_filename(path)
    dirpath = path[: -len(filename)] if filename else path
    # slice instead of trimming: repeated slashes before the filename are kept
    dirname = _parse_filename(dirpath[:-1])
    basename, extname = _split_extension(filename)
    return FilepathInfo(
        path=path,
        dirpath=dirpath,
        dirname=dirname,
        filename=filename,
        basename=basename,
        extname=extname,
    )
