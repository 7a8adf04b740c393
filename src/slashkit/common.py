"""Common-directory analysis over sets of paths."""

import os
from collections.abc import Callable, Sequence
from typing import TypeVar

from slashkit.normalize import SEP, ensure_end_slash, normalize_path

T = TypeVar("T")


def common_prefix(strings: Sequence[str]) -> str:
    """Return the longest character prefix shared by all `strings`.

    Returns an empty string when `strings` is empty.
    """
    return os.path.commonprefix(list(strings))


def common_normalized_unix_path(paths: Sequence[str]) -> str:
    """Find the directory prefix common to already-normalized unix paths.

    The longest common character prefix is cut back to its last ``/``, so the
    result never ends in the middle of a segment. A path's last segment only
    counts as a directory when it ends with ``/``.

    Args:
        paths: Normalized paths using ``/`` as the separator.

    Returns:
        The common directory, ending with ``/``, or ``""`` when there is none.

    Examples:
        ```py
        >>> common_normalized_unix_path([
        ...     "C:/Hello/World/This/Is/An/Example/Bla.cs",
        ...     "C:/Hello/World/This/Is/Not/An/Example/",
        ...     "C:/Hello/Earth/Bla/Bla/Bla",
        ... ])
        'C:/Hello/'
        >>> common_normalized_unix_path(["C:/Hello/World/", "/C:/Hello/World/"])
        ''
        ```
    """
    prefix = common_prefix(paths)
    prefix_length = len(prefix)
    if all(path[prefix_length:].startswith(SEP) for path in paths):
        return prefix
    return prefix[: prefix.rfind(SEP) + 1]


def common_path(paths: Sequence[str]) -> str:
    """Like `common_normalized_unix_path`, for paths in any form.

    Every path is passed through `normalize_path` first, so Windows
    separators and dot-segments are allowed.
    """
    return common_normalized_unix_path([normalize_path(path) for path in paths])


def common_path_transform(
    paths: Sequence[str], map_fn: Callable[[str, str], T]
) -> list[T]:
    """Split each path at the common directory and transform the two halves.

    Args:
        paths: Paths in any form; they are normalized first.
        map_fn: Called as ``map_fn(common_dir, subpath)`` for each path, where
            `common_dir` is the shared directory (ends with ``/`` unless empty)
            and `subpath` is the rest of the normalized path. `subpath` only
            starts with a slash if the path had repeated slashes there.

    Returns:
        The results of `map_fn`, in input order.
    """
    normal_paths = [normalize_path(path) for path in paths]
    common_dir = common_normalized_unix_path(normal_paths)
    common_dir_length = len(common_dir)
    return [map_fn(common_dir, path[common_dir_length:]) for path in normal_paths]


def common_path_replace(paths: Sequence[str], new_common_dir: str) -> list[str]:
    """Swap the common directory of `paths` for `new_common_dir`.

    A trailing ``/`` is added to `new_common_dir` if missing; it is otherwise
    used verbatim (not normalized).

    Examples:
        ```py
        >>> common_path_replace(["C:/Hello/World/a.txt", "C:\\\\Hello\\\\Earth/b.txt"], "D:/temp")
        ['D:/temp/World/a.txt', 'D:/temp/Earth/b.txt']
        ```
    """
    new_common_dir = ensure_end_slash(new_common_dir)
    return common_path_transform(
        paths, lambda _common_dir, subpath: new_common_dir + subpath
    )
