"""SLASHKIT

Pure helpers for classifying, normalizing, joining and resolving path and URL
strings, including ``npm:`` and ``jsr:`` package specifiers. Every function is
stateless and deterministic; nothing here performs I/O.
"""

from slashkit.common import (
    common_normalized_unix_path,
    common_path,
    common_path_replace,
    common_path_transform,
    common_prefix,
)
from slashkit.domain.errors import (
    InvalidPackageSpecifierError,
    InvalidUrlError,
    MissingBaseError,
    SlashkitError,
    UnsupportedBaseSchemeError,
)
from slashkit.domain.value_objects import FilepathInfo, PackagePseudoUrl, UriScheme, Url
from slashkit.filepath import parse_filepath_info
from slashkit.normalize import (
    ensure_end_slash,
    ensure_start_dot_slash,
    ensure_start_slash,
    join_slash,
    normalize_path,
    normalize_unix_path,
    path_to_unix_path,
    paths_to_cli_arg,
    quote,
    remove_dot_segments,
    trim_dot_slashes,
    trim_end_slashes,
    trim_slashes,
    trim_start_slashes,
)
from slashkit.packages import join_package_pathname, parse_package_url
from slashkit.schemes import get_uri_scheme
from slashkit.urls import parse_url, resolve_as_url, resolve_reference

__all__ = [
    "__version__",
    "FilepathInfo",
    "InvalidPackageSpecifierError",
    "InvalidUrlError",
    "MissingBaseError",
    "PackagePseudoUrl",
    "SlashkitError",
    "UnsupportedBaseSchemeError",
    "UriScheme",
    "Url",
    "common_normalized_unix_path",
    "common_path",
    "common_path_replace",
    "common_path_transform",
    "common_prefix",
    "ensure_end_slash",
    "ensure_start_dot_slash",
    "ensure_start_slash",
    "get_uri_scheme",
    "join_package_pathname",
    "join_slash",
    "normalize_path",
    "normalize_unix_path",
    "parse_filepath_info",
    "parse_package_url",
    "parse_url",
    "path_to_unix_path",
    "paths_to_cli_arg",
    "quote",
    "remove_dot_segments",
    "resolve_as_url",
    "resolve_reference",
    "trim_dot_slashes",
    "trim_end_slashes",
    "trim_slashes",
    "trim_start_slashes",
]
__version__ = "0.1.0"
