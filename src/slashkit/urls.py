"""Turning path strings into absolute URLs.

`resolve_as_url` accepts anything `get_uri_scheme` recognizes (local paths,
Windows paths, ``./``/``../`` references, ``file:``, ``http(s):``, ``data:``
and ``npm:``/``jsr:`` specifiers) and returns a normalized `Url`.

Relative references are resolved per RFC 3986 §5.2, with two differences
from `urllib.parse.urljoin`: repeated slashes in the base path are preserved,
and references against ``npm:``/``jsr:`` bases are joined onto the package
pathname instead of the URL path.
"""

from __future__ import annotations

import logging
import re
import urllib.parse

from slashkit.domain.errors import (
    InvalidUrlError,
    MissingBaseError,
    UnsupportedBaseSchemeError,
)
from slashkit.domain.value_objects import AUTHORITY_SCHEMES, UriScheme, Url
from slashkit.normalize import SEP, path_to_unix_path, remove_dot_segments
from slashkit.packages import join_package_pathname, parse_package_url
from slashkit.schemes import get_uri_scheme

logger = logging.getLogger(__name__)

PACKAGE_PROTOCOLS = frozenset({"npm:", "jsr:"})
UNSUPPORTED_BASE_SCHEMES = frozenset({UriScheme.DATA, UriScheme.RELATIVE})

WINDOWS_DRIVE_RE = re.compile(r"^[A-Za-z][:|]$")
DRIVE_PATH_RE = re.compile(r"^/[A-Za-z][:|](?=/|\Z)")

DEFAULT_PORTS = {"http": ":80", "https": ":443"}

# Printable ASCII outside the WHATWG path percent-encode set.
PATH_SAFE_CHARS = "/:@!$&'()*+,;=%~[]|"


def _build_url(
    scheme: str, netloc: str, path: str, query: str = "", fragment: str = ""
) -> Url:
    if scheme in AUTHORITY_SCHEMES:
        if scheme == "file" and WINDOWS_DRIVE_RE.match(netloc):
            # file://C:/x names a drive, not a host
            path, netloc = f"/{netloc[0]}:{path}", ""
        elif scheme != "file":
            netloc = netloc.lower().removesuffix(DEFAULT_PORTS[scheme])
        path = path or SEP
    if path.startswith(SEP):
        path = urllib.parse.quote(path, safe=PATH_SAFE_CHARS)
        drive = ""
        if scheme == "file":
            match = DRIVE_PATH_RE.match(path)
            if match:
                # '..' never climbs above a drive letter
                drive, path = f"/{path[1]}:", path[match.end() :]
        path = drive + remove_dot_segments(path)
    return Url(scheme, netloc, path, query, fragment)


def parse_url(href: str) -> Url:
    """Parse an absolute URL string into a normalized `Url`.

    Normalization lower-cases the scheme (and ``http``/``https`` hosts, whose
    default port is dropped), gives ``http``/``https``/``file`` URLs at least
    a ``/`` path, moves a Windows drive out of a ``file:`` authority,
    percent-encodes the WHATWG path percent-encode set, and removes
    dot-segments from hierarchical paths. In a ``file:`` path, ``..`` stops at
    the drive letter. Opaque paths, such as the payload of a ``data:`` URL, are kept verbatim.

    Args:
        href: An absolute URL.

    Returns:
        The parsed URL.

    Raises:
        InvalidUrlError: If `href` has no scheme or cannot be split.

    Examples:
        ```py
        >>> parse_url("file://C:/Users/me/../you/file.txt").href
        'file:///C:/Users/you/file.txt'
        >>> parse_url("HTTP://Example.com").href
        'http://example.com/'
        ```
    """
    try:
        parts = urllib.parse.urlsplit(href)
    except ValueError as e:
        raise InvalidUrlError(href) from e
    if not parts.scheme:
        raise InvalidUrlError(href)
    return _build_url(
        parts.scheme, parts.netloc, parts.path, parts.query, parts.fragment
    )


def resolve_reference(base: Url, reference: str) -> Url:
    """Resolve a ``./`` or ``../`` reference against an absolute base URL.

    The reference's path is merged onto the directory of the base path
    (everything up to its last ``/``), then dot-segments are removed. The
    query and fragment come from the reference.

    Args:
        base: An absolute URL with a hierarchical path.
        reference: A relative reference.

    Returns:
        The resolved URL.

    Raises:
        UnsupportedBaseSchemeError: If the base path is opaque (for example
            a ``data:`` or ``mailto:`` URL).
    """
    if base.path and not base.path.startswith(SEP):
        raise UnsupportedBaseSchemeError(base.scheme)
    ref = urllib.parse.urlsplit(reference)
    directory = base.path[: base.path.rfind(SEP) + 1] or SEP
    return _build_url(
        base.scheme, base.netloc, directory + ref.path, ref.query, ref.fragment
    )


def _resolve_base(base: str | Url | None) -> Url | None:
    if base is None:
        return None
    if isinstance(base, Url):
        if base.scheme == UriScheme.DATA.value:
            raise UnsupportedBaseSchemeError(base.scheme)
        return base
    base_scheme = get_uri_scheme(base)
    if base_scheme in UNSUPPORTED_BASE_SCHEMES:
        raise UnsupportedBaseSchemeError(base_scheme.value)
    return resolve_as_url(base)


def _resolve_relative(path: str, base: Url | None) -> Url:
    if base is None:
        raise MissingBaseError(path)
    if base.protocol not in PACKAGE_PROTOCOLS:
        return resolve_reference(base, path)
    package = parse_package_url(base)
    pathname = join_package_pathname(package.pathname, path)
    return parse_url(f"{package.protocol}/{package.host}{pathname}")


def resolve_as_url(path: str, base: str | Url | None = None) -> Url:
    """Convert a path or URL string into an absolute `Url`.

    Windows separators (``\\``) in `path` are converted to ``/`` first. The
    result then depends on the scheme of `path`:

    - local paths become ``file://`` URLs;
    - ``npm:``/``jsr:`` specifiers are canonicalized by `parse_package_url`;
    - ``./``/``../`` references are resolved against `base`, which may itself
      be any string this function accepts (other than ``data:`` or another
      relative reference) or a `Url`;
    - ``file:``, ``http:``, ``https:`` and ``data:`` URLs are parsed as-is.

    Args:
        path: The path or URL to resolve.
        base: Base used for relative references.

    Returns:
        The resolved URL.

    Raises:
        UnsupportedBaseSchemeError: If `base` is a ``data:`` URL or a relative
            reference.
        MissingBaseError: If `path` is relative and no `base` is given.
        InvalidPackageSpecifierError: If a package specifier is malformed.
        InvalidUrlError: If `path` is empty.

    Examples:
        ```py
        >>> resolve_as_url("C:\\\\Users\\\\me\\\\file.txt").href
        'file:///C:/Users/me/file.txt'
        >>> resolve_as_url("../to/file.txt", "https://cdn.google.com/path/").href
        'https://cdn.google.com/to/file.txt'
        >>> resolve_as_url("./to/file.txt", "npm:react").href
        'npm:/react/to/file.txt'
        ```
    """
    path = path_to_unix_path(path)
    base_url = _resolve_base(base)
    scheme = get_uri_scheme(path)
    logger.debug("Resolving %r (scheme=%s, base=%s)", path, scheme.value, base_url)

    if scheme is UriScheme.LOCAL:
        return parse_url(f"file://{path}")
    if scheme in (UriScheme.NPM, UriScheme.JSR):
        return parse_url(parse_package_url(path).href)
    if scheme is UriScheme.RELATIVE:
        return _resolve_relative(path, base_url)
    if scheme in (UriScheme.FILE, UriScheme.HTTP, UriScheme.HTTPS, UriScheme.DATA):
        return parse_url(path)
    if scheme is UriScheme.UNDEFINED:
        raise InvalidUrlError(path)
    # every UriScheme member is handled above
    raise AssertionError(f"Unhandled scheme: {scheme}")  # pragma: no cover
