"""Parsing and joining of npm/jsr package specifiers.

Specifiers such as ``npm:react`` or ``jsr:@scope/lib@1.0.0/mod.ts`` are not
valid hierarchical URLs as written: the slash after the protocol is optional
and the package name takes the place of a host. `parse_package_url` turns
them into the canonical ``protocol:/host/pathname`` form, which any URL
parser accepts.
"""

import re
from urllib.parse import urlsplit

from slashkit.domain.errors import InvalidPackageSpecifierError
from slashkit.domain.value_objects import PackagePseudoUrl, Url
from slashkit.normalize import SEP, remove_dot_segments

PACKAGE_RE = re.compile(
    r"^(?P<protocol>npm:|jsr:)"
    r"(/*(@(?P<scope>[^/\s]+)/)?(?P<pkg>[^@/\s]+)(@(?P<version>[^/\s]+))?)?"
    r"(?P<pathname>/.*)?\Z"
)


def parse_package_url(url: str | Url) -> PackagePseudoUrl:
    """Parse an npm or jsr package specifier.

    Args:
        url: The specifier, e.g. ``"jsr:@scope/package@version/pathname/file.ts"``,
            or an already-parsed `Url` with an ``npm:``/``jsr:`` protocol.

    Returns:
        The parsed specifier. Empty scope/version become ``None`` and an empty
        pathname becomes ``"/"``.

    Raises:
        InvalidPackageSpecifierError: If the protocol is not ``npm:``/``jsr:``,
            the package name is missing, or the scope is malformed.

    Examples:
        ```py
        >>> parse_package_url("npm:package")
        PackagePseudoUrl(href='npm:/package/', protocol='npm:', scope=None, pkg='package', version=None, pathname='/', host='package')
        >>> parse_package_url("npm:///@scope/package@version").href
        'npm:/@scope/package@version/'
        ```
    """
    href = url.href if isinstance(url, Url) else url
    match = PACKAGE_RE.match(href)
    if match is None or match["pkg"] is None:
        raise InvalidPackageSpecifierError(href)

    protocol, pkg = match["protocol"], match["pkg"]
    scope = match["scope"] or None
    version = match["version"] or None
    pathname = match["pathname"] or SEP
    host = (f"@{scope}/" if scope else "") + pkg + (f"@{version}" if version else "")
    return PackagePseudoUrl(
        href=f"{protocol}/{host}{pathname}",
        protocol=protocol,
        scope=scope,
        pkg=pkg,
        version=version,
        pathname=pathname,
        host=host,
    )


def join_package_pathname(pathname: str, relative: str) -> str:
    """Resolve a relative reference against the pathname of a package.

    The reference is merged onto the directory part of `pathname` and the
    result is stripped of dot-segments, the same way a URL parser resolves
    ``./`` and ``../`` references. A pathname starting with ``//`` opens an
    authority section: everything up to the next ``/`` is discarded, and a
    pathname that is nothing but an authority joins as ``/``. Any query or
    fragment on the reference is dropped.

    Args:
        pathname: A package pathname (starts with ``/``).
        relative: A ``./`` or ``../`` reference.

    Returns:
        The joined pathname, starting with ``/``.

    Examples:
        ```py
        >>> join_package_pathname("/assets/", "../to/file.txt")
        '/to/file.txt'
        >>> join_package_pathname("//assets", "./to/file.txt")
        '/to/file.txt'
        ```
    """
    if pathname.startswith("//"):
        end_of_authority = pathname.find(SEP, 2)
        pathname = pathname[end_of_authority:] if end_of_authority >= 0 else ""
    directory = pathname[: pathname.rfind(SEP) + 1] or SEP
    return remove_dot_segments(directory + urlsplit(relative).path)
