"""Module including value objects used across the library."""

from dataclasses import dataclass
from enum import Enum

# Schemes that always serialize with an authority ("//") section.
AUTHORITY_SCHEMES = frozenset({"http", "https", "file"})


class UriScheme(Enum):
    """Enumeration of the schemes recognized by `get_uri_scheme`.

    - ``LOCAL``: ``C:/absolute/path/to/file.txt``, ``~/file.txt``, ``/usr/file.txt``
    - ``RELATIVE``: ``./path/to/file.txt`` or ``../path/to/file.txt``
    - ``FILE``: ``file:///C:/absolute/path/to/file.txt``
    - ``HTTP`` / ``HTTPS``: ``https://example.com/path/to/file.txt``
    - ``DATA``: ``data:text/plain;base64,SGVsbG9Xb3JsZA==``
    - ``JSR``: ``jsr:@scope/package-name``
    - ``NPM``: ``npm:@scope/package-name`` or ``npm:package-name``
    - ``UNDEFINED``: the empty string
    """

    UNDEFINED = "undefined"
    LOCAL = "local"
    RELATIVE = "relative"
    FILE = "file"
    HTTP = "http"
    HTTPS = "https"
    DATA = "data"
    JSR = "jsr"
    NPM = "npm"


@dataclass(frozen=True)
class PackagePseudoUrl:
    """A parsed npm/jsr package specifier, shaped after the parts of a URL.

    Attributes:
        href: ``protocol + "/" + host + pathname``, e.g.
            ``jsr:/@scope/package@version/pathname``. Always parseable as a URL.
        protocol: ``"npm:"`` or ``"jsr:"``.
        scope: Optional scope name, without the ``@``.
        pkg: Name of the package.
        version: Optional version string.
        pathname: Subpath within the package; always starts with ``/``.
        host: ``[@scope/]pkg[@version]``.
    """

    href: str
    protocol: str
    scope: str | None
    pkg: str
    version: str | None
    pathname: str
    host: str


@dataclass(frozen=True)
class FilepathInfo:
    """The parts of a file path, as computed by `parse_filepath_info`.

    For ``"D:/Hello\\World\\temp/.././dist for web/file.tar.gz"``:

    - ``path = "D:/Hello/World/dist for web/file.tar.gz"``
    - ``dirpath = "D:/Hello/World/dist for web/"``
    - ``dirname = "dist for web"``
    - ``filename = "file.tar.gz"``
    - ``basename = "file.tar"``
    - ``extname = ".gz"``
    """

    path: str
    dirpath: str
    dirname: str
    filename: str
    basename: str
    extname: str


@dataclass(frozen=True)
class Url:
    """An absolute URL split into its components.

    Instances are built by `slashkit.urls.parse_url`, which normalizes the
    components; constructing one directly skips that normalization.
    """

    scheme: str
    netloc: str = ""
    path: str = ""
    query: str = ""
    fragment: str = ""

    @property
    def protocol(self) -> str:
        """The scheme followed by a colon, e.g. ``"https:"``."""
        return f"{self.scheme}:"

    @property
    def host(self) -> str:
        """The authority without any user information."""
        return self.netloc.rpartition("@")[2]

    @property
    def pathname(self) -> str:
        return self.path

    @property
    def search(self) -> str:
        return f"?{self.query}" if self.query else ""

    @property
    def hash(self) -> str:
        return f"#{self.fragment}" if self.fragment else ""

    @property
    def href(self) -> str:
        """The serialized URL."""
        authority = (
            f"//{self.netloc}"
            if self.netloc or self.scheme in AUTHORITY_SCHEMES
            else ""
        )
        return f"{self.scheme}:{authority}{self.path}{self.search}{self.hash}"

    def __str__(self) -> str:
        return self.href
