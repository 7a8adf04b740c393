"""Scheme detection for path and URL strings."""

from slashkit.domain.value_objects import UriScheme

# Order matters: the first matching prefix wins.
SCHEME_PREFIXES: tuple[tuple[str, UriScheme], ...] = (
    ("npm:", UriScheme.NPM),
    ("jsr:", UriScheme.JSR),
    ("data:", UriScheme.DATA),
    ("http://", UriScheme.HTTP),
    ("https://", UriScheme.HTTPS),
    ("file://", UriScheme.FILE),
    ("./", UriScheme.RELATIVE),
    ("../", UriScheme.RELATIVE),
)


def get_uri_scheme(path: str | None) -> UriScheme:
    """Guess the scheme of a path or URL string.

    Args:
        path: The string to classify.

    Returns:
        The scheme of the first matching prefix in `SCHEME_PREFIXES`,
        `UriScheme.LOCAL` when none matches, or `UriScheme.UNDEFINED` for
        an empty (or ``None``) input.

    Examples:
        ```py
        >>> get_uri_scheme("C:/Users/me/path/to/file.txt")
        <UriScheme.LOCAL: 'local'>
        >>> get_uri_scheme("../path/to/file.txt")
        <UriScheme.RELATIVE: 'relative'>
        >>> get_uri_scheme("npm:/@scope/lib/path/to/file")
        <UriScheme.NPM: 'npm'>
        ```
    """
    if not path:
        return UriScheme.UNDEFINED
    for prefix, scheme in SCHEME_PREFIXES:
        if path.startswith(prefix):
            return scheme
    return UriScheme.LOCAL
