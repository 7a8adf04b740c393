"""Domain-layer error definitions.

Every error raised by SLASHKIT derives from `SlashkitError`. The concrete
errors also derive from `ValueError`, since each one signals a malformed or
unsupported input rather than a runtime failure.
"""

# ============================================================================
#                           General errors
# ============================================================================


class SlashkitError(Exception):
    """Base class for SLASHKIT errors."""


class InvalidUrlError(SlashkitError, ValueError):
    """Raised when a string cannot be turned into an absolute URL."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Invalid URL: '{url}'.")
        self.url = url


# ============================================================================
#                       Package specifier errors
# ============================================================================


class InvalidPackageSpecifierError(SlashkitError, ValueError):
    """Raised when an npm/jsr specifier lacks a protocol or a package name."""

    def __init__(self, specifier: str) -> None:
        super().__init__(f"Invalid package specifier: '{specifier}'.")
        self.specifier = specifier


# ============================================================================
#                       URL resolution errors
# ============================================================================


class UnsupportedBaseSchemeError(SlashkitError, ValueError):
    """Raised when a relative path is resolved against an unusable base."""

    def __init__(self, scheme: str) -> None:
        super().__init__(f"Base scheme '{scheme}' cannot anchor a relative path.")
        self.scheme = scheme


class MissingBaseError(SlashkitError, ValueError):
    """Raised when a relative path is resolved without any base."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Relative path '{path}' requires a base to resolve against.")
        self.path = path
