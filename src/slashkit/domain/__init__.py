"""Domain layer for SLASHKIT.

Holds the value objects shared by every helper module (schemes, parsed
package specifiers, parsed file paths, URLs) and the error taxonomy raised by
the library. This package performs no parsing of its own.

Dependency rule: do not import from other `slashkit` modules.
"""
