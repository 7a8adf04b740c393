"""Unit tests.

Each module here targets one `slashkit` module. Inputs and expected outputs
are written out literally; cases that mirror documented behavior (for
example the quirks of repeated slashes) are kept verbatim on purpose.
"""
