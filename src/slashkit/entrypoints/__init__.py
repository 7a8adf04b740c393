"""Entrypoints (inbound adapters) for SLASHKIT.

Expose the library to the outside world through the command line. Parse and
validate inputs, call the pure helpers, and present results.
"""
