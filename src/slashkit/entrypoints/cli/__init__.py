"""Command-line interface for SLASHKIT."""
