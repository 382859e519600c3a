"""Command-line interface for deck quotes."""
