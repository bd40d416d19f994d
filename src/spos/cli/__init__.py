"""Command-line interface for spos."""
