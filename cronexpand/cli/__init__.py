"""Command-line interface for cronexpand."""
