"""Command line interface for mlcheck."""
