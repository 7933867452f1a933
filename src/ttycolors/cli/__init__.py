"""CLI package for ttycolors."""

from ttycolors.cli.app import entrypoint, main

__all__ = ["entrypoint", "main"]
