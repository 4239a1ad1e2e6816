"""Command line interface package."""

from nsorder.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
