"""Argument parsing for the CLI."""

from nsorder.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser"]
