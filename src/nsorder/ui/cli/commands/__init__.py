"""Command execution package for CLI."""

from nsorder.ui.cli.commands.check import CheckCommand
from nsorder.ui.cli.commands.classify import ClassifyCommand
from nsorder.ui.cli.commands.sort import SortCommand

__all__ = ["CheckCommand", "ClassifyCommand", "SortCommand"]
