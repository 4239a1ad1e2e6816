"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class CheckArgs:
    """Command line arguments for the ``check`` subcommand."""

    command: Literal["check"]
    order_text: str | None


@final
@dataclass(slots=True)
class ClassifyArgs:
    """Command line arguments for the ``classify`` subcommand."""

    command: Literal["classify"]
    paths: list[str]
    order_text: str | None


@final
@dataclass(slots=True)
class SortArgs:
    """Command line arguments for the ``sort`` subcommand."""

    command: Literal["sort"]
    input_path: Path | None
    order_text: str | None
    system_first: bool


CLIArgs = CheckArgs | ClassifyArgs | SortArgs

__all__ = ["CLIArgs", "CheckArgs", "ClassifyArgs", "SortArgs"]
