"""src/nsorder/ui/cli/commands/sort.py
What: Read dotted paths and print them grouped and sorted.
Why: Exercise the full ordering pass from the command line.
"""

from __future__ import annotations

import sys
from typing import TextIO, final

from rich.console import Console

from nsorder.features.ordering import TrieCache, resolve_order, sort_directives
from nsorder.platform.logging import logger
from nsorder.ui.cli.args.options import SortArgs
from nsorder.ui.cli.display import render_groups


@final
class SortCommand:
    """Sort directive paths; an invalid order falls back to alphabetical."""

    def __init__(
        self,
        args: SortArgs,
        *,
        console: Console | None = None,
        stdin: TextIO | None = None,
        cache: TrieCache | None = None,
    ) -> None:
        self._args = args
        self._console = console or Console()
        self._stdin = stdin or sys.stdin
        self._cache = cache

    def execute(self) -> int:
        paths = self._read_paths()
        classifier = resolve_order(self._args.order_text, self._cache)
        groups = sort_directives(
            paths,
            classifier=classifier,
            system_first=self._args.system_first,
        )
        for line in render_groups(groups):
            self._console.print(line, markup=False, highlight=False)

        logger.info(
            "Sorted directives",
            extra={
                "ordering_event": "ordering.sort.complete",
                "group_count": len(groups),
                "directive_count": sum(len(group.directives) for group in groups),
            },
        )
        return 0

    def _read_paths(self) -> list[str]:
        if self._args.input_path is None:
            return self._stdin.read().splitlines()
        return self._args.input_path.read_text(encoding="utf-8").splitlines()
