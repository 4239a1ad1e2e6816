"""src/nsorder/ui/cli/commands/classify.py
What: Print the ordering group of each dotted path.
Why: Let users see which pattern wins for a given namespace.
"""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.markup import escape

from nsorder.features.ordering import CustomOrderError, TrieCache, compile_order
from nsorder.platform.logging import logger
from nsorder.ui.cli.args.options import ClassifyArgs
from nsorder.ui.cli.display import build_classification_table


@final
class ClassifyCommand:
    """Classify paths against the configured or supplied custom order."""

    def __init__(
        self,
        args: ClassifyArgs,
        *,
        console: Console | None = None,
        cache: TrieCache | None = None,
    ) -> None:
        self._args = args
        self._console = console or Console()
        self._cache = cache

    def execute(self) -> int:
        if self._args.order_text is None:
            self._console.print("[red]No custom order configured; pass --order.[/red]")
            return 1

        try:
            classifier = compile_order(self._args.order_text, self._cache)
        except CustomOrderError as e:
            logger.error(
                "Rejected custom order: %s",
                e,
                extra={"ordering_event": "ordering.config.invalid"},
            )
            self._console.print(
                f"[red]Invalid custom order:[/red] {escape(str(e))}", highlight=False
            )
            return 1

        rows = [(path, classifier.classify(path.strip())) for path in self._args.paths]
        logger.debug(
            "Classified paths",
            extra={"ordering_event": "ordering.classify", "directive_count": len(rows)},
        )
        self._console.print(build_classification_table(rows))
        return 0
