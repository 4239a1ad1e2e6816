"""src/nsorder/ui/cli/commands/check.py
What: Validate a custom directive order and print its pattern table.
Why: Surface configuration rejections before a sort pass relies on them.
"""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.markup import escape

from nsorder.features.ordering import CustomOrderError, parse_custom_order
from nsorder.platform.logging import logger
from nsorder.ui.cli.args.options import CheckArgs
from nsorder.ui.cli.display import build_pattern_table


@final
class CheckCommand:
    """Parse the custom order and report either the table or the rejection."""

    def __init__(self, args: CheckArgs, *, console: Console | None = None) -> None:
        self._args = args
        self._console = console or Console()

    def execute(self) -> int:
        """Return ``0`` for a valid order and ``1`` for a rejected one."""

        if self._args.order_text is None:
            self._console.print(
                "[yellow]No custom order configured; directives sort alphabetically.[/yellow]"
            )
            return 0

        try:
            order = parse_custom_order(self._args.order_text)
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

        logger.info(
            "Custom order is valid",
            extra={"ordering_event": "ordering.config.valid", "group_count": len(order)},
        )
        self._console.print(build_pattern_table(order))
        unmatched = "grouped together" if order.group_unmatched else "kept apart"
        self._console.print(f"Unmatched directives are {unmatched}.")
        return 0
