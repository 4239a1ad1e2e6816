"""Utilities for rendering ordering results with Rich."""

from __future__ import annotations

from collections.abc import Sequence

from rich import box
from rich.markup import escape
from rich.table import Table

from nsorder.features.ordering import (
    Classification,
    CustomOrder,
    DirectiveGroup,
    GROUPED_WILDCARD,
)


def build_pattern_table(order: CustomOrder) -> Table:
    """Build a table listing each pattern group with its order."""

    table = Table(
        title="Custom Directive Order",
        show_header=True,
        header_style="bold magenta",
        box=box.SIMPLE_HEAD,
    )
    table.add_column("Order", justify="right")
    table.add_column("Pattern", style="bold")
    table.add_column("Kind", style="dim")

    for pattern, pattern_order in order.patterns.items():
        if pattern == order.wildcard:
            kind = "grouped wildcard" if pattern == GROUPED_WILDCARD else "ungrouped wildcard"
            if not order.explicit_wildcard:
                kind += " (implicit)"
        else:
            kind = "namespace"
        table.add_row(str(pattern_order), escape(pattern), kind)

    return table


def build_classification_table(
    rows: Sequence[tuple[str, Classification]],
) -> Table:
    """Build a table showing the group assigned to each path."""

    table = Table(
        title="Directive Classification",
        show_header=True,
        header_style="bold magenta",
        box=box.SIMPLE_HEAD,
    )
    table.add_column("Path", style="bold")
    table.add_column("Group", justify="right")
    table.add_column("Match")

    for path, classification in rows:
        if not classification.is_fallback:
            match = f"{classification.matched_length} segment(s)"
        elif classification.is_grouped_fallback:
            match = "[yellow]grouped fallback[/yellow]"
        else:
            match = "[yellow]own group[/yellow]"
        table.add_row(escape(path), str(classification.group_order), match)

    return table


def render_groups(groups: Sequence[DirectiveGroup]) -> list[str]:
    """Flatten groups into output lines with a blank line between groups."""

    lines: list[str] = []
    for index, group in enumerate(groups):
        if index > 0:
            lines.append("")
        lines.extend(group.paths)
    return lines


__all__ = ["build_classification_table", "build_pattern_table", "render_groups"]
