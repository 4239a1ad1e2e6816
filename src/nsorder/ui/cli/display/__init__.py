"""Display helpers for CLI output."""

from nsorder.ui.cli.display.tables import (
    build_classification_table,
    build_pattern_table,
    render_groups,
)

__all__ = ["build_classification_table", "build_pattern_table", "render_groups"]
