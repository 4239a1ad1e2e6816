"""
Summary: Rich console handler with styled rendering for ordering events.
Why: Keep structured ordering log records readable on the terminal.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class OrderingRichHandler(RichHandler):
    """Rich handler that renders ``ordering_event`` records with icons."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "ordering.config.valid": ("✅", "green"),
        "ordering.config.invalid": ("❌", "red"),
        "ordering.sort.complete": ("📦", "cyan"),
        "ordering.classify": ("🔎", "blue"),
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with compact console settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _render_ordering_event(self, record: logging.LogRecord, message: str) -> Text | None:
        event = getattr(record, "ordering_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        _ = text.append(message, style=Style(color=color))

        details: list[str] = []
        group_count = getattr(record, "group_count", None)
        if isinstance(group_count, int):
            details.append(f"groups={group_count}")
        directive_count = getattr(record, "directive_count", None)
        if isinstance(directive_count, int):
            details.append(f"directives={directive_count}")
        if details:
            _ = text.append(" [" + ", ".join(details) + "]", style=Style(dim=True))
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for ordering events."""

        event_text = self._render_ordering_event(record, message)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["OrderingRichHandler"]
