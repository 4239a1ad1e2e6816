"""
Summary: Parse a custom directive order string into an ordered pattern table.
Why: Turn the user-facing configuration value into validated, ranked patterns.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final

from nsorder.platform.logging import logger

from .errors import (
    CustomOrderError,
    DuplicatePatternError,
    DuplicateWildcardError,
    EmptyOrWhitespaceGroupError,
    InvalidLeadingOrTrailingDelimiterError,
    MalformedSegmentError,
)

# Separates pattern groups in the configuration value.
SEPARATOR: Final[str] = ";"

# Splits a pattern group into namespace segments.
DELIMITER: Final[str] = "."

WILDCARD: Final[str] = "*"

# Matches anything; every match keeps its own group.
UNGROUPED_WILDCARD: Final[str] = WILDCARD

# Matches anything; all matches share one trailing group.
GROUPED_WILDCARD: Final[str] = WILDCARD * 2

WILDCARD_PATTERNS: Final[frozenset[str]] = frozenset({UNGROUPED_WILDCARD, GROUPED_WILDCARD})


@dataclass(frozen=True, slots=True)
class CustomOrder:
    """Validated pattern table produced from a configuration string.

    Attributes:
        patterns: Read-only mapping of pattern text to its order. Orders are
            zero-based declaration indexes; a smaller order sorts first.
        group_unmatched: Whether paths matching no literal pattern collapse
            into a single group (``**``) instead of staying separate (``*``).
        wildcard: Text of the registered wildcard pattern.
        explicit_wildcard: ``False`` when the wildcard was synthesized.
    """

    patterns: Mapping[str, int]
    group_unmatched: bool
    wildcard: str
    explicit_wildcard: bool

    @property
    def wildcard_order(self) -> int:
        """Order assigned to paths that match no literal pattern."""

        return self.patterns[self.wildcard]

    def literal_patterns(self) -> Iterator[tuple[str, int]]:
        """Yield ``(pattern, order)`` pairs for non-wildcard groups in order."""

        for pattern, order in self.patterns.items():
            if pattern not in WILDCARD_PATTERNS:
                yield pattern, order

    def to_text(self) -> str:
        """Serialize back to canonical configuration text.

        A synthesized wildcard is omitted so the result parses to an
        equivalent table.
        """

        groups = [
            pattern
            for pattern in self.patterns
            if self.explicit_wildcard or pattern != self.wildcard
        ]
        return SEPARATOR.join(groups)

    def __len__(self) -> int:
        return len(self.patterns)


def parse_custom_order(text: str) -> CustomOrder:
    """Parse and validate a custom directive order.

    Args:
        text: Configuration value such as ``"System;Microsoft;**;MyCompany"``.

    Returns:
        CustomOrder: Patterns ranked in declaration order. When no wildcard was
        declared, a grouped wildcard is appended with the lowest priority.

    Raises:
        CustomOrderError: If any group is invalid. The first offending group
            determines the concrete subclass.
    """

    if not text.strip():
        raise EmptyOrWhitespaceGroupError(text, detail="configuration is blank")

    patterns: dict[str, int] = {}
    wildcard: str | None = None

    for index, raw_group in enumerate(text.split(SEPARATOR)):
        group = raw_group.strip()
        _validate_group(text, index, group)

        if group in WILDCARD_PATTERNS:
            if wildcard is not None:
                raise DuplicateWildcardError(
                    text,
                    group_index=index,
                    group_text=group,
                    detail=f"'{wildcard}' was already declared",
                )
            wildcard = group
        elif group in patterns:
            raise DuplicatePatternError(text, group_index=index, group_text=group)

        patterns[group] = len(patterns)

    explicit_wildcard = wildcard is not None
    if wildcard is None:
        wildcard = GROUPED_WILDCARD
        patterns[wildcard] = len(patterns)

    order = CustomOrder(
        patterns=MappingProxyType(patterns),
        group_unmatched=wildcard == GROUPED_WILDCARD,
        wildcard=wildcard,
        explicit_wildcard=explicit_wildcard,
    )
    logger.debug(
        "Parsed custom order with %d pattern(s); unmatched %s",
        len(patterns),
        "grouped" if order.group_unmatched else "ungrouped",
    )
    return order


def try_parse_custom_order(text: str) -> CustomOrder | None:
    """Parse ``text`` returning ``None`` instead of raising on rejection."""

    try:
        return parse_custom_order(text)
    except CustomOrderError as e:
        logger.warning("Ignoring invalid custom order %r: %s", text, e)
        return None


def _validate_group(text: str, index: int, group: str) -> None:
    """Check a single trimmed group against the grammar."""

    if not group:
        raise EmptyOrWhitespaceGroupError(text, group_index=index)

    if any(char.isspace() for char in group):
        raise MalformedSegmentError(
            text,
            group_index=index,
            group_text=group,
            detail="whitespace is only allowed around separators",
        )

    if group in WILDCARD_PATTERNS:
        return

    if WILDCARD in group:
        raise MalformedSegmentError(
            text,
            group_index=index,
            group_text=group,
            detail="a wildcard must be a group of its own",
        )

    if group.startswith(DELIMITER) or group.endswith(DELIMITER):
        raise InvalidLeadingOrTrailingDelimiterError(
            text, group_index=index, group_text=group
        )

    if DELIMITER * 2 in group:
        raise MalformedSegmentError(
            text,
            group_index=index,
            group_text=group,
            detail="empty namespace segment",
        )


__all__ = [
    "CustomOrder",
    "DELIMITER",
    "GROUPED_WILDCARD",
    "SEPARATOR",
    "UNGROUPED_WILDCARD",
    "WILDCARD",
    "WILDCARD_PATTERNS",
    "parse_custom_order",
    "try_parse_custom_order",
]
