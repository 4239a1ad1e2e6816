"""
Summary: Rejection reasons raised while parsing a custom directive order.
Why: Let hosts report one precise diagnostic for an invalid configuration.
"""

from __future__ import annotations


class CustomOrderError(ValueError):
    """Base exception for an invalid custom order configuration.

    The whole configuration is rejected; no partial table is ever produced.

    Attributes:
        text: Raw configuration text that was rejected.
        group_index: Zero-based index of the offending pattern group, or
            ``None`` when the input as a whole is degenerate.
        group_text: Trimmed text of the offending group (may be empty).
    """

    reason: str = "invalid custom order"

    def __init__(
        self,
        text: str,
        *,
        group_index: int | None = None,
        group_text: str = "",
        detail: str | None = None,
    ) -> None:
        self.text = text
        self.group_index = group_index
        self.group_text = group_text
        self.detail = detail
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        message = self.reason
        if self.group_index is not None:
            message += f" in group {self.group_index + 1}"
            if self.group_text:
                message += f" '{self.group_text}'"
        if self.detail:
            message += f": {self.detail}"
        return message


class EmptyOrWhitespaceGroupError(CustomOrderError):
    """A group is empty after trimming, or the whole input is blank."""

    reason = "empty pattern group"


class DuplicateWildcardError(CustomOrderError):
    """More than one wildcard group (``*`` or ``**``) was declared."""

    reason = "only one wildcard group is allowed"


class DuplicatePatternError(CustomOrderError):
    """The same literal pattern was declared twice."""

    reason = "duplicate pattern group"


class MalformedSegmentError(CustomOrderError):
    """A literal group contains a wildcard, whitespace or doubled delimiter."""

    reason = "malformed pattern group"


class InvalidLeadingOrTrailingDelimiterError(CustomOrderError):
    """A literal group starts or ends with the segment delimiter."""

    reason = "pattern group may not start or end with a delimiter"


__all__ = [
    "CustomOrderError",
    "DuplicatePatternError",
    "DuplicateWildcardError",
    "EmptyOrWhitespaceGroupError",
    "InvalidLeadingOrTrailingDelimiterError",
    "MalformedSegmentError",
]
