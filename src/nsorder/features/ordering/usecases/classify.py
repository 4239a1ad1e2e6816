"""
Summary: Classify dotted directive paths into ordering groups.
Why: Give hosts a single entry point combining a parsed order and its trie.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import final

from nsorder.features.ordering.domain import (
    DELIMITER,
    CustomOrder,
    PatternTrie,
    TrieMatch,
    resolve_identifier,
)


@dataclass(frozen=True, slots=True)
class Classification:
    """Group assignment for one directive path.

    Attributes:
        group_order: Order of the group the path belongs to.
        is_grouped_fallback: ``True`` when the path matched no literal pattern
            and falls into the shared ``**`` group.
        matched_length: Segment count of the matching pattern (``0`` when the
            wildcard answered).
    """

    group_order: int
    is_grouped_fallback: bool
    matched_length: int

    @property
    def is_fallback(self) -> bool:
        return self.matched_length == 0


@final
class DirectiveClassifier:
    """Immutable pairing of a :class:`CustomOrder` with its :class:`PatternTrie`.

    Safe to share across threads; nothing is mutated after construction.
    """

    def __init__(self, order: CustomOrder, trie: PatternTrie | None = None) -> None:
        self._order = order
        self._trie = trie if trie is not None else PatternTrie.build(order)

    @property
    def order(self) -> CustomOrder:
        return self._order

    @property
    def trie(self) -> PatternTrie:
        return self._trie

    @property
    def group_unmatched(self) -> bool:
        return self._order.group_unmatched

    def classify(self, dotted_path: str) -> Classification:
        """Return the group of ``dotted_path`` under the longest matching pattern.

        Segments are escape-resolved first, so ``@System.IO`` classifies like
        ``System.IO``.
        """

        segments = [
            resolve_identifier(segment) for segment in dotted_path.strip().split(DELIMITER)
        ]
        return self.classify_segments(segments)

    def classify_segments(self, segments: Sequence[str]) -> Classification:
        return self._to_classification(self._trie.lookup(segments))

    def _to_classification(self, match: TrieMatch) -> Classification:
        return Classification(
            group_order=match.order,
            is_grouped_fallback=match.is_fallback and self._order.group_unmatched,
            matched_length=match.matched_length,
        )


__all__ = ["Classification", "DirectiveClassifier"]
