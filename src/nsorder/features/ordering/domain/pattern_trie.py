"""
Summary: Prefix tree over dotted namespace patterns with longest-match lookup.
Why: Rank a directive path by the most specific configured pattern it falls under.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import final

from .pattern_spec import DELIMITER, WILDCARD_PATTERNS, CustomOrder


@dataclass(slots=True)
class TrieNode:
    """One namespace segment in the pattern trie.

    Attributes:
        segment: Segment text; empty for the root.
        children: Child nodes keyed by their segment text.
        order: Order of the pattern ending here, ``None`` for routing nodes.
    """

    segment: str = ""
    children: dict[str, TrieNode] = field(default_factory=dict)
    order: int | None = None

    @property
    def is_terminal(self) -> bool:
        return self.order is not None

    def child(self, segment: str) -> TrieNode | None:
        return self.children.get(segment)

    def add_child(self, segment: str) -> TrieNode:
        """Return the child for ``segment``, creating a routing node if needed."""

        node = self.children.get(segment)
        if node is None:
            node = TrieNode(segment=segment)
            self.children[segment] = node
        return node


@dataclass(frozen=True, slots=True)
class TrieMatch:
    """Result of a trie lookup.

    Attributes:
        order: Order of the deepest terminal pattern on the walked path, or
            the wildcard order when no literal pattern matched.
        matched_length: Number of segments in the matching pattern; ``0``
            means the wildcard answered.
    """

    order: int
    matched_length: int

    @property
    def is_fallback(self) -> bool:
        return self.matched_length == 0


@final
class PatternTrie:
    """Immutable trie built once from a :class:`CustomOrder`."""

    def __init__(self, root: TrieNode, fallback_order: int) -> None:
        self._root = root
        self._fallback_order = fallback_order

    @classmethod
    def build(cls, order: CustomOrder) -> PatternTrie:
        """Build the trie from a validated pattern table.

        Patterns are inserted in declaration order. Patterns sharing leading
        segments share nodes, e.g. ``System.IO`` and ``System.Collections``
        both hang below one ``System`` node.
        """

        root = TrieNode()
        fallback_order = order.wildcard_order

        for pattern, pattern_order in order.patterns.items():
            if pattern in WILDCARD_PATTERNS:
                continue
            node = root
            for segment in pattern.split(DELIMITER):
                node = node.add_child(segment)
            node.order = pattern_order

        return cls(root, fallback_order)

    @property
    def fallback_order(self) -> int:
        return self._fallback_order

    def lookup(self, segments: Sequence[str]) -> TrieMatch:
        """Find the deepest terminal pattern along ``segments``.

        Args:
            segments: Namespace path split into segments.

        Returns:
            TrieMatch: Longest matching pattern, or the wildcard fallback.
        """

        best = TrieMatch(order=self._fallback_order, matched_length=0)
        node = self._root
        for depth, segment in enumerate(segments, start=1):
            next_node = node.child(segment)
            if next_node is None:
                break
            node = next_node
            if node.order is not None:
                best = TrieMatch(order=node.order, matched_length=depth)
        return best

    def lookup_path(self, dotted_path: str) -> TrieMatch:
        """Split ``dotted_path`` on the delimiter and look it up."""

        return self.lookup(dotted_path.split(DELIMITER))

    def iter_patterns(self) -> Iterator[tuple[str, int]]:
        """Yield every literal ``(pattern, order)`` stored in the trie."""

        stack: list[tuple[TrieNode, tuple[str, ...]]] = [(self._root, ())]
        while stack:
            node, prefix = stack.pop()
            if node.order is not None:
                yield DELIMITER.join(prefix), node.order
            for segment in sorted(node.children, reverse=True):
                stack.append((node.children[segment], (*prefix, segment)))


__all__ = ["PatternTrie", "TrieMatch", "TrieNode"]
