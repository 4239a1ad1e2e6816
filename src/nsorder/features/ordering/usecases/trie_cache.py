"""
Summary: Memoize compiled classifiers by configuration text.
Why: Parse and build each distinct custom order once per process.
"""

from __future__ import annotations

from typing import final

from nsorder.features.ordering.domain import parse_custom_order
from nsorder.platform.logging import logger

from .classify import DirectiveClassifier


@final
class TrieCache:
    """Process-wide table of :class:`DirectiveClassifier` keyed by config text.

    Construction is idempotent rather than locked: two threads racing on the
    same text may both build a classifier, but only the first stored one is
    ever returned.
    """

    def __init__(self) -> None:
        self._entries: dict[str, DirectiveClassifier] = {}

    def get(self, text: str) -> DirectiveClassifier:
        """Return the classifier for ``text``, building it on first use.

        Raises:
            CustomOrderError: If ``text`` is not a valid custom order. Rejected
                texts are not cached.
        """

        cached = self._entries.get(text)
        if cached is not None:
            return cached

        classifier = DirectiveClassifier(parse_custom_order(text))
        stored = self._entries.setdefault(text, classifier)
        if stored is classifier:
            logger.debug("Compiled custom order %r", text)
        return stored

    def __contains__(self, text: object) -> bool:
        return text in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self._entries.clear()


default_trie_cache: TrieCache = TrieCache()


def compile_order(text: str, cache: TrieCache | None = None) -> DirectiveClassifier:
    """Return the (cached) classifier for a custom order string."""

    return (cache if cache is not None else default_trie_cache).get(text)


__all__ = ["TrieCache", "compile_order", "default_trie_cache"]
