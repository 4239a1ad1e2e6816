"""
Summary: Group and sort dotted directive paths using a compiled custom order.
Why: Apply the classifier and token comparer together the way a host sort pass does.
"""

from __future__ import annotations

import functools
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass

from nsorder.features.ordering.domain import (
    DELIMITER,
    CustomOrderError,
    DirectiveToken,
    TokenComparer,
)
from nsorder.platform.logging import logger

from .classify import DirectiveClassifier
from .trie_cache import TrieCache, compile_order


@dataclass(frozen=True, slots=True)
class Directive:
    """A directive reduced to its dotted namespace path."""

    path: str
    tokens: tuple[DirectiveToken, ...]

    @classmethod
    def from_path(cls, path: str) -> Directive:
        """Tokenize ``path``; the first segment is marked as the directive root."""

        trimmed = path.strip()
        tokens = tuple(
            DirectiveToken.from_source(segment, is_directive_root=index == 0)
            for index, segment in enumerate(trimmed.split(DELIMITER))
        )
        return cls(path=trimmed, tokens=tokens)

    @property
    def segments(self) -> tuple[str, ...]:
        return tuple(token.value_text for token in self.tokens)


@dataclass(frozen=True, slots=True)
class DirectiveGroup:
    """A run of directives that sort together.

    Attributes:
        order: Group order from the custom order, ``None`` when unconfigured.
        directives: Directives in sorted order.
        is_grouped_fallback: Whether this is the shared ``**`` bucket.
    """

    order: int | None
    directives: tuple[Directive, ...]
    is_grouped_fallback: bool = False

    @property
    def paths(self) -> list[str]:
        return [directive.path for directive in self.directives]


def compare_directives(left: Directive, right: Directive, comparer: TokenComparer) -> int:
    """Compare two directives segment by segment; a strict prefix sorts first."""

    for left_token, right_token in zip(left.tokens, right.tokens):
        result = comparer.compare(left_token, right_token)
        if result != 0:
            return result
    return (len(left.tokens) > len(right.tokens)) - (len(left.tokens) < len(right.tokens))


def sort_directives(
    paths: Iterable[str],
    *,
    classifier: DirectiveClassifier | None = None,
    system_first: bool = True,
) -> list[DirectiveGroup]:
    """Split ``paths`` into ordered groups, each sorted internally.

    Args:
        paths: Dotted namespace paths; blank entries are ignored.
        classifier: Compiled custom order. ``None`` yields one alphabetical group.
        system_first: Whether privileged roots such as ``System`` sort first.

    Returns:
        list[DirectiveGroup]: Groups in ascending order. Paths caught by an
        ungrouped ``*`` wildcard each form a group of their own.
    """

    comparer = TokenComparer.for_mode(system_first)
    sort_key = functools.cmp_to_key(
        lambda left, right: compare_directives(left, right, comparer)
    )
    directives = [Directive.from_path(path) for path in paths if path.strip()]

    if classifier is None:
        return [DirectiveGroup(order=None, directives=tuple(sorted(directives, key=sort_key)))]

    buckets: defaultdict[int, list[Directive]] = defaultdict(list)
    for directive in directives:
        classification = classifier.classify_segments(directive.segments)
        buckets[classification.group_order].append(directive)

    fallback_order = classifier.trie.fallback_order
    groups: list[DirectiveGroup] = []
    for order in sorted(buckets):
        members = sorted(buckets[order], key=sort_key)
        if order == fallback_order and not classifier.group_unmatched:
            groups.extend(DirectiveGroup(order=order, directives=(member,)) for member in members)
            continue
        groups.append(
            DirectiveGroup(
                order=order,
                directives=tuple(members),
                is_grouped_fallback=order == fallback_order,
            )
        )

    logger.debug("Sorted %d directive(s) into %d group(s)", len(directives), len(groups))
    return groups


def resolve_order(
    text: str | None, cache: TrieCache | None = None
) -> DirectiveClassifier | None:
    """Compile ``text`` or fall back to plain alphabetical ordering.

    Returns ``None`` when ``text`` is unset or rejected; a rejection is logged
    so the host can surface it as a configuration diagnostic.
    """

    if text is None or not text.strip():
        return None

    try:
        return compile_order(text, cache)
    except CustomOrderError as e:
        logger.error("Invalid custom directive order, using alphabetical order: %s", e)
        return None


__all__ = [
    "Directive",
    "DirectiveGroup",
    "compare_directives",
    "resolve_order",
    "sort_directives",
]
