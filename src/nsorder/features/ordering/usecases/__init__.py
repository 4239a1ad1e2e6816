"""Use cases built on the ordering domain."""

from .classify import Classification, DirectiveClassifier
from .sort_directives import (
    Directive,
    DirectiveGroup,
    compare_directives,
    resolve_order,
    sort_directives,
)
from .trie_cache import TrieCache, compile_order, default_trie_cache

__all__ = [
    "Classification",
    "Directive",
    "DirectiveClassifier",
    "DirectiveGroup",
    "TrieCache",
    "compare_directives",
    "compile_order",
    "default_trie_cache",
    "resolve_order",
    "sort_directives",
]
