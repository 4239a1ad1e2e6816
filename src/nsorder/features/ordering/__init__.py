"""Public API for the directive ordering feature."""

from .domain import (
    GROUPED_WILDCARD,
    SPECIAL_PRIORITIES,
    UNGROUPED_WILDCARD,
    CustomOrder,
    CustomOrderError,
    DirectiveToken,
    DuplicatePatternError,
    DuplicateWildcardError,
    EmptyOrWhitespaceGroupError,
    InvalidLeadingOrTrailingDelimiterError,
    MalformedSegmentError,
    PatternTrie,
    TokenComparer,
    TrieMatch,
    compare_tokens,
    parse_custom_order,
    try_parse_custom_order,
)
from .usecases import (
    Classification,
    Directive,
    DirectiveClassifier,
    DirectiveGroup,
    TrieCache,
    compile_order,
    default_trie_cache,
    resolve_order,
    sort_directives,
)

parse_configuration = parse_custom_order

__all__ = [
    "Classification",
    "CustomOrder",
    "CustomOrderError",
    "Directive",
    "DirectiveClassifier",
    "DirectiveGroup",
    "DirectiveToken",
    "DuplicatePatternError",
    "DuplicateWildcardError",
    "EmptyOrWhitespaceGroupError",
    "GROUPED_WILDCARD",
    "InvalidLeadingOrTrailingDelimiterError",
    "MalformedSegmentError",
    "PatternTrie",
    "SPECIAL_PRIORITIES",
    "TokenComparer",
    "TrieCache",
    "TrieMatch",
    "UNGROUPED_WILDCARD",
    "compare_tokens",
    "compile_order",
    "default_trie_cache",
    "parse_configuration",
    "parse_custom_order",
    "resolve_order",
    "sort_directives",
    "try_parse_custom_order",
]
