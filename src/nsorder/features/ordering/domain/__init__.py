"""
Summary: Pure ordering primitives: pattern parser, pattern trie, token comparer.
Why: Keep the algorithmic core free of configuration and host concerns.
"""

from .errors import (
    CustomOrderError,
    DuplicatePatternError,
    DuplicateWildcardError,
    EmptyOrWhitespaceGroupError,
    InvalidLeadingOrTrailingDelimiterError,
    MalformedSegmentError,
)
from .pattern_spec import (
    DELIMITER,
    GROUPED_WILDCARD,
    SEPARATOR,
    UNGROUPED_WILDCARD,
    CustomOrder,
    parse_custom_order,
    try_parse_custom_order,
)
from .pattern_trie import PatternTrie, TrieMatch, TrieNode
from .token_comparer import (
    SPECIAL_PRIORITIES,
    DirectiveToken,
    TokenComparer,
    compare_tokens,
    resolve_identifier,
)

__all__ = [
    "CustomOrder",
    "CustomOrderError",
    "DELIMITER",
    "DirectiveToken",
    "DuplicatePatternError",
    "DuplicateWildcardError",
    "EmptyOrWhitespaceGroupError",
    "GROUPED_WILDCARD",
    "InvalidLeadingOrTrailingDelimiterError",
    "MalformedSegmentError",
    "PatternTrie",
    "SEPARATOR",
    "SPECIAL_PRIORITIES",
    "TokenComparer",
    "TrieMatch",
    "TrieNode",
    "UNGROUPED_WILDCARD",
    "compare_tokens",
    "parse_custom_order",
    "resolve_identifier",
    "try_parse_custom_order",
]
