"""
Summary: Tests for the classifier memoization table.
Why: Each distinct custom order must compile once and be shared.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from nsorder.features.ordering import (
    CustomOrderError,
    TrieCache,
    compile_order,
    default_trie_cache,
)


def test_same_text_returns_same_classifier() -> None:
    cache = TrieCache()

    first = cache.get("System;Microsoft")
    second = cache.get("System;Microsoft")

    assert first is second
    assert len(cache) == 1
    assert "System;Microsoft" in cache


def test_distinct_texts_are_cached_separately() -> None:
    cache = TrieCache()

    assert cache.get("System") is not cache.get("System;**")
    assert len(cache) == 2


def test_rejected_text_is_not_cached() -> None:
    cache = TrieCache()

    with pytest.raises(CustomOrderError):
        _ = cache.get("System;;Windows")

    assert len(cache) == 0


def test_compile_order_uses_supplied_empty_cache() -> None:
    cache = TrieCache()

    classifier = compile_order("System", cache)

    assert cache.get("System") is classifier
    assert "System" not in default_trie_cache


def test_compile_order_defaults_to_shared_cache() -> None:
    classifier = compile_order("Microsoft")

    assert default_trie_cache.get("Microsoft") is classifier


def test_concurrent_builds_settle_on_one_entry() -> None:
    cache = TrieCache()

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: cache.get("System;*;Acme"), range(32)))

    assert all(result is results[0] for result in results)
    assert len(cache) == 1


def test_clear_empties_cache() -> None:
    cache = TrieCache()
    _ = cache.get("System")

    cache.clear()

    assert len(cache) == 0
