"""
Summary: Tests for grouping and sorting directive paths.
Why: Verify classifier groups and comparer order combine as a host expects.
"""

from __future__ import annotations

import logging

import pytest

from nsorder.features.ordering import (
    Directive,
    TokenComparer,
    TrieCache,
    compile_order,
    resolve_order,
    sort_directives,
)
from nsorder.features.ordering.usecases.sort_directives import compare_directives


def test_unconfigured_order_is_one_alphabetical_group() -> None:
    groups = sort_directives(["Zeta.A", "System.IO", "alpha", "Microsoft.Win32"])

    assert len(groups) == 1
    assert groups[0].order is None
    assert groups[0].paths == ["System.IO", "Microsoft.Win32", "alpha", "Zeta.A"]


def test_system_first_can_be_disabled() -> None:
    groups = sort_directives(
        ["Zeta.A", "System.IO", "alpha", "Microsoft.Win32"], system_first=False
    )

    assert groups[0].paths == ["alpha", "Microsoft.Win32", "System.IO", "Zeta.A"]


def test_groups_follow_custom_order() -> None:
    classifier = compile_order("MyCompany;System", TrieCache())
    paths = [
        "System.IO",
        "MyCompany.Core",
        "Newtonsoft.Json",
        "Azure.Core",
        "System.Collections",
        "MyCompany",
    ]

    groups = sort_directives(paths, classifier=classifier)

    assert [group.order for group in groups] == [0, 1, 2]
    assert groups[0].paths == ["MyCompany", "MyCompany.Core"]
    assert groups[1].paths == ["System.Collections", "System.IO"]
    assert groups[2].paths == ["Azure.Core", "Newtonsoft.Json"]
    assert [group.is_grouped_fallback for group in groups] == [False, False, True]


def test_ungrouped_wildcard_emits_singleton_groups() -> None:
    classifier = compile_order("System;*", TrieCache())

    groups = sort_directives(["Zeta", "System.IO", "Alpha"], classifier=classifier)

    assert [group.paths for group in groups] == [["System.IO"], ["Alpha"], ["Zeta"]]
    assert [group.order for group in groups] == [0, 1, 1]
    assert not any(group.is_grouped_fallback for group in groups)


def test_blank_paths_are_ignored() -> None:
    groups = sort_directives(["", "  ", " System.Text "])

    assert groups[0].paths == ["System.Text"]


def test_directive_marks_first_segment_as_root() -> None:
    directive = Directive.from_path("System.Collections.Generic")

    assert directive.segments == ("System", "Collections", "Generic")
    assert [token.is_directive_root for token in directive.tokens] == [True, False, False]


def test_prefix_directive_sorts_first() -> None:
    shorter = Directive.from_path("System")
    longer = Directive.from_path("System.IO")

    assert compare_directives(shorter, longer, TokenComparer.NORMAL) == -1
    assert compare_directives(longer, shorter, TokenComparer.NORMAL) == 1


@pytest.mark.parametrize("text", [None, "", "   "])
def test_resolve_order_without_text(text: str | None) -> None:
    assert resolve_order(text) is None


def test_resolve_order_falls_back_on_rejection(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR, logger="nsorder"):
        classifier = resolve_order("System;Microsoft;System")

    assert classifier is None
    assert "using alphabetical order" in caplog.text


def test_resolve_order_compiles_valid_text() -> None:
    cache = TrieCache()

    classifier = resolve_order("System", cache)

    assert classifier is cache.get("System")
