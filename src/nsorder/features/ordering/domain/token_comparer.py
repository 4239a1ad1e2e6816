"""
Summary: Total ordering over directive name tokens with optional root priorities.
Why: Sort directive segments case-insensitively while keeping well-known roots first.
"""

from __future__ import annotations

import functools
import re
import unicodedata
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, ClassVar, Final, final

# Roots placed at the top when sorting directive roots; lower index sorts first.
SPECIAL_PRIORITIES: Final[tuple[str, ...]] = (
    "System",
    "Microsoft",
    "Windows",
    "Xamarin",
)

_VERBATIM_PREFIX: Final[str] = "@"
_UNICODE_ESCAPE: Final[re.Pattern[str]] = re.compile(
    r"\\u([0-9A-Fa-f]{4})|\\U([0-9A-Fa-f]{8})"
)


def resolve_identifier(text: str) -> str:
    """Return the identifier value for a source spelling.

    Drops a leading verbatim marker and decodes ``\\uXXXX``/``\\UXXXXXXXX``
    escapes, so ``@class`` and ``cl\\u0061ss`` both resolve to ``class``.
    """

    if text.startswith(_VERBATIM_PREFIX):
        text = text[len(_VERBATIM_PREFIX):]

    def _decode(match: re.Match[str]) -> str:
        digits = match.group(1) or match.group(2)
        return chr(int(digits, 16))

    return _UNICODE_ESCAPE.sub(_decode, text)


@dataclass(frozen=True, slots=True, eq=False)
class DirectiveToken:
    """One identifier segment of an import directive.

    Tokens compare by identity; use :class:`TokenComparer` for ordering.

    Attributes:
        value_text: Normalized identifier value used for comparison.
        text: Source spelling the token was read from.
        is_directive_root: Whether the token directly follows the import
            (or static import) keyword, i.e. it is the namespace root.
    """

    value_text: str
    text: str
    is_directive_root: bool = False

    @classmethod
    def from_source(cls, text: str, *, is_directive_root: bool = False) -> DirectiveToken:
        return cls(
            value_text=resolve_identifier(text),
            text=text,
            is_directive_root=is_directive_root,
        )


def _compare_values(left: Any, right: Any) -> int:
    return (left > right) - (left < right)


def _strip_marks(text: str) -> str:
    # NFKD folds width variants and splits off combining diacritics.
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(char for char in decomposed if not unicodedata.combining(char))


def _case_insensitive_key(text: str) -> str:
    return _strip_marks(text).casefold()


def _case_sensitive_key(text: str) -> tuple[tuple[str, int], ...]:
    # Lowercase before uppercase once letters are otherwise equal.
    return tuple(
        (char.casefold(), 0 if char.islower() else 1) for char in _strip_marks(text)
    )


def _compare_priority(left: str, right: str) -> int | None:
    """Compare two root names against :data:`SPECIAL_PRIORITIES`.

    Returns:
        int | None: ``-1``/``0``/``1`` when at least one name is privileged,
        otherwise ``None`` so the lexical comparison decides.
    """

    for index, special in enumerate(SPECIAL_PRIORITIES):
        if special != left:
            continue
        if right in SPECIAL_PRIORITIES[:index]:
            return 1
        if right == special:
            return 0
        return -1

    if right in SPECIAL_PRIORITIES:
        return 1
    return None


@final
class TokenComparer:
    """Stateless comparer for :class:`DirectiveToken` values.

    Use the shared :attr:`NORMAL` and :attr:`SYSTEM_FIRST` instances.
    """

    NORMAL: ClassVar[TokenComparer]
    SYSTEM_FIRST: ClassVar[TokenComparer]

    __slots__ = ("_special_case_system",)

    def __init__(self, *, special_case_system: bool) -> None:
        self._special_case_system = special_case_system

    @classmethod
    def for_mode(cls, special_case_roots: bool) -> TokenComparer:
        return cls.SYSTEM_FIRST if special_case_roots else cls.NORMAL

    @property
    def special_case_system(self) -> bool:
        return self._special_case_system

    def compare(self, x: DirectiveToken, y: DirectiveToken) -> int:
        """Return ``-1``, ``0`` or ``1`` as ``x`` sorts before, with or after ``y``."""

        if self._special_case_system and x.is_directive_root and y.is_directive_root:
            decision = _compare_priority(x.value_text, y.value_text)
            if decision is not None:
                return decision

        return self._compare_worker(x, y)

    @staticmethod
    def _compare_worker(x: DirectiveToken, y: DirectiveToken) -> int:
        if x is y:
            return 0

        # Group 'a' and 'A' words together first, then put 'a' words first.
        result = _compare_values(
            _case_insensitive_key(x.value_text), _case_insensitive_key(y.value_text)
        )
        if result != 0:
            return result

        return _compare_values(
            _case_sensitive_key(x.value_text), _case_sensitive_key(y.value_text)
        )

    def sort_key(self) -> Callable[[DirectiveToken], Any]:
        """Return a ``key=`` callable for :func:`sorted`."""

        return functools.cmp_to_key(self.compare)

    def sorted(self, tokens: Iterable[DirectiveToken]) -> list[DirectiveToken]:
        return sorted(tokens, key=self.sort_key())


TokenComparer.NORMAL = TokenComparer(special_case_system=False)
TokenComparer.SYSTEM_FIRST = TokenComparer(special_case_system=True)


def compare_tokens(
    x: DirectiveToken, y: DirectiveToken, special_case_roots: bool = False
) -> int:
    """Compare two tokens with the comparer for the requested mode."""

    return TokenComparer.for_mode(special_case_roots).compare(x, y)


__all__ = [
    "DirectiveToken",
    "SPECIAL_PRIORITIES",
    "TokenComparer",
    "compare_tokens",
    "resolve_identifier",
]
