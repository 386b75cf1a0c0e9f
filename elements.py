"""Comparison capabilities for needle elements.

A needle element answers three questions:

* ``is_match_possible(other)`` - could two needle elements stand for the same
  position? Only used while building the failure table.
* ``is_match_guaranteed(other)`` - are two needle elements definitely
  equivalent? Never weaker than ``is_match_possible``.
* ``match_haystack(other)`` - does the needle element match a haystack
  element? The haystack element may be of a different type.

Plain values (characters, byte values, booleans, ...) get all three as ``==``.
"""
from dataclasses import dataclass
from typing import Any, List, Optional

from config import DEFAULT_WILDCARD


class KmpSearchable:
    """Base class for needle elements with their own notion of a match."""

    def is_match_possible(self, other: Any) -> bool:
        return self == other

    def is_match_guaranteed(self, other: Any) -> bool:
        return self == other

    def match_haystack(self, other: Any) -> bool:
        return self == other


def match_possible(a: Any, b: Any) -> bool:
    if isinstance(a, KmpSearchable):
        return a.is_match_possible(b)
    return a == b


def match_guaranteed(a: Any, b: Any) -> bool:
    if isinstance(a, KmpSearchable):
        return a.is_match_guaranteed(b)
    return a == b


def match_haystack(needle_item: Any, haystack_item: Any) -> bool:
    if isinstance(needle_item, KmpSearchable):
        return needle_item.match_haystack(haystack_item)
    return needle_item == haystack_item


def _as_char(item: Any) -> Any:
    # Raw bytes index to ints
    if isinstance(item, int) and not isinstance(item, bool):
        return chr(item)
    return item


def _fold(item: Any) -> Any:
    item = _as_char(item)
    return item.casefold() if isinstance(item, str) else item


@dataclass(frozen=True)
class CaseFoldChar(KmpSearchable):
    """A character that matches its haystack counterpart in any case.

    Two needle characters differing only in case are a possible match but
    not a guaranteed one, so the table records them as provisional.
    """
    value: str

    def is_match_possible(self, other: 'CaseFoldChar') -> bool:
        return _fold(self.value) == _fold(other.value)

    def is_match_guaranteed(self, other: 'CaseFoldChar') -> bool:
        return self.value == other.value

    def match_haystack(self, other: Any) -> bool:
        return _fold(self.value) == _fold(other)


@dataclass(frozen=True)
class WildcardChar(KmpSearchable):
    """A character, or a wildcard (``value is None``) matching anything."""
    value: Optional[str] = None
    ignore_case: bool = False

    @property
    def is_wildcard(self) -> bool:
        return self.value is None

    def _same(self, a: Any, b: Any) -> bool:
        if self.ignore_case:
            return _fold(a) == _fold(b)
        return _as_char(a) == _as_char(b)

    def is_match_possible(self, other: 'WildcardChar') -> bool:
        if self.is_wildcard or other.is_wildcard:
            return True
        return self._same(self.value, other.value)

    def is_match_guaranteed(self, other: 'WildcardChar') -> bool:
        # Two wildcards accept exactly the same haystack elements
        return self.value == other.value

    def match_haystack(self, other: Any) -> bool:
        if self.is_wildcard:
            return True
        return self._same(self.value, other)


def casefold_needle(text: str) -> List[CaseFoldChar]:
    """Turn text into a needle matching it regardless of case."""
    return [CaseFoldChar(char) for char in text]


def wildcard_needle(text: str, wildcard: str = DEFAULT_WILDCARD, ignore_case: bool = False) -> List[WildcardChar]:
    """
    Turn text into a needle where every `wildcard` character matches any
    single haystack element.
    """
    return [
        WildcardChar(None if char == wildcard else char, ignore_case)
        for char in text
    ]
