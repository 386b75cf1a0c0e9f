# Implementation of Knuth–Morris–Pratt algorithm for substring search
# Generalised to needles whose elements only *possibly* match each other

from typing import Any, List, NamedTuple, Optional, Sequence, Tuple

from config import logger
from elements import match_guaranteed, match_haystack, match_possible


class TableEntry(NamedTuple):
    """
    Fallback for one needle position.

    `needle` is where the needle cursor resumes after a mismatch. `haystack`
    is non-zero when that fallback was reached through a possible but not
    guaranteed match, and says how many haystack elements must be re-read.
    """
    needle: int
    haystack: int


Table = Tuple[TableEntry, ...]


def build_table(needle: Sequence[Any]) -> Table:
    """
    Preprocess the needle to create the longest prefix-suffix (LPS) table.
    The table is used to skip elements while matching.
    """
    if len(needle) == 0:
        return ()

    lsp: List[TableEntry] = [TableEntry(0, 0)]

    for i in range(1, len(needle)):
        item = needle[i]
        entry = lsp[-1]

        while True:
            candidate = needle[entry.needle]
            if match_possible(item, candidate):
                haystack = entry.haystack
                if haystack == 0:
                    if not match_guaranteed(item, candidate):
                        haystack = 1
                else:
                    haystack += 1
                entry = TableEntry(entry.needle + 1, haystack)
                break

            if entry.needle == 0:
                break

            entry = lsp[entry.needle - 1]

        lsp.append(entry)

    return tuple(lsp)


class KmpSearch:
    """
    Lazy iterator over the start offsets of a needle inside a haystack.

    Each call to ``next()`` does a bounded amount of work and either returns
    the next offset or raises ``StopIteration``. Not restartable.
    """

    def __init__(self, needle: Sequence[Any], table: Table, haystack: Sequence[Any], overlapping: bool = False):
        self.needle = needle
        self.table = table
        self.haystack = haystack
        self.overlapping = overlapping
        self.needle_pos = 0
        self.haystack_pos = 0

    def __iter__(self) -> 'KmpSearch':
        return self

    def _rewind(self, entry: TableEntry) -> None:
        """Move the needle cursor to `entry`, undoing provisional matches."""
        self.needle_pos = entry.needle
        if entry.haystack != 0:
            self.needle_pos -= entry.haystack
            self.haystack_pos -= entry.haystack

    def __next__(self) -> int:
        needle = self.needle
        haystack = self.haystack
        needle_len = len(needle)
        haystack_len = len(haystack)

        if self.haystack_pos + needle_len - self.needle_pos > haystack_len:
            raise StopIteration

        # The empty needle matches everywhere, end of haystack included
        if needle_len == 0:
            self.haystack_pos += 1
            return self.haystack_pos - 1

        while True:
            if self.haystack_pos >= haystack_len:
                raise StopIteration

            haystack_item = haystack[self.haystack_pos]
            self.haystack_pos += 1

            while True:
                if match_haystack(needle[self.needle_pos], haystack_item):
                    self.needle_pos += 1

                    if self.needle_pos != needle_len:
                        break

                    match_pos = self.haystack_pos - needle_len

                    if self.overlapping:
                        self._rewind(self.table[self.needle_pos - 1])
                    else:
                        self.needle_pos = 0

                    return match_pos

                if self.needle_pos == 0:
                    break

                entry = self.table[self.needle_pos - 1]
                self._rewind(entry)
                if entry.haystack != 0:
                    # haystack_pos stays one past the element under comparison
                    haystack_item = haystack[self.haystack_pos - 1]


class Pattern:
    """A needle together with its failure table, reusable across haystacks."""

    def __init__(self, needle: Sequence[Any]):
        if not isinstance(needle, (str, bytes, tuple, list)):
            needle = tuple(needle)
        self._needle = needle
        self._table = build_table(needle)
        logger.debug(f"Built table of {len(self._table)} entries for needle of length {len(needle)}")

    def __len__(self) -> int:
        return len(self._needle)

    def __repr__(self) -> str:
        return f"Pattern({self._needle!r})"

    @property
    def needle(self) -> Sequence[Any]:
        return self._needle

    @property
    def table(self) -> Table:
        return self._table

    def find(self, haystack: Sequence[Any]) -> KmpSearch:
        """Non-overlapping matches: the needle restarts after every match."""
        logger.debug(f"Starting search over haystack of length {len(haystack)}")
        return KmpSearch(self._needle, self._table, haystack)

    def find_overlapping(self, haystack: Sequence[Any]) -> KmpSearch:
        """Overlapping matches: the needle backs off through the table after a match."""
        logger.debug(f"Starting overlapping search over haystack of length {len(haystack)}")
        return KmpSearch(self._needle, self._table, haystack, overlapping=True)

    def find_first(self, haystack: Sequence[Any]) -> Optional[int]:
        return next(self.find(haystack), None)

    def count(self, haystack: Sequence[Any], overlapping: bool = False) -> int:
        search = self.find_overlapping(haystack) if overlapping else self.find(haystack)
        return sum(1 for _ in search)


def kmp_search(haystack: Sequence[Any], needle: Sequence[Any], overlapping: bool = True) -> List[int]:
    """
    KMP searching algorithm.
    Returns a list of positions where needle occurs in haystack.
    """
    pattern = Pattern(needle)
    if overlapping:
        return list(pattern.find_overlapping(haystack))
    return list(pattern.find(haystack))
