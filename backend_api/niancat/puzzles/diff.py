from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import List, Union


@dataclass(frozen=True)
class Match:
    """The two strings are anagrams of each other."""


@dataclass(frozen=True)
class Mismatch:
    """Letters a word lacks (`too_few`) or has in excess (`too_many`).

    Both strings are sorted in code point order, with repeated letters kept.
    """

    too_few: str
    too_many: str


DiffResult = Union[Match, Mismatch]


# PUBLIC_INTERFACE
def diff(puzzle: str, word: str) -> DiffResult:
    """Multiset difference between the letters of `puzzle` and `word`.

    Both arguments are expected to be normalized already. The comparison is
    independent of length, so `Match` means an exact anagram.

    Example:
        diff("GALLTJUTA", "GBLLTJUTC") == Mismatch(too_few="AA", too_many="BC")
    """
    puzzle_counts = Counter(puzzle)
    word_counts = Counter(word)

    too_few: List[str] = []
    too_many: List[str] = []
    for ch in puzzle_counts.keys() | word_counts.keys():
        surplus = word_counts[ch] - puzzle_counts[ch]
        if surplus > 0:
            too_many.extend(ch * surplus)
        elif surplus < 0:
            too_few.extend(ch * -surplus)

    if not too_few and not too_many:
        return Match()
    return Mismatch(too_few="".join(sorted(too_few)), too_many="".join(sorted(too_many)))
