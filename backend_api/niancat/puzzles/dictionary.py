from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, List, Protocol, runtime_checkable

from .normalize import canonical_key, is_nine_letters, normalize

logger = logging.getLogger(__name__)


@runtime_checkable
class WordDictionary(Protocol):
    """Lookups the puzzle engine needs from a dictionary."""

    def is_solution(self, word: str) -> bool: ...

    def has_solution(self, puzzle: str) -> bool: ...

    def no_of_solutions(self, puzzle: str) -> int: ...

    def find_solutions(self, puzzle: str) -> List[str]: ...


# PUBLIC_INTERFACE
class AnagramDictionary:
    """Immutable index of nine letter words grouped by anagram.

    Built once from an ordered sequence of raw strings. Each entry is
    normalized, anything that is not nine letters long is dropped, and the
    remaining words are grouped under their canonical key. Groups keep the
    order in which their words first appeared.

    Example:
        d = AnagramDictionary(["DATORSPEL", "speldator"])
        d.no_of_solutions("SPDATOREL")  # 2
    """

    __slots__ = ("_words", "_solutions")

    def __init__(self, words: Iterable[str]):
        normalized = (normalize(w) for w in words)
        # dict.fromkeys deduplicates while keeping first-seen order
        unique = dict.fromkeys(w for w in normalized if is_nine_letters(w))

        solutions: Dict[str, List[str]] = {}
        for word in unique:
            solutions.setdefault(canonical_key(word), []).append(word)

        self._words: FrozenSet[str] = frozenset(unique)
        self._solutions: Dict[str, List[str]] = solutions
        logger.info(
            "Built anagram dictionary with %d words in %d groups",
            len(self._words),
            len(self._solutions),
        )

    # PUBLIC_INTERFACE
    @classmethod
    def from_file(cls, path: str | Path, encoding: str = "utf-8") -> "AnagramDictionary":
        """Build a dictionary from a word list file with one word per line."""
        return cls(read_word_list(path, encoding=encoding))

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and normalize(word) in self._words

    def is_solution(self, word: str) -> bool:
        """Check if a word is in the dictionary."""
        return normalize(word) in self._words

    def has_solution(self, puzzle: str) -> bool:
        return self._key(puzzle) in self._solutions

    def no_of_solutions(self, puzzle: str) -> int:
        """Number of dictionary words that are anagrams of the puzzle."""
        return len(self._solutions.get(self._key(puzzle), ()))

    def find_solutions(self, puzzle: str) -> List[str]:
        """All dictionary words that are anagrams of the puzzle.

        Callers should treat the result as a set. A copy is returned so the
        index cannot be modified through it.
        """
        return list(self._solutions.get(self._key(puzzle), ()))

    @staticmethod
    def _key(puzzle: str) -> str:
        return canonical_key(normalize(puzzle))


# PUBLIC_INTERFACE
def read_word_list(path: str | Path, encoding: str = "utf-8") -> List[str]:
    """Read a word list file, one word per line, skipping blank lines."""
    with open(path, encoding=encoding) as f:
        return [line.strip() for line in f if line.strip()]
