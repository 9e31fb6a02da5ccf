from __future__ import annotations

import re
import unicodedata

# Letters a puzzle or word may contain, matched case-insensitively.
ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZÅÄÖ"

PUZZLE_LENGTH = 9

_NON_ALPHABET = re.compile(f"[^{ALPHABET}{ALPHABET.lower()}]")


# PUBLIC_INTERFACE
def normalize(text: str) -> str:
    """Uppercase `text` and drop every character outside the alphabet.

    Input is composed to NFC first, so a decomposed "a" + combining ring is
    treated as Å. The function is total and idempotent.
    """
    composed = unicodedata.normalize("NFC", text or "")
    return _NON_ALPHABET.sub("", composed).upper()


# PUBLIC_INTERFACE
def canonical_key(text: str) -> str:
    """Characters of an already normalized string in code point order."""
    return "".join(sorted(text))


def is_nine_letters(text: str) -> bool:
    return len(text) == PUZZLE_LENGTH
