from __future__ import annotations

import hashlib

from .normalize import normalize


# PUBLIC_INTERFACE
def solution_hash(word: str, name: str) -> str:
    """SHA-256 hex digest of the normalized word followed by the solver name.

    Published in the main channel as proof of a solve without revealing
    the word.
    """
    return hashlib.sha256((normalize(word) + name).encode("utf-8")).hexdigest()
