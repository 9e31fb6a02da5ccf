from __future__ import annotations

import logging
from typing import Iterable, List

from django.db import transaction

from .models import Word
from .puzzles.normalize import normalize

logger = logging.getLogger(__name__)

BATCH_SIZE = 1000

DEFAULT_SEED: List[str] = [
    "galltjuta", "datorspel", "speldator", "pusselbit", "ordlistan",
    "sommarlov", "kattungen", "bokhyllan", "flygplats",
]


# PUBLIC_INTERFACE
def import_words(words: Iterable[str], replace: bool = False) -> int:
    """Bulk insert normalized words into the Word table.

    Empty entries and duplicates are skipped; words already stored are left
    alone. With `replace`, the table is emptied first.

    Returns number of words in the input that were not stored before.
    """
    unique = [w for w in dict.fromkeys(normalize(w) for w in words) if w]
    with transaction.atomic():
        if replace:
            Word.objects.all().delete()
        existing = set(Word.objects.values_list("text", flat=True))
        new = [Word(text=w, length=len(w)) for w in unique if w not in existing]
        Word.objects.bulk_create(new, batch_size=BATCH_SIZE, ignore_conflicts=True)
    logger.info("Imported %d new word(s) of %d", len(new), len(unique))
    return len(new)


# PUBLIC_INTERFACE
def ensure_seed_words(seed_words: List[str] | None = None) -> int:
    """Ensure the Word table has at least a minimal playable list.

    Returns number of words inserted (0 if already present).
    """
    if Word.objects.exists():
        return 0
    return import_words(seed_words or DEFAULT_SEED)
