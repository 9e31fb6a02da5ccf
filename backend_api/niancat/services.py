"""
Process-wide puzzle engine for the HTTP shell.

The engine keeps the game state in memory and is not thread safe, so every
command goes through `dispatch`, which applies it while holding a single
lock. The dictionary is built lazily on first use from the Word table, or
from settings.NIANCAT_DICTIONARY_PATH when the table is empty.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import List, Optional

from django.conf import settings

from .models import Word
from .puzzles.commands import Command
from .puzzles.dictionary import AnagramDictionary
from .puzzles.engine import PuzzleEngine
from .puzzles.render import Message, Renderer
from .puzzles.responses import Response

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_engine: Optional[PuzzleEngine] = None


@dataclass(frozen=True)
class DispatchResult:
    response: Response
    messages: List[Message]


def build_dictionary() -> AnagramDictionary:
    """Build the anagram index from stored words or the configured file."""
    words = list(Word.objects.order_by("id").values_list("text", flat=True))
    if words:
        logger.info("Building dictionary from %d stored word(s)", len(words))
        return AnagramDictionary(words)

    path = getattr(settings, "NIANCAT_DICTIONARY_PATH", None)
    if path:
        logger.info("No stored words, building dictionary from %s", path)
        return AnagramDictionary.from_file(path)

    logger.warning("No dictionary words available; every puzzle will be rejected")
    return AnagramDictionary([])


def _get_engine() -> PuzzleEngine:
    # Caller holds _lock.
    global _engine
    if _engine is None:
        _engine = PuzzleEngine(build_dictionary())
    return _engine


# PUBLIC_INTERFACE
def get_renderer() -> Renderer:
    return Renderer(settings.NIANCAT_MAIN_CHANNEL)


# PUBLIC_INTERFACE
def dispatch(command: Command) -> DispatchResult:
    """Apply a command to the shared engine and render the response."""
    with _lock:
        response = _get_engine().apply(command)
    return DispatchResult(response=response, messages=get_renderer().render(response))


# PUBLIC_INTERFACE
def reset_engine() -> None:
    """Drop the shared engine; the next command rebuilds it with empty state."""
    global _engine
    with _lock:
        _engine = None
