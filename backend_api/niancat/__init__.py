"""
Niancat app package initializer.

Re-exports the puzzle core so callers can import from niancat directly, e.g.:

    from niancat import AnagramDictionary, PuzzleEngine
"""

# PUBLIC_INTERFACE
from .puzzles import (
    AnagramDictionary,
    PuzzleEngine,
    Renderer,
    diff,
    normalize,
    parse_command,
    solution_hash,
)

__all__ = [
    "AnagramDictionary",
    "PuzzleEngine",
    "Renderer",
    "diff",
    "normalize",
    "parse_command",
    "solution_hash",
]
