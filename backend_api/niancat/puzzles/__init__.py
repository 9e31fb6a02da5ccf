"""
Niancat puzzle core.

Exports:
- normalize and canonical_key text helpers
- AnagramDictionary and the WordDictionary protocol
- diff with its Match and Mismatch results
- solution_hash for public proof of a solve
- PuzzleEngine, the game state machine
- parse_command and Renderer for the chat shell

These modules are framework-agnostic and can be reused by views or services
without importing request objects.
"""

from .dictionary import AnagramDictionary, WordDictionary, read_word_list
from .diff import Match, Mismatch, diff
from .engine import GameState, PuzzleEngine, SolverHistoryError
from .hashing import solution_hash
from .normalize import canonical_key, normalize
from .parser import parse_command
from .render import Message, Renderer

__all__ = [
    "AnagramDictionary",
    "WordDictionary",
    "read_word_list",
    "Match",
    "Mismatch",
    "diff",
    "GameState",
    "PuzzleEngine",
    "SolverHistoryError",
    "solution_hash",
    "canonical_key",
    "normalize",
    "parse_command",
    "Message",
    "Renderer",
]
