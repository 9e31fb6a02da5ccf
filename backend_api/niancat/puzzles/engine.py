from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .commands import CheckSolution, Command, GetPuzzle, Help, InvalidCommand, SetPuzzle
from .dictionary import WordDictionary
from .diff import Mismatch, diff
from .hashing import solution_hash
from .normalize import is_nine_letters, normalize
from .responses import (
    NOT_IN_DICTIONARY,
    NOT_NINE_CHARACTERS,
    CompositeResponse,
    CorrectSolution,
    GetPuzzleResult,
    HelpResponse,
    IncorrectSolution,
    InvalidCommandResponse,
    InvalidPuzzle,
    NonMatchingWord,
    NoPuzzleSet,
    Notification,
    Response,
    SetPuzzleResult,
    SolutionsNotification,
)

logger = logging.getLogger(__name__)

SolverHistory = Dict[str, List[str]]


class SolverHistoryError(RuntimeError):
    """A solved word has no entry in the solver history.

    The history is seeded with the full anagram group of the puzzle, so this
    means the engine state is broken rather than the input being bad.
    """


@dataclass
class GameState:
    """Current puzzle and who solved which of its words, in order."""

    puzzle: Optional[str] = None
    history: SolverHistory = field(default_factory=dict)


# PUBLIC_INTERFACE
class PuzzleEngine:
    """State machine for the daily nine letter anagram puzzle.

    The engine is not thread safe. Callers receiving commands concurrently
    must serialize calls to `apply`; see `niancat.services`.

    Example:
        engine = PuzzleEngine(AnagramDictionary(["DATORSPEL", "SPELDATOR"]))
        engine.apply(SetPuzzle(Channel("C0"), "SPDATOREL"))
        engine.apply(CheckSolution(Channel("D0"), "erike", "datorspel"))
    """

    def __init__(self, dictionary: WordDictionary, state: Optional[GameState] = None):
        self.dictionary = dictionary
        self.state = state or GameState()

    @property
    def puzzle(self) -> Optional[str]:
        return self.state.puzzle

    @property
    def history(self) -> SolverHistory:
        return self.state.history

    # PUBLIC_INTERFACE
    def apply(self, command: Command) -> Response:
        """Apply a single command and return the response to deliver."""
        if isinstance(command, GetPuzzle):
            return self._get_puzzle(command)
        if isinstance(command, SetPuzzle):
            return self._set_puzzle(command)
        if isinstance(command, CheckSolution):
            return self._check_solution(command)
        if isinstance(command, Help):
            return HelpResponse(command.channel)
        if isinstance(command, InvalidCommand):
            return InvalidCommandResponse(command.channel, command.text, command.reason)
        raise TypeError(f"Unsupported command: {command!r}")

    def _get_puzzle(self, command: GetPuzzle) -> Response:
        puzzle = self.state.puzzle
        if puzzle is None:
            return NoPuzzleSet(command.channel)
        return GetPuzzleResult(command.channel, puzzle, self.dictionary.no_of_solutions(puzzle))

    def _set_puzzle(self, command: SetPuzzle) -> Response:
        puzzle = normalize(command.puzzle)
        if not is_nine_letters(puzzle):
            return InvalidPuzzle(command.channel, command.puzzle, NOT_NINE_CHARACTERS)
        if not self.dictionary.has_solution(puzzle):
            return InvalidPuzzle(command.channel, command.puzzle, NOT_IN_DICTIONARY)

        previous = self.state.history
        self.state.puzzle = puzzle
        self.state.history = {word: [] for word in self.dictionary.find_solutions(puzzle)}
        solutions = self.dictionary.no_of_solutions(puzzle)
        logger.info("Puzzle set to %s with %d solution(s)", puzzle, solutions)

        result = SetPuzzleResult(command.channel, puzzle, solutions)
        if not previous:
            return result
        return CompositeResponse((result, SolutionsNotification(previous)))

    def _check_solution(self, command: CheckSolution) -> Response:
        puzzle = self.state.puzzle
        if puzzle is None:
            return NoPuzzleSet(command.channel)

        word = normalize(command.word)
        if not is_nine_letters(word):
            return IncorrectSolution(command.channel, command.word, NOT_NINE_CHARACTERS)

        result = diff(puzzle, word)
        if isinstance(result, Mismatch):
            reason = NonMatchingWord(puzzle, too_many=result.too_many, too_few=result.too_few)
            return IncorrectSolution(command.channel, command.word, reason)

        if not self.dictionary.is_solution(word):
            return IncorrectSolution(command.channel, command.word, NOT_IN_DICTIONARY)

        solvers = self.state.history.get(word)
        if solvers is None:
            raise SolverHistoryError(f"{word} is a solution to {puzzle} but has no history entry")
        solvers.append(command.name)
        logger.debug("%s solved %s (solve #%d)", command.name, puzzle, len(solvers))

        return CompositeResponse(
            (
                CorrectSolution(command.channel, command.word),
                Notification(command.name, solution_hash(word, command.name)),
            )
        )
