from typing import List, Optional

from django.test import SimpleTestCase

from niancat.puzzles import AnagramDictionary, PuzzleEngine, SolverHistoryError
from niancat.puzzles.commands import (
    UNKNOWN_COMMAND,
    Channel,
    CheckSolution,
    GetPuzzle,
    Help,
    InvalidCommand,
    SetPuzzle,
)
from niancat.puzzles.responses import (
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
    SetPuzzleResult,
    SolutionsNotification,
)

CHANNEL = Channel("C0")
IM = Channel("D0")
PUZZLE = "ABCDEFGHI"


class FakeDictionary:
    """Dictionary double answering every lookup with fixed values."""

    def __init__(self, is_solution: bool, solutions: int, words: Optional[List[str]] = None):
        self._is_solution = is_solution
        self._solutions = solutions
        self._words = words if words is not None else ["X" * 9] * solutions

    def is_solution(self, word: str) -> bool:
        return self._is_solution

    def has_solution(self, puzzle: str) -> bool:
        return self._solutions > 0

    def no_of_solutions(self, puzzle: str) -> int:
        return self._solutions

    def find_solutions(self, puzzle: str) -> List[str]:
        return list(self._words)


class GetPuzzleTests(SimpleTestCase):
    def test_no_puzzle_set(self):
        engine = PuzzleEngine(FakeDictionary(True, 1))
        self.assertEqual(engine.apply(GetPuzzle(CHANNEL)), NoPuzzleSet(CHANNEL))

    def test_get_puzzle(self):
        engine = PuzzleEngine(FakeDictionary(True, 17))
        engine.apply(SetPuzzle(CHANNEL, PUZZLE))
        self.assertEqual(engine.apply(GetPuzzle(CHANNEL)), GetPuzzleResult(CHANNEL, PUZZLE, 17))


class SetPuzzleTests(SimpleTestCase):
    def test_set_puzzle(self):
        engine = PuzzleEngine(FakeDictionary(True, 1))
        self.assertEqual(engine.apply(SetPuzzle(CHANNEL, PUZZLE)), SetPuzzleResult(CHANNEL, PUZZLE, 1))
        self.assertEqual(engine.apply(GetPuzzle(CHANNEL)), GetPuzzleResult(CHANNEL, PUZZLE, 1))

    def test_puzzle_is_normalized(self):
        engine = PuzzleEngine(FakeDictionary(True, 1))
        self.assertEqual(engine.apply(SetPuzzle(CHANNEL, "abc def-ghi")), SetPuzzleResult(CHANNEL, PUZZLE, 1))
        self.assertEqual(engine.puzzle, PUZZLE)

    def test_not_nine_characters(self):
        engine = PuzzleEngine(FakeDictionary(True, 1))
        engine.apply(SetPuzzle(CHANNEL, PUZZLE))
        for candidate in ["ABCDEFGH", "ABCDEFGHIJ", "", "ABC-DEF-GH"]:
            with self.subTest(candidate=candidate):
                self.assertEqual(
                    engine.apply(SetPuzzle(CHANNEL, candidate)),
                    InvalidPuzzle(CHANNEL, candidate, NOT_NINE_CHARACTERS),
                )
                self.assertEqual(engine.puzzle, PUZZLE)

    def test_not_in_dictionary_keeps_state(self):
        engine = PuzzleEngine(FakeDictionary(True, 0))
        engine.state.puzzle = "DEFGHIABC"
        engine.state.history = {"DEFGHIABC": ["erike"]}
        self.assertEqual(
            engine.apply(SetPuzzle(CHANNEL, PUZZLE)),
            InvalidPuzzle(CHANNEL, PUZZLE, NOT_IN_DICTIONARY),
        )
        self.assertEqual(engine.puzzle, "DEFGHIABC")
        self.assertEqual(engine.history, {"DEFGHIABC": ["erike"]})

    def test_history_seeded_with_anagram_group(self):
        engine = PuzzleEngine(FakeDictionary(True, 2, ["IABCDEFGH", "ABCDEFGHI"]))
        engine.apply(SetPuzzle(CHANNEL, PUZZLE))
        self.assertEqual(engine.history, {"IABCDEFGH": [], "ABCDEFGHI": []})

    def test_first_set_has_no_notification(self):
        engine = PuzzleEngine(FakeDictionary(True, 2, ["IABCDEFGH", "ABCDEFGHI"]))
        response = engine.apply(SetPuzzle(CHANNEL, PUZZLE))
        self.assertNotIsInstance(response, CompositeResponse)

    def test_previous_solutions_notified_on_next_set(self):
        engine = PuzzleEngine(FakeDictionary(True, 2, ["IABCDEFGH", "ABCDEFGHI"]))
        engine.apply(SetPuzzle(CHANNEL, "DEFGHIABC"))
        engine.apply(CheckSolution(Channel("D0"), "U0", "ABCDEFGHI"))
        engine.apply(CheckSolution(Channel("D1"), "U1", "ABCDEFGHI"))

        response = engine.apply(SetPuzzle(CHANNEL, PUZZLE))

        self.assertEqual(
            response,
            CompositeResponse(
                (
                    SetPuzzleResult(CHANNEL, PUZZLE, 2),
                    SolutionsNotification({"IABCDEFGH": [], "ABCDEFGHI": ["U0", "U1"]}),
                )
            ),
        )
        # history is reseeded, the snapshot is not shared
        self.assertEqual(engine.history, {"IABCDEFGH": [], "ABCDEFGHI": []})


class CheckSolutionTests(SimpleTestCase):
    def test_solve_the_puzzle(self):
        engine = PuzzleEngine(FakeDictionary(True, 1, ["GALLTJUTA"]))
        engine.apply(SetPuzzle(CHANNEL, "AGALLTJUT"))

        response = engine.apply(CheckSolution(IM, "erike", "GALL-TJU TA"))

        self.assertIsInstance(response, CompositeResponse)
        solution_response, notification_response = response
        self.assertEqual(solution_response, CorrectSolution(IM, "GALL-TJU TA"))
        self.assertEqual(
            notification_response,
            Notification("erike", "d8e7363cdad6303dd4c41cb2ad3e2c35759257ca8ac509107e4e9e9ff5741933"),
        )

    def test_not_in_dictionary(self):
        engine = PuzzleEngine(FakeDictionary(False, 1))
        engine.apply(SetPuzzle(CHANNEL, "AGALLTJUT"))
        self.assertEqual(
            engine.apply(CheckSolution(IM, "erike", "GALLTJUTA")),
            IncorrectSolution(IM, "GALLTJUTA", NOT_IN_DICTIONARY),
        )

    def test_not_nine_characters(self):
        engine = PuzzleEngine(FakeDictionary(False, 1))
        engine.apply(SetPuzzle(CHANNEL, "GALLTJUTA"))
        self.assertEqual(
            engine.apply(CheckSolution(IM, "erike", "GALLA")),
            IncorrectSolution(IM, "GALLA", NOT_NINE_CHARACTERS),
        )

    def test_non_matching_word(self):
        engine = PuzzleEngine(FakeDictionary(False, 1))
        engine.apply(SetPuzzle(CHANNEL, PUZZLE))
        self.assertEqual(
            engine.apply(CheckSolution(IM, "erike", "GALLTJUTA")),
            IncorrectSolution(IM, "GALLTJUTA", NonMatchingWord(PUZZLE, "AJLLTTU", "BCDEFHI")),
        )

    def test_puzzle_not_set(self):
        engine = PuzzleEngine(FakeDictionary(False, 1))
        self.assertEqual(engine.apply(CheckSolution(IM, "erike", "GALLTJUTA")), NoPuzzleSet(IM))

    def test_store_solvers_in_order(self):
        engine = PuzzleEngine(FakeDictionary(True, 2, ["IABCDEFGH", "ABCDEFGHI"]))
        engine.apply(SetPuzzle(CHANNEL, "DEFGHIABC"))

        engine.apply(CheckSolution(Channel("D0"), "U1", "ABCDEFGHI"))
        engine.apply(CheckSolution(Channel("D1"), "U0", "ABCDEFGHI"))

        self.assertEqual(engine.history["ABCDEFGHI"], ["U1", "U0"])
        self.assertEqual(engine.history["IABCDEFGH"], [])

    def test_repeat_solves_are_not_deduplicated(self):
        engine = PuzzleEngine(FakeDictionary(True, 1, [PUZZLE]))
        engine.apply(SetPuzzle(CHANNEL, PUZZLE))
        engine.apply(CheckSolution(IM, "erike", PUZZLE))
        engine.apply(CheckSolution(IM, "erike", PUZZLE))
        self.assertEqual(engine.history[PUZZLE], ["erike", "erike"])

    def test_solved_word_missing_from_history(self):
        engine = PuzzleEngine(FakeDictionary(True, 1, []))
        engine.apply(SetPuzzle(CHANNEL, PUZZLE))
        with self.assertRaises(SolverHistoryError):
            engine.apply(CheckSolution(IM, "erike", PUZZLE))


class OtherCommandTests(SimpleTestCase):
    def test_help(self):
        engine = PuzzleEngine(FakeDictionary(True, 1))
        self.assertEqual(engine.apply(Help(CHANNEL)), HelpResponse(CHANNEL))
        self.assertIsNone(engine.puzzle)

    def test_invalid_command(self):
        engine = PuzzleEngine(FakeDictionary(True, 1))
        command = InvalidCommand(IM, "!foo", UNKNOWN_COMMAND)
        self.assertEqual(engine.apply(command), InvalidCommandResponse(IM, "!foo", UNKNOWN_COMMAND))

    def test_unsupported_command(self):
        engine = PuzzleEngine(FakeDictionary(True, 1))
        with self.assertRaises(TypeError):
            engine.apply("!nian")


class AnagramDictionaryEngineTests(SimpleTestCase):
    """Engine driven by the real anagram index."""

    def setUp(self):
        self.engine = PuzzleEngine(AnagramDictionary(["GALLTJUTA", "DATORSPEL", "SPELDATOR"]))

    def test_full_round(self):
        self.assertEqual(
            self.engine.apply(SetPuzzle(CHANNEL, "SPDATOREL")),
            SetPuzzleResult(CHANNEL, "SPDATOREL", 2),
        )
        self.assertEqual(self.engine.history, {"DATORSPEL": [], "SPELDATOR": []})

        response = self.engine.apply(CheckSolution(IM, "erike", "dator spel"))
        self.assertEqual(response.responses[0], CorrectSolution(IM, "dator spel"))
        self.assertEqual(
            self.engine.apply(CheckSolution(IM, "erike", "SPELDATRO")),
            IncorrectSolution(IM, "SPELDATRO", NOT_IN_DICTIONARY),
        )

        response = self.engine.apply(SetPuzzle(CHANNEL, "TJUTAGALL"))
        self.assertEqual(
            response,
            CompositeResponse(
                (
                    SetPuzzleResult(CHANNEL, "TJUTAGALL", 1),
                    SolutionsNotification({"DATORSPEL": ["erike"], "SPELDATOR": []}),
                )
            ),
        )
        self.assertEqual(self.engine.history, {"GALLTJUTA": []})
