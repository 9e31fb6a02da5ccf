from django.test import SimpleTestCase

from niancat.puzzles import Message, Renderer
from niancat.puzzles.commands import UNKNOWN_COMMAND, WRONG_NUMBER_OF_PARAMETERS, Channel
from niancat.puzzles.render import format_puzzle
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

MAIN_CHANNEL = "C0123"
C0 = Channel("C0")
D0 = Channel("D0")

# (description, response, [(channel, has_texts, has_not_texts)])
RESPONDER_TESTS = [
    (
        "Solution notification response to main channel",
        Notification("erike", "abcdef"),
        [(MAIN_CHANNEL, ["erike", "abcdef"], [])],
    ),
    (
        "Incorrect solution response to user",
        IncorrectSolution(D0, "FOO", NOT_IN_DICTIONARY),
        [("D0", ["FOO", "inte"], [])],
    ),
    (
        "Incorrect solution, not nine characters",
        IncorrectSolution(D0, "FOO", NOT_NINE_CHARACTERS),
        [("D0", ["FOO", "nio"], [])],
    ),
    (
        "Non-matching word",
        IncorrectSolution(D0, "GALLTJUTA", NonMatchingWord("ABCDEFGHI", "AJLLTTU", "BCDEFHI")),
        [("D0", ["GALLTJUTA", "ABC DEF GHI", "AJLLTTU", "BCDEFHI"], [])],
    ),
    (
        "Non-matching word, too many and too few",
        IncorrectSolution(D0, "FOO", NonMatchingWord("BAR", "ABC", "DEF")),
        [("D0", ["FOO", "BAR", "matchar inte", "många ABC", "få DEF"], [])],
    ),
    (
        "Non-matching word, only too many",
        IncorrectSolution(D0, "FOO", NonMatchingWord("BAR", "ABC", "")),
        [("D0", ["FOO", "matchar inte", "många ABC"], ["få"])],
    ),
    (
        "Non-matching word, only too few",
        IncorrectSolution(D0, "FOO", NonMatchingWord("BAR", "", "DEF")),
        [("D0", ["FOO", "matchar inte", "få DEF"], ["många"])],
    ),
    (
        "Correct solution response to user",
        CorrectSolution(D0, "FOO"),
        [("D0", ["FOO", "korrekt"], [])],
    ),
    (
        "Get puzzle, many solutions",
        GetPuzzleResult(C0, "PUZZLEABC", 17),
        [("C0", ["PUZ ZLE ABC", "17"], [])],
    ),
    (
        "Get puzzle, one solution",
        GetPuzzleResult(C0, "PUZZLEABC", 1),
        [("C0", ["PUZ ZLE ABC"], ["1"])],
    ),
    (
        "No puzzle set",
        NoPuzzleSet(C0),
        [("C0", ["inte", "satt"], [])],
    ),
    (
        "Set puzzle response, many solutions",
        SetPuzzleResult(C0, "PUZZLEABC", 17),
        [("C0", ["PUZ ZLE ABC", "17"], [])],
    ),
    (
        "Set puzzle response, one solution",
        SetPuzzleResult(C0, "PUZZLEABC", 1),
        [("C0", ["PUZ ZLE ABC"], ["1"])],
    ),
    (
        "Invalid puzzle",
        InvalidPuzzle(C0, "PUZZLE", NOT_NINE_CHARACTERS),
        [("C0", ["PUZZLE"], [])],
    ),
    (
        "Invalid puzzle, no solutions",
        InvalidPuzzle(C0, "PUZZLEABC", NOT_IN_DICTIONARY),
        [("C0", ["PUZZLEABC", "ingen"], [])],
    ),
    (
        "Composite responses",
        CompositeResponse((CorrectSolution(D0, "FOO"), Notification("erike", "abcdef"))),
        [("D0", ["FOO"], []), (MAIN_CHANNEL, ["erike", "abcdef"], [])],
    ),
    (
        "Previous solutions to main channel",
        SolutionsNotification({"DATORSPEL": ["erike", "f00ale"], "SPELDATOR": []}),
        [(MAIN_CHANNEL, ["Gårdagens lösningar", "DATORSPEL: erike, f00ale", "SPELDATOR"], [])],
    ),
    (
        "Previous solutions, only one solution",
        SolutionsNotification({"FOO": ["U0", "U1"]}),
        [(MAIN_CHANNEL, ["Gårdagens lösning", "FOO", "U0", "U1"], ["lösningar"])],
    ),
    (
        "Invalid command",
        InvalidCommandResponse(C0, "!foo", UNKNOWN_COMMAND),
        [("C0", ["känt", "!foo"], [])],
    ),
    (
        "Wrong number of parameters",
        InvalidCommandResponse(C0, "!nian x", WRONG_NUMBER_OF_PARAMETERS),
        [("C0", ["parametrar", "!nian x"], [])],
    ),
    (
        "Help command",
        HelpResponse(C0),
        [("C0", ["!setnian", "!nian", "!helpnian"], [])],
    ),
]


class RendererTests(SimpleTestCase):
    def test_responder(self):
        renderer = Renderer(MAIN_CHANNEL)
        for description, response, expected in RESPONDER_TESTS:
            with self.subTest(description):
                messages = renderer.render(response)
                self.assertEqual(len(messages), len(expected))
                for (channel, has_texts, has_not_texts), message in zip(expected, messages):
                    self.assertIsInstance(message, Message)
                    self.assertEqual(message.channel, channel)
                    for s in has_texts:
                        self.assertIn(s, message.text)
                    for s in has_not_texts:
                        self.assertNotIn(s, message.text)

    def test_format_puzzle(self):
        self.assertEqual(format_puzzle("ABCDEFGHI"), "ABC DEF GHI")
        self.assertEqual(format_puzzle("ABCD"), "ABC D")


class CompositeResponseTests(SimpleTestCase):
    def test_needs_at_least_two_parts(self):
        with self.assertRaises(ValueError):
            CompositeResponse((CorrectSolution(D0, "FOO"),))

    def test_cannot_be_nested(self):
        inner = CompositeResponse((CorrectSolution(D0, "FOO"), Notification("erike", "abcdef")))
        with self.assertRaises(ValueError):
            CompositeResponse((NoPuzzleSet(C0), inner))

    def test_iterates_parts_in_order(self):
        parts = (CorrectSolution(D0, "FOO"), Notification("erike", "abcdef"))
        self.assertEqual(list(CompositeResponse(parts)), list(parts))
        self.assertEqual(len(CompositeResponse(parts)), 2)
