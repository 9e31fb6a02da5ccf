from django.test import SimpleTestCase

from niancat.puzzles import parse_command
from niancat.puzzles.commands import (
    UNKNOWN_COMMAND,
    WRONG_NUMBER_OF_PARAMETERS,
    Channel,
    CheckSolution,
    GetPuzzle,
    Help,
    InvalidCommand,
    SetPuzzle,
)

TEST_CHANNEL = Channel("C0")
IM_CHANNEL = Channel("D0")
TEST_USER = "User 0"

# (description, text, channel, expected)
PARSER_TESTS = [
    ("Set puzzle", "!setnian ABCDEFGHI", TEST_CHANNEL, SetPuzzle(TEST_CHANNEL, "ABCDEFGHI")),
    ("Get puzzle", "!nian", TEST_CHANNEL, GetPuzzle(TEST_CHANNEL)),
    ("Help", "!helpnian", TEST_CHANNEL, Help(TEST_CHANNEL)),
    ("Ignore non-commands in public channel", "ABCDEFGHI", TEST_CHANNEL, None),
    ("Check solution", "ABCDEFGHI", IM_CHANNEL, CheckSolution(IM_CHANNEL, TEST_USER, "ABCDEFGHI")),
    ("Check solution, with spaces", "ABC DEF GHI", IM_CHANNEL, CheckSolution(IM_CHANNEL, TEST_USER, "ABC DEF GHI")),
    ("No command", "  ", TEST_CHANNEL, None),
    ("No command in private channel", "", IM_CHANNEL, None),
    ("Unknown command in public channel", "!nosuchcommand", TEST_CHANNEL, None),
    (
        "Unknown command in private channel",
        "!nosuchcommand",
        IM_CHANNEL,
        InvalidCommand(IM_CHANNEL, "!nosuchcommand", UNKNOWN_COMMAND),
    ),
    (
        "Set puzzle with too many parameters",
        "!setnian ABCDEFGHI more parameters",
        TEST_CHANNEL,
        InvalidCommand(TEST_CHANNEL, "!setnian ABCDEFGHI more parameters", WRONG_NUMBER_OF_PARAMETERS),
    ),
    (
        "Set puzzle without parameters",
        "!setnian",
        TEST_CHANNEL,
        InvalidCommand(TEST_CHANNEL, "!setnian", WRONG_NUMBER_OF_PARAMETERS),
    ),
    (
        "Get puzzle with too many parameters",
        "!nian yoyoyo",
        TEST_CHANNEL,
        InvalidCommand(TEST_CHANNEL, "!nian yoyoyo", WRONG_NUMBER_OF_PARAMETERS),
    ),
    (
        "Help with too many parameters",
        "!helpnian yoyoyo",
        TEST_CHANNEL,
        InvalidCommand(TEST_CHANNEL, "!helpnian yoyoyo", WRONG_NUMBER_OF_PARAMETERS),
    ),
]


class ParseCommandTests(SimpleTestCase):
    def test_parse_command(self):
        for description, text, channel, expected in PARSER_TESTS:
            with self.subTest(description):
                self.assertEqual(parse_command(text, channel, TEST_USER), expected)

    def test_private_channel_detection(self):
        self.assertTrue(Channel("D0123").is_private)
        self.assertFalse(Channel("C0123").is_private)
