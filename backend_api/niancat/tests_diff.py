from django.test import SimpleTestCase

from niancat.puzzles import Match, Mismatch, diff

# (puzzle, word, too_many, too_few)
NON_MATCHING_TESTS = [
    ("GALLTJUTA", "GALLTJUTR", "R", "A"),
    ("GALLTJUTA", "GALRTJUTA", "R", "L"),
    ("GALLTJUTA", "GBLLTJUTC", "BC", "AA"),
    ("ABCDEFÅÄÖ", "ABCDEFÅÄÄ", "Ä", "Ö"),
]


class DiffTests(SimpleTestCase):
    def test_non_matching(self):
        for puzzle, word, too_many, too_few in NON_MATCHING_TESTS:
            with self.subTest(puzzle=puzzle, word=word):
                self.assertEqual(diff(puzzle, word), Mismatch(too_few=too_few, too_many=too_many))

    def test_anagram_matches(self):
        self.assertEqual(diff("SPDATOREL", "DATORSPEL"), Match())
        self.assertEqual(diff("GALLTJUTA", "GALLTJUTA"), Match())

    def test_match_is_independent_of_length(self):
        self.assertEqual(diff("ABC", "CBA"), Match())
        self.assertEqual(diff("", ""), Match())

    def test_repeated_letters_are_counted(self):
        self.assertEqual(diff("AAB", "ABB"), Mismatch(too_few="A", too_many="B"))
        self.assertEqual(diff("ABC", "ABCCC"), Mismatch(too_few="", too_many="CC"))

    def test_output_is_sorted(self):
        self.assertEqual(
            diff("ABCDEFGHI", "GALLTJUTA"),
            Mismatch(too_few="BCDEFHI", too_many="AJLLTTU"),
        )

    def test_match_iff_sorted_letters_equal(self):
        pairs = [("ABC", "CAB"), ("ABC", "ABD"), ("AAB", "ABA"), ("ÅÄÖ", "ÖÅÄ"), ("ÅÄÖ", "AAO")]
        for a, b in pairs:
            with self.subTest(a=a, b=b):
                self.assertEqual(isinstance(diff(a, b), Match), sorted(a) == sorted(b))
