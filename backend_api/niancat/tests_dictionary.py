import os
import tempfile

from django.test import SimpleTestCase

from niancat.puzzles import AnagramDictionary, WordDictionary, canonical_key

WORDS = [
    "GALLTJUTA",
    "DATORSPEL",
    "SPELDATOR",
    "abcdefghi",
    "ABCDEFåäö",
    "ABCDEF---åäö",
    "  ABCDEF   åäö  ",
    "abc",
    "abcdefghijkl",
    "ÅÄÖABC",
    "abcåäö",
]

SOLUTION_TESTS = [
    "GALLTJUTA", "DATORSPEL", "SPELDATOR", "ABCDEFGHI", "ABCDEFÅÄÖ",
    "galltjuta", "datorspel", "speldator", "abcdefghi", "abcdefåäö",
    "gall tjuta", "  galltjuta  ", "gall-tjuta", "-galltjuta -----     ",
]

NON_SOLUTION_TESTS = [
    "GALLTJUT", "GALLTJUTAA", "åäöabcdef",
    "abc", "abcdefghijkl", "ÅÄÖABC", "abcåäö",
]

NO_OF_SOLUTIONS_TESTS = [
    ("GALLTJUTA", 1),
    ("TJUTAGALL", 1),
    ("DATORSPEL", 2),
    ("SPELDATOR", 2),
    ("SPDATOREL", 2),
    ("ÅÄÖABCDEF", 1),
    ("AAAAAAAAA", 0),
]


class AnagramDictionaryTests(SimpleTestCase):
    def setUp(self):
        self.dictionary = AnagramDictionary(WORDS)

    def test_solutions(self):
        for word in SOLUTION_TESTS:
            with self.subTest(word=word):
                self.assertTrue(self.dictionary.is_solution(word))

    def test_non_solutions(self):
        for word in NON_SOLUTION_TESTS:
            with self.subTest(word=word):
                self.assertFalse(self.dictionary.is_solution(word))

    def test_no_of_solutions(self):
        for puzzle, expected in NO_OF_SOLUTIONS_TESTS:
            with self.subTest(puzzle=puzzle):
                self.assertEqual(self.dictionary.no_of_solutions(puzzle), expected)

    def test_find_solutions(self):
        self.assertEqual(
            sorted(self.dictionary.find_solutions("SPDATOREL")),
            ["DATORSPEL", "SPELDATOR"],
        )
        self.assertEqual(self.dictionary.find_solutions("AAAAAAAAA"), [])

    def test_has_solution(self):
        self.assertTrue(self.dictionary.has_solution("SPELDATOR"))
        self.assertFalse(self.dictionary.has_solution("NOTAWORDX"))

    def test_lookups_agree(self):
        for puzzle, _ in NO_OF_SOLUTIONS_TESTS + [("NOTAWORDX", 0), ("ABC", 0)]:
            with self.subTest(puzzle=puzzle):
                count = self.dictionary.no_of_solutions(puzzle)
                self.assertEqual(self.dictionary.has_solution(puzzle), count > 0)
                self.assertEqual(len(self.dictionary.find_solutions(puzzle)), count)

    def test_every_word_found_under_its_key(self):
        for word in ["GALLTJUTA", "DATORSPEL", "SPELDATOR", "ABCDEFGHI", "ABCDEFÅÄÖ"]:
            with self.subTest(word=word):
                self.assertIn(word, self.dictionary.find_solutions(canonical_key(word)))

    def test_duplicates_are_removed(self):
        # ABCDEFÅÄÖ appears three times in different spellings
        self.assertEqual(len(self.dictionary), 5)
        self.assertEqual(self.dictionary.find_solutions("ÅÄÖABCDEF"), ["ABCDEFÅÄÖ"])

    def test_find_solutions_returns_copy(self):
        self.dictionary.find_solutions("SPDATOREL").append("XXXXXXXXX")
        self.assertEqual(self.dictionary.no_of_solutions("SPDATOREL"), 2)

    def test_contains(self):
        self.assertIn("gall-tjuta", self.dictionary)
        self.assertNotIn("abc", self.dictionary)

    def test_implements_protocol(self):
        self.assertIsInstance(self.dictionary, WordDictionary)


class DictionaryFileTests(SimpleTestCase):
    def test_from_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "words.txt")
            with open(path, "w", encoding="utf-8") as f:
                f.write("ABCDEFGHI\nGALLTJUTA\n\nUVWXYZÅÄÖ\nABC\nABCDEF\n")
            dictionary = AnagramDictionary.from_file(path)

        self.assertTrue(dictionary.is_solution("ABCDEFGHI"))
        self.assertTrue(dictionary.is_solution("GALLTJUTA"))
        self.assertTrue(dictionary.is_solution("UVWXYZÅÄÖ"))
        self.assertFalse(dictionary.is_solution("ABC"))
        self.assertFalse(dictionary.is_solution("ABCDEF"))
