from django.test import SimpleTestCase

from niancat.puzzles import canonical_key, normalize, solution_hash

NORMALIZATION_TESTS = [
    ("GALLTJUTA", "GALLTJUTA"),
    ("galltjuta", "GALLTJUTA"),
    ("DATORSPEL", "DATORSPEL"),
    ("datorspel", "DATORSPEL"),
    ("dator spel", "DATORSPEL"),
    ("dator-spel", "DATORSPEL"),
    ("  dator-spel\n", "DATORSPEL"),
    ("abcdefåäö", "ABCDEFÅÄÖ"),
]

HASH_TESTS = [
    ("GALLTJUTA", "f00ale", "f72e9a9523bbc72bf7366a58a04046408d2d88ea811afdc9a459d24e077fa71d"),
    ("GALLTJUTA", "erike", "d8e7363cdad6303dd4c41cb2ad3e2c35759257ca8ac509107e4e9e9ff5741933"),
    ("GALLTJUTA", "cadaker", "203ecbdeba638d0c6c4a3a3ab17c2704bdf9c79016a392ccf303615534392e9c"),
    ("GALLTJUTA", "johaper", "80b3ac9c8150684994df7302a3897fbfe551c52dcd2c8cb2e1cf948129ce9483"),
    ("GALLTJUTA", "andrnils", "2da8b95f6d58652bf87547ed0106e3d2a8e2915cc9b09710ef52d57aa43df5c8"),
    ("ÅÄÖABCDEF", "f00ale", "71edbbe7b1905edc4daf94208ce22eb570fc478de0b346743abd7449d1e7d822"),
    ("ÅÄÖABCDEF", "erike", "adbc40e1e9d2c5da069c410a9d6e6d485fd2f7e14856b97560e759ad028b9d2d"),
    ("ÅÄÖABCDEF", "cadaker", "0d7d353ab20469b1c4bf8446d7297860022bbc19c6ae771f351ae597bf56e0dd"),
    ("ÅÄÖABCDEF", "johaper", "9280130c1ee9109b63810d5cfdcb456fba8fd5d742b578f60e947c24ba5a6c4f"),
    ("ÅÄÖABCDEF", "andrnils", "8027afb1b362daa27be64edf1806d50a344082d3a534cfc38c827a7e71bc8779"),
]


class NormalizeTests(SimpleTestCase):
    def test_normalization(self):
        for text, expected in NORMALIZATION_TESTS:
            with self.subTest(text=text):
                self.assertEqual(normalize(text), expected)

    def test_idempotent(self):
        for text, _ in NORMALIZATION_TESTS:
            with self.subTest(text=text):
                self.assertEqual(normalize(normalize(text)), normalize(text))

    def test_case_and_punctuation_insensitive(self):
        self.assertEqual(normalize("dator-spel"), normalize("DATORSPEL"))
        self.assertEqual(normalize("DATORSPEL"), "DATORSPEL")

    def test_decomposed_letters_are_composed(self):
        self.assertEqual(normalize("a\u030aa\u0308o\u0308"), "ÅÄÖ")

    def test_letters_outside_alphabet_are_removed(self):
        self.assertEqual(normalize("é1ß_Z"), "Z")
        self.assertEqual(normalize(""), "")

    def test_length_counts_characters(self):
        self.assertEqual(len(normalize("abcdefåäö")), 9)

    def test_canonical_key_sorts_characters(self):
        self.assertEqual(canonical_key("SPELDATOR"), canonical_key("DATORSPEL"))
        self.assertEqual(canonical_key("ÖÄÅA"), "AÄÅÖ")


class SolutionHashTests(SimpleTestCase):
    def test_known_digests(self):
        for word, name, expected in HASH_TESTS:
            with self.subTest(word=word, name=name):
                self.assertEqual(solution_hash(word, name), expected)

    def test_word_is_normalized(self):
        self.assertEqual(solution_hash("gall-tjuta", "erike"), solution_hash("GALLTJUTA", "erike"))
