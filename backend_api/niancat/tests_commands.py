import os
import tempfile
from io import StringIO

from django.core.management import CommandError, call_command
from django.test import TestCase, override_settings

from niancat.models import Word
from niancat.seed_utils import DEFAULT_SEED, ensure_seed_words, import_words
from niancat.services import build_dictionary


class LoadDictionaryCommandTests(TestCase):
    def _write_words(self, tmp, lines):
        path = os.path.join(tmp, "words.txt")
        with open(path, "w", encoding="utf-8") as f:
            f.write("\n".join(lines) + "\n")
        return path

    def test_load_dictionary(self):
        out = StringIO()
        with tempfile.TemporaryDirectory() as tmp:
            path = self._write_words(tmp, ["galltjuta", "GALLTJUTA", "dator-spel", "abc", ""])
            call_command("load_dictionary", path, stdout=out)

        self.assertEqual(
            sorted(Word.objects.values_list("text", flat=True)),
            ["ABC", "DATORSPEL", "GALLTJUTA"],
        )
        self.assertIn("Loaded 3 new word(s)", out.getvalue())
        self.assertIn("Restart the server", out.getvalue())

    def test_load_is_idempotent(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = self._write_words(tmp, ["GALLTJUTA", "DATORSPEL"])
            call_command("load_dictionary", path, stdout=StringIO())
            out = StringIO()
            call_command("load_dictionary", path, stdout=out)
        self.assertEqual(Word.objects.count(), 2)
        self.assertIn("Loaded 0 new word(s)", out.getvalue())

    def test_replace(self):
        Word.objects.create(text="SPELDATOR")
        with tempfile.TemporaryDirectory() as tmp:
            path = self._write_words(tmp, ["GALLTJUTA"])
            call_command("load_dictionary", path, "--replace", stdout=StringIO())
        self.assertEqual(list(Word.objects.values_list("text", flat=True)), ["GALLTJUTA"])

    def test_missing_file(self):
        with self.assertRaises(CommandError):
            call_command("load_dictionary", "/nonexistent/words.txt", stdout=StringIO())


class SeedAndDictionaryTests(TestCase):
    def test_word_is_normalized_on_save(self):
        word = Word.objects.create(text=" gall-tjuta ")
        self.assertEqual(word.text, "GALLTJUTA")
        self.assertEqual(word.length, 9)

    def test_ensure_seed_words(self):
        self.assertEqual(ensure_seed_words(), len(DEFAULT_SEED))
        self.assertEqual(ensure_seed_words(), 0)

    @override_settings(NIANCAT_DICTIONARY_PATH=None)
    def test_seed_words_are_all_playable(self):
        ensure_seed_words()
        dictionary = build_dictionary()
        self.assertEqual(len(dictionary), len(DEFAULT_SEED))
        for word in DEFAULT_SEED:
            with self.subTest(word=word):
                self.assertTrue(dictionary.is_solution(word))

    def test_import_skips_blank_entries(self):
        self.assertEqual(import_words(["--", "datorspel", "DATORSPEL"]), 1)

    @override_settings(NIANCAT_DICTIONARY_PATH=None)
    def test_build_dictionary_from_stored_words(self):
        import_words(["DATORSPEL", "SPELDATOR", "ORDLISTA"])
        dictionary = build_dictionary()
        self.assertEqual(len(dictionary), 2)
        self.assertEqual(dictionary.no_of_solutions("SPDATOREL"), 2)

    def test_build_dictionary_from_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "words.txt")
            with open(path, "w", encoding="utf-8") as f:
                f.write("GALLTJUTA\nUVWXYZÅÄÖ\n")
            with override_settings(NIANCAT_DICTIONARY_PATH=path):
                dictionary = build_dictionary()
        self.assertTrue(dictionary.is_solution("UVWXYZÅÄÖ"))

    @override_settings(NIANCAT_DICTIONARY_PATH=None)
    def test_build_empty_dictionary(self):
        self.assertEqual(len(build_dictionary()), 0)
