from django.core.management.base import BaseCommand, CommandError

from niancat.models import Word
from niancat.puzzles.dictionary import read_word_list
from niancat.seed_utils import import_words


class Command(BaseCommand):
    help = "Load a word list file (one word per line) into the Words table."

    def add_arguments(self, parser):
        parser.add_argument("path", help="Path to the word list file.")
        parser.add_argument("--encoding", default="utf-8", help="File encoding (default: utf-8).")
        parser.add_argument(
            "--replace",
            action="store_true",
            help="Remove all stored words before loading.",
        )

    def handle(self, *args, **options):
        # PUBLIC_INTERFACE
        # Idempotent unless --replace is given: words already stored are kept.
        try:
            words = read_word_list(options["path"], encoding=options["encoding"])
        except (OSError, UnicodeDecodeError) as e:
            raise CommandError(f"Could not read word list {options['path']!r}: {e}") from e

        inserted = import_words(words, replace=options["replace"])
        total = Word.objects.count()
        nine = Word.objects.filter(length=9).count()
        self.stdout.write(
            self.style.SUCCESS(f"Loaded {inserted} new word(s). {total} stored, {nine} with nine letters.")
        )
        # The running server builds its dictionary once per process.
        self.stdout.write("Restart the server for the new words to take effect.")
