from __future__ import annotations

from django.db import models

from .puzzles.normalize import normalize


# PUBLIC_INTERFACE
class TimeStampedModel(models.Model):
    """Abstract base model providing created/updated timestamps.

    Notes:
        Keep this abstract model free of any logic that would access the Django
        app registry or execute queries at module import time.
    """
    created_at = models.DateTimeField(auto_now_add=True, help_text="Time when the record was created.")
    updated_at = models.DateTimeField(auto_now=True, help_text="Time when the record was last updated.")

    class Meta:
        abstract = True


# PUBLIC_INTERFACE
class Word(TimeStampedModel):
    """A dictionary word the anagram index is built from.

    Fields:
    - text: unique normalized (uppercase, alphabet only) word text
    - length: derived length for quick filtering

    Only nine letter words take part in puzzles, but any normalized word may
    be stored; the index filters on length when it is built.
    """
    text = models.CharField(max_length=64, unique=True, db_index=True, help_text="Normalized word text.")
    length = models.PositiveSmallIntegerField(db_index=True, help_text="Length of the word.")

    class Meta:
        ordering = ["id"]
        verbose_name = "Word"
        verbose_name_plural = "Words"

    def save(self, *args, **kwargs):
        # Normalize text, derive length on save
        self.text = normalize(self.text)
        self.length = len(self.text)
        super().save(*args, **kwargs)

    def __str__(self) -> str:  # pragma: no cover
        return self.text
