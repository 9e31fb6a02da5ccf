from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .commands import UNKNOWN_COMMAND, Channel
from .responses import (
    NOT_NINE_CHARACTERS,
    AtomicResponse,
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
    flatten,
)

HELP_TEXT = """\
Kommandon:
!nian - visa dagens nia
!setnian <pussel> - sätt dagens nia
!helpnian - visa den här hjälptexten

Skicka ett ord i ett privat meddelande för att lösa nian."""


@dataclass(frozen=True)
class Message:
    """Text to post to a single channel."""

    channel: str
    text: str


def format_puzzle(puzzle: str) -> str:
    """Split a puzzle into groups of three letters: "PUZ ZLE ABC"."""
    return " ".join(puzzle[i:i + 3] for i in range(0, len(puzzle), 3))


def _solutions_suffix(solutions: int) -> str:
    # A single solution is not mentioned.
    if solutions > 1:
        return f"\nNian har {solutions} lösningar."
    return ""


# PUBLIC_INTERFACE
class Renderer:
    """Turn engine responses into chat messages.

    Solve notifications go to the main channel, everything else is posted
    back to the channel the command came from.
    """

    def __init__(self, main_channel: str | Channel):
        self.main_channel = str(main_channel)

    # PUBLIC_INTERFACE
    def render(self, response: Response) -> List[Message]:
        """Render a response, composite or atomic, into messages in order."""
        return [self._render_one(r) for r in flatten(response)]

    def _render_one(self, response: AtomicResponse) -> Message:
        if isinstance(response, GetPuzzleResult):
            text = format_puzzle(response.puzzle) + _solutions_suffix(response.solutions)
            return Message(str(response.channel), text)
        if isinstance(response, NoPuzzleSet):
            return Message(str(response.channel), "Nian är inte satt än.")
        if isinstance(response, SetPuzzleResult):
            text = f"Dagens nia är satt: {format_puzzle(response.puzzle)}" + _solutions_suffix(response.solutions)
            return Message(str(response.channel), text)
        if isinstance(response, InvalidPuzzle):
            if response.reason == NOT_NINE_CHARACTERS:
                text = f"Pusslet {response.puzzle} är inte nio tecken långt."
            else:
                text = f"Pusslet {response.puzzle} har ingen lösning i ordlistan."
            return Message(str(response.channel), text)
        if isinstance(response, CorrectSolution):
            return Message(str(response.channel), f"Ordet {response.word} är korrekt!")
        if isinstance(response, Notification):
            return Message(self.main_channel, f"{response.name} löste nian! {response.solution_hash}")
        if isinstance(response, SolutionsNotification):
            return Message(self.main_channel, self._solutions_text(response))
        if isinstance(response, IncorrectSolution):
            return Message(str(response.channel), self._incorrect_text(response))
        if isinstance(response, HelpResponse):
            return Message(str(response.channel), HELP_TEXT)
        if isinstance(response, InvalidCommandResponse):
            if response.reason == UNKNOWN_COMMAND:
                text = f"Okänt kommando: {response.text}"
            else:
                text = f"Fel antal parametrar: {response.text}"
            return Message(str(response.channel), text)
        raise TypeError(f"Cannot render response: {response!r}")

    @staticmethod
    def _solutions_text(response: SolutionsNotification) -> str:
        header = "Gårdagens lösningar:" if len(response.solutions) > 1 else "Gårdagens lösning:"
        lines = [header]
        for word, names in response.solutions.items():
            if names:
                lines.append(f"{word}: {', '.join(names)}")
            else:
                lines.append(word)
        return "\n".join(lines)

    @staticmethod
    def _incorrect_text(response: IncorrectSolution) -> str:
        reason = response.reason
        if isinstance(reason, NonMatchingWord):
            parts = [f"Ordet {response.word} matchar inte nian {format_puzzle(reason.puzzle)}."]
            if reason.too_many:
                parts.append(f"För många {reason.too_many}.")
            if reason.too_few:
                parts.append(f"För få {reason.too_few}.")
            return " ".join(parts)
        if reason == NOT_NINE_CHARACTERS:
            return f"Ordet {response.word} är inte nio tecken långt."
        return f"Ordet {response.word} finns inte med i ordlistan."
