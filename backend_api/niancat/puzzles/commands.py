from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

# Slack direct message channel ids start with this prefix.
PRIVATE_CHANNEL_PREFIX = "D"

InvalidReason = Literal["unknown_command", "wrong_number_of_parameters"]
UNKNOWN_COMMAND: InvalidReason = "unknown_command"
WRONG_NUMBER_OF_PARAMETERS: InvalidReason = "wrong_number_of_parameters"


@dataclass(frozen=True)
class Channel:
    """Chat channel a command arrived on and responses are sent back to."""

    id: str

    @property
    def is_private(self) -> bool:
        return self.id.startswith(PRIVATE_CHANNEL_PREFIX)

    def __str__(self) -> str:
        return self.id


@dataclass(frozen=True)
class GetPuzzle:
    channel: Channel


@dataclass(frozen=True)
class SetPuzzle:
    channel: Channel
    puzzle: str


@dataclass(frozen=True)
class CheckSolution:
    channel: Channel
    name: str
    word: str


@dataclass(frozen=True)
class Help:
    channel: Channel


@dataclass(frozen=True)
class InvalidCommand:
    """Text the parser recognized as a command but could not accept."""

    channel: Channel
    text: str
    reason: InvalidReason


Command = Union[GetPuzzle, SetPuzzle, CheckSolution, Help, InvalidCommand]
