"""
Response values produced by the puzzle engine.

Each atomic response is a frozen dataclass. Responses that must be delivered
together are wrapped in a single flat CompositeResponse; composites are never
nested. Turning responses into chat text is done by `render.Renderer`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Literal, Tuple, Union

from .commands import Channel, InvalidReason

Reason = Literal["not_nine_characters", "not_in_dictionary"]
NOT_NINE_CHARACTERS: Reason = "not_nine_characters"
NOT_IN_DICTIONARY: Reason = "not_in_dictionary"


@dataclass(frozen=True)
class NonMatchingWord:
    """Reason for a rejected solution whose letters differ from the puzzle."""

    puzzle: str
    too_many: str
    too_few: str


@dataclass(frozen=True)
class GetPuzzleResult:
    channel: Channel
    puzzle: str
    solutions: int


@dataclass(frozen=True)
class NoPuzzleSet:
    channel: Channel


@dataclass(frozen=True)
class SetPuzzleResult:
    channel: Channel
    puzzle: str
    solutions: int


@dataclass(frozen=True)
class InvalidPuzzle:
    channel: Channel
    puzzle: str
    reason: Reason


@dataclass(frozen=True)
class CorrectSolution:
    channel: Channel
    word: str


@dataclass(frozen=True)
class Notification:
    """Public proof that `name` solved the puzzle."""

    name: str
    solution_hash: str


@dataclass(frozen=True)
class SolutionsNotification:
    """Solvers of the previous puzzle, per word, in solve order."""

    solutions: Dict[str, List[str]]


@dataclass(frozen=True)
class IncorrectSolution:
    channel: Channel
    word: str
    reason: Union[Reason, NonMatchingWord]


@dataclass(frozen=True)
class HelpResponse:
    channel: Channel


@dataclass(frozen=True)
class InvalidCommandResponse:
    channel: Channel
    text: str
    reason: InvalidReason


AtomicResponse = Union[
    GetPuzzleResult,
    NoPuzzleSet,
    SetPuzzleResult,
    InvalidPuzzle,
    CorrectSolution,
    Notification,
    SolutionsNotification,
    IncorrectSolution,
    HelpResponse,
    InvalidCommandResponse,
]


@dataclass(frozen=True)
class CompositeResponse:
    """Two or more atomic responses to be delivered together, in order."""

    responses: Tuple[AtomicResponse, ...]

    def __post_init__(self) -> None:
        if len(self.responses) < 2:
            raise ValueError("A composite response needs at least two parts.")
        if any(isinstance(r, CompositeResponse) for r in self.responses):
            raise ValueError("Composite responses cannot be nested.")

    def __iter__(self) -> Iterator[AtomicResponse]:
        return iter(self.responses)

    def __len__(self) -> int:
        return len(self.responses)


Response = Union[AtomicResponse, CompositeResponse]


# PUBLIC_INTERFACE
def flatten(response: Response) -> List[AtomicResponse]:
    """Return the atomic responses of `response` in delivery order."""
    if isinstance(response, CompositeResponse):
        return list(response.responses)
    return [response]
