from __future__ import annotations

from typing import Any, Dict, List

from rest_framework import serializers

from .puzzles.commands import Channel
from .puzzles.render import Message
from .puzzles.responses import (
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

# Tag used for each response type in the JSON payload.
RESPONSE_TYPES = {
    GetPuzzleResult: "get_puzzle",
    NoPuzzleSet: "no_puzzle_set",
    SetPuzzleResult: "set_puzzle",
    InvalidPuzzle: "invalid_puzzle",
    CorrectSolution: "correct_solution",
    Notification: "notification",
    SolutionsNotification: "solutions_notification",
    IncorrectSolution: "incorrect_solution",
    HelpResponse: "help",
    InvalidCommandResponse: "invalid_command",
}


def _reason_to_data(reason: Any) -> Any:
    if isinstance(reason, NonMatchingWord):
        return {
            "type": "non_matching_word",
            "puzzle": reason.puzzle,
            "too_many": reason.too_many,
            "too_few": reason.too_few,
        }
    return reason


def response_to_data(response: AtomicResponse) -> Dict[str, Any]:
    """Convert an atomic response into a JSON-compatible dict tagged with `type`."""
    data: Dict[str, Any] = {"type": RESPONSE_TYPES[type(response)]}
    for name, value in vars(response).items():
        if isinstance(value, Channel):
            value = value.id
        elif name == "reason":
            value = _reason_to_data(value)
        elif isinstance(value, dict):
            value = {k: list(v) for k, v in value.items()}
        data[name] = value
    return data


def command_result_data(response: Response | None, messages: List[Message]) -> Dict[str, Any]:
    """Payload returned by every command endpoint."""
    return {
        "responses": [response_to_data(r) for r in flatten(response)] if response is not None else [],
        "messages": [{"channel": m.channel, "text": m.text} for m in messages],
    }


def _validate_channel(value: str) -> str:
    value = (value or "").strip()
    if not value:
        raise serializers.ValidationError("Channel must be a non-empty string.")
    return value


# PUBLIC_INTERFACE
class ChannelQuerySerializer(serializers.Serializer):
    """Query parameters identifying the channel a command comes from."""

    channel = serializers.CharField(max_length=64)

    def validate_channel(self, value: str) -> str:
        return _validate_channel(value)


# PUBLIC_INTERFACE
class SetPuzzleRequestSerializer(ChannelQuerySerializer):
    """Request payload to set today's puzzle.

    Fields:
    - channel: channel id the command was sent in
    - puzzle: puzzle text, normalized by the engine
    """

    puzzle = serializers.CharField(max_length=256, allow_blank=True, trim_whitespace=False)


# PUBLIC_INTERFACE
class CheckSolutionRequestSerializer(ChannelQuerySerializer):
    """Request payload to check a solution attempt.

    Fields:
    - channel: channel id the attempt was sent in
    - name: display name of the solver
    - word: candidate word, normalized by the engine
    """

    name = serializers.CharField(max_length=128)
    word = serializers.CharField(max_length=256, allow_blank=True, trim_whitespace=False)


# PUBLIC_INTERFACE
class MessageRequestSerializer(ChannelQuerySerializer):
    """A raw chat message to be parsed into a command."""

    name = serializers.CharField(max_length=128)
    text = serializers.CharField(max_length=1024, allow_blank=True, trim_whitespace=False)


# PUBLIC_INTERFACE
class ChatMessageSerializer(serializers.Serializer):
    """A rendered message to post in a channel."""

    channel = serializers.CharField()
    text = serializers.CharField()


# PUBLIC_INTERFACE
class CommandResponseSerializer(serializers.Serializer):
    """Response payload for every command endpoint."""

    responses = serializers.ListField(
        child=serializers.DictField(), help_text="Engine responses in delivery order, tagged by type."
    )
    messages = ChatMessageSerializer(many=True, help_text="Rendered chat messages in delivery order.")
