from __future__ import annotations

import logging

from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework import status, permissions
from drf_yasg.utils import swagger_auto_schema

from .puzzles.commands import Channel, CheckSolution, Command, GetPuzzle, Help, SetPuzzle
from .puzzles.parser import parse_command
from .serializers import (
    ChannelQuerySerializer,
    CheckSolutionRequestSerializer,
    CommandResponseSerializer,
    MessageRequestSerializer,
    SetPuzzleRequestSerializer,
    command_result_data,
)
from . import services

logger = logging.getLogger(__name__)


def _run(command: Command) -> Response:
    """Dispatch a command to the shared engine and serialize the result."""
    result = services.dispatch(command)
    data = command_result_data(result.response, result.messages)
    return Response(CommandResponseSerializer(data).data, status=status.HTTP_200_OK)


# PUBLIC_INTERFACE
@api_view(['GET'])
@permission_classes([permissions.AllowAny])
def health(request):
    """Health check endpoint for the API.

    Returns:
    - 200 OK with {"message": "Server is up!"}
    """
    return Response({"message": "Server is up!"})


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="get",
    operation_id="get_puzzle",
    operation_summary="Get today's puzzle",
    operation_description="""
Return the current puzzle and its number of solutions, or a no_puzzle_set
response if no puzzle has been set since the server started.

Query params:
- channel (string, required): channel the request comes from.
""",
    query_serializer=ChannelQuerySerializer,
    responses={200: CommandResponseSerializer},
    tags=["puzzle"],
)
@swagger_auto_schema(
    method="post",
    operation_id="set_puzzle",
    operation_summary="Set today's puzzle",
    operation_description="""
Set a new puzzle. The puzzle must normalize to nine letters and have at least
one solution in the dictionary. Setting a puzzle clears the solver history and
adds a solutions_notification with the previous puzzle's solvers.

Request body:
- channel (string, required)
- puzzle (string, required)
""",
    request_body=SetPuzzleRequestSerializer,
    responses={200: CommandResponseSerializer},
    tags=["puzzle"],
)
@api_view(["GET", "POST"])
@permission_classes([permissions.AllowAny])
def puzzle(request):
    """Get (GET) or set (POST) today's puzzle."""
    if request.method == "GET":
        serializer = ChannelQuerySerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)
        return _run(GetPuzzle(Channel(serializer.validated_data["channel"])))

    serializer = SetPuzzleRequestSerializer(data=request.data or {})
    serializer.is_valid(raise_exception=True)
    vd = serializer.validated_data
    return _run(SetPuzzle(Channel(vd["channel"]), vd["puzzle"]))


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="post",
    operation_id="check_solution",
    operation_summary="Check a solution attempt",
    operation_description="""
Check whether a word solves today's puzzle. A correct solution is recorded
for the solver and answered with a correct_solution response followed by a
public notification carrying the solution hash.

Request body:
- channel (string, required)
- name (string, required): display name of the solver
- word (string, required)
""",
    request_body=CheckSolutionRequestSerializer,
    responses={200: CommandResponseSerializer},
    tags=["puzzle"],
)
@api_view(["POST"])
@permission_classes([permissions.AllowAny])
def check_solution(request):
    """Check a candidate word against the current puzzle."""
    serializer = CheckSolutionRequestSerializer(data=request.data or {})
    serializer.is_valid(raise_exception=True)
    vd = serializer.validated_data
    return _run(CheckSolution(Channel(vd["channel"]), vd["name"], vd["word"]))


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="get",
    operation_id="help",
    operation_summary="Show help",
    operation_description="Returns the help response for the given channel.",
    query_serializer=ChannelQuerySerializer,
    responses={200: CommandResponseSerializer},
    tags=["meta"],
)
@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def help_view(request):
    """Help text listing the chat commands."""
    serializer = ChannelQuerySerializer(data=request.query_params)
    serializer.is_valid(raise_exception=True)
    return _run(Help(Channel(serializer.validated_data["channel"])))


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="post",
    operation_id="chat_message",
    operation_summary="Handle a raw chat message",
    operation_description="""
Parse a chat message the way the bot does and apply the resulting command.

- !nian, !setnian <puzzle> and !helpnian work in any channel.
- Other text in a private channel (id starting with D) is a solution attempt.
- Text that is not a command is ignored and gives empty lists.

Request body:
- channel (string, required)
- name (string, required)
- text (string, required)
""",
    request_body=MessageRequestSerializer,
    responses={200: CommandResponseSerializer},
    tags=["chat"],
)
@api_view(["POST"])
@permission_classes([permissions.AllowAny])
def chat_message(request):
    """Parse a chat message into a command and apply it."""
    serializer = MessageRequestSerializer(data=request.data or {})
    serializer.is_valid(raise_exception=True)
    vd = serializer.validated_data

    command = parse_command(vd["text"], Channel(vd["channel"]), vd["name"])
    if command is None:
        logger.debug("Ignoring message in %s", vd["channel"])
        data = command_result_data(None, [])
        return Response(CommandResponseSerializer(data).data, status=status.HTTP_200_OK)
    return _run(command)
