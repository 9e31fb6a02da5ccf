from __future__ import annotations

from typing import Callable, Dict, List, Optional, Tuple

from .commands import (
    UNKNOWN_COMMAND,
    WRONG_NUMBER_OF_PARAMETERS,
    Channel,
    CheckSolution,
    Command,
    GetPuzzle,
    Help,
    InvalidCommand,
    SetPuzzle,
)

COMMAND_PREFIX = "!"

# keyword -> (number of parameters, factory taking channel and parameters)
_COMMANDS: Dict[str, Tuple[int, Callable[[Channel, List[str]], Command]]] = {
    "!nian": (0, lambda channel, params: GetPuzzle(channel)),
    "!setnian": (1, lambda channel, params: SetPuzzle(channel, params[0])),
    "!helpnian": (0, lambda channel, params: Help(channel)),
}


# PUBLIC_INTERFACE
def parse_command(text: str, channel: Channel, name: str) -> Optional[Command]:
    """Turn a chat message into a command, or None if it should be ignored.

    - Known commands are accepted anywhere; a wrong number of parameters
      yields an InvalidCommand.
    - Unknown commands are only reported in private channels.
    - Any other text in a private channel is a solution attempt.
    """
    stripped = (text or "").strip()
    if not stripped:
        return None

    if not stripped.startswith(COMMAND_PREFIX):
        if channel.is_private:
            return CheckSolution(channel, name, stripped)
        return None

    keyword, *params = stripped.split()
    known = _COMMANDS.get(keyword)
    if known is None:
        if channel.is_private:
            return InvalidCommand(channel, text, UNKNOWN_COMMAND)
        return None

    arity, factory = known
    if len(params) != arity:
        return InvalidCommand(channel, text, WRONG_NUMBER_OF_PARAMETERS)
    return factory(channel, params)
