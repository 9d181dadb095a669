from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from cargorun.core.errors import ErrorKind, ScriptError


@dataclass(frozen=True)
class InvocationRequest:
    """A requested script plus the arguments it should be expanded with."""

    binary_path: str
    script_name: str
    script_arguments: tuple[str, ...] = ()


def parse_invocation(tokens: Sequence[str]) -> InvocationRequest:
    """Split process arguments into binary path, script name and trailing args.

    Tokens after the script name are passed through untouched, flags included.
    """
    if len(tokens) < 2:
        raise ScriptError(
            kind=ErrorKind.NO_SCRIPT_NAME,
            reason="no script name provided",
        )
    return InvocationRequest(
        binary_path=tokens[0],
        script_name=tokens[1],
        script_arguments=tuple(tokens[2:]),
    )
