from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class ErrorKind(IntEnum):
    """Failure kinds; each value is the process exit code reported for it."""

    NO_SCRIPT_NAME = 1
    INVALID_SCRIPT_NAME = 2
    SCRIPT_FAILED = 3
    SCRIPT_FAILED_WITH_SIGNAL = 4
    NO_SCRIPT_INFO = 5
    NO_TOML = 6
    MANIFEST_NOT_FOUND = 7
    SPAWN_FAILED = 8


@dataclass(eq=False)
class ScriptError(Exception):
    kind: ErrorKind
    reason: str
    detail: str | None = field(default=None)

    def __str__(self) -> str:
        if self.detail:
            return f"{self.reason} ({self.detail})"
        return self.reason

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScriptError):
            return NotImplemented
        return self.kind == other.kind

    def __hash__(self) -> int:
        return hash(self.kind)

    @property
    def exit_code(self) -> int:
        return int(self.kind)


def format_error(error: BaseException) -> str:
    # detail goes to the log only
    if isinstance(error, ScriptError):
        return f"error [{error.exit_code}]: {error.reason}"
    return f"error: {error}"


def wrap_error(
    error: BaseException,
    *,
    kind: ErrorKind,
    reason: str,
) -> ScriptError:
    if isinstance(error, ScriptError):
        return error
    detail = str(error) or None
    return ScriptError(kind=kind, reason=reason, detail=detail)


def check_exit_status(returncode: int) -> None:
    """Raise unless the child exited normally with status 0.

    ``subprocess`` reports termination by signal as a negative return code,
    which is the only case without a numeric exit status.
    """
    if returncode == 0:
        return
    if returncode < 0:
        raise ScriptError(
            kind=ErrorKind.SCRIPT_FAILED_WITH_SIGNAL,
            reason="exited with signal",
            detail=f"signal {-returncode}",
        )
    raise ScriptError(
        kind=ErrorKind.SCRIPT_FAILED,
        reason="script failed",
        detail=f"exit status {returncode}",
    )


@dataclass(frozen=True)
class ExitOutcome:
    error: ScriptError | None = None

    @classmethod
    def success(cls) -> ExitOutcome:
        return cls()

    @classmethod
    def failure(cls, error: ScriptError) -> ExitOutcome:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def exit_code(self) -> int:
        if self.error is None:
            return 0
        return self.error.exit_code
