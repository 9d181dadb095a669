from __future__ import annotations

import subprocess
import sys

from cargorun.core.errors import ErrorKind, ScriptError
from cargorun.core.logging import get_logger, log_event
from cargorun.domain.invocation import InvocationRequest

logger = get_logger(__name__)


def substitute_placeholders(script: str, request: InvocationRequest) -> str:
    """Expand ``$0`` and ``$1``..``$N`` in ``script``.

    Each placeholder is a plain replace over the whole string, applied in
    ascending order. Nothing is escaped: an argument whose text contains a
    later placeholder (``$2`` inside the value for ``$1``) is expanded again by
    that later pass, and ``$1`` also matches the front of ``$10``.
    """
    expanded = script.replace("$0", request.binary_path)
    for index, argument in enumerate(request.script_arguments, start=1):
        expanded = expanded.replace(f"${index}", argument)
    return expanded


def build_shell_command(script: str, platform: str | None = None) -> list[str]:
    system = sys.platform if platform is None else platform
    if system == "win32":
        return ["cmd", "/C", script]
    return ["sh", "-c", script]


def run_script(script: str, request: InvocationRequest) -> int:
    """Run the expanded script through the platform shell and wait for it.

    Returns the raw return code reported by ``subprocess``. Ctrl+C reaches the
    shell as well, so an interrupt only keeps waiting until the child exits.
    """
    command = build_shell_command(substitute_placeholders(script, request))
    log_event(
        logger,
        "script_started",
        script=request.script_name,
        arguments=len(request.script_arguments),
    )
    try:
        process = subprocess.Popen(command)
    except OSError as exc:
        raise ScriptError(
            kind=ErrorKind.SPAWN_FAILED,
            reason="spawning script failed",
            detail=str(exc),
        ) from exc
    returncode = _wait_through_interrupts(process)
    log_event(
        logger,
        "script_finished",
        script=request.script_name,
        returncode=returncode,
    )
    return returncode


def _wait_through_interrupts(process: subprocess.Popen) -> int:
    while True:
        try:
            return process.wait()
        except KeyboardInterrupt:
            log_event(logger, "script_interrupted", pid=process.pid)
