from __future__ import annotations

from pathlib import Path
from typing import Sequence

from cargorun.core.errors import (
    ErrorKind,
    ExitOutcome,
    ScriptError,
    check_exit_status,
)
from cargorun.core.logging import get_logger, log_event
from cargorun.domain.invocation import parse_invocation
from cargorun.services.manifest import load_script_table, print_script_names
from cargorun.services.script_runner import run_script

logger = get_logger(__name__)


def run(argv: Sequence[str], *, manifest_path: Path) -> ExitOutcome:
    """Load the manifest, resolve the requested script and run it.

    Failures come back as an ``ExitOutcome`` carrying the error; when the
    script name is missing or unknown the available names are printed first.
    """
    try:
        table = load_script_table(manifest_path)
        log_event(
            logger,
            "manifest_loaded",
            path=manifest_path,
            scripts=len(table),
        )

        try:
            request = parse_invocation(argv)
        except ScriptError:
            print_script_names(table)
            raise

        script = table.get(request.script_name)
        if script is None:
            print_script_names(table)
            raise ScriptError(
                kind=ErrorKind.INVALID_SCRIPT_NAME,
                reason="script name is invalid",
                detail=request.script_name,
            )
        log_event(logger, "script_resolved", script=request.script_name)

        check_exit_status(run_script(script, request))
    except ScriptError as exc:
        log_event(
            logger,
            "run_failed",
            kind=exc.kind.name,
            code=exc.exit_code,
            reason=str(exc),
        )
        return ExitOutcome.failure(exc)
    return ExitOutcome.success()
