from __future__ import annotations

import sys
from pathlib import Path
from typing import Sequence

from cargorun.app import run
from cargorun.core.config import get_runtime_config
from cargorun.core.errors import format_error
from cargorun.core.logging import configure_logging


def main(
    argv: Sequence[str] | None = None,
    *,
    manifest_path: Path | None = None,
) -> int:
    config = get_runtime_config()
    configure_logging(
        level=config.log_level,
        format_name=config.log_format,
        log_dir=config.log_dir,
    )

    tokens = list(sys.argv if argv is None else argv)
    outcome = run(tokens, manifest_path=manifest_path or config.manifest_path)
    if outcome.error is not None:
        print(format_error(outcome.error), file=sys.stderr)
    return outcome.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
