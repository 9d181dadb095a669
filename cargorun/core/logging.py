from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any


def get_logger(name: str = "cargorun") -> logging.Logger:
    return logging.getLogger(name)


def configure_logging(
    *,
    level: str = "info",
    format_name: str = "json",
    stream=None,
    log_dir: Path | None = None,
    filename: str = "cargorun.log",
) -> None:
    normalized = level.strip().upper()
    level_value = getattr(logging, normalized, logging.INFO)
    if format_name == "json":
        formatter = logging.Formatter("%(message)s")
    else:
        formatter = logging.Formatter("%(levelname)s %(name)s %(message)s")
    logger = get_logger()
    logger.setLevel(level_value)
    if any(not isinstance(h, logging.NullHandler) for h in logger.handlers):
        return
    if stream is None and log_dir is None:
        # stdout carries the script-name listing; stay silent by default
        if not logger.handlers:
            logger.addHandler(logging.NullHandler())
        return
    if stream is None:
        log_dir.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(
            log_dir / filename, encoding="utf-8"
        )
    else:
        handler = logging.StreamHandler(stream)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_event(logger: logging.Logger, event: str, **fields: Any) -> None:
    payload = {"event": event, **fields}
    logger.info(json.dumps(payload, sort_keys=True, default=str))
