from __future__ import annotations

import sys
import tomllib
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, TextIO

from pydantic import ValidationError

from cargorun.core.errors import ErrorKind, ScriptError, wrap_error
from cargorun.core.manifest_model import (
    PackageManifest,
    WorkspaceManifest,
    manifest_adapter,
    scripts_of,
)

ScriptTable = Mapping[str, str]

NO_SCRIPT_INFO_REASON = (
    "toml file does not contain package.metadata.scripts "
    "or workspace.metadata.scripts table"
)


def read_manifest_text(path: Path) -> str:
    """Read the manifest as UTF-8 text."""
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ScriptError(
            kind=ErrorKind.MANIFEST_NOT_FOUND,
            reason=f"{path} file not found.",
        ) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise wrap_error(
            exc,
            kind=ErrorKind.NO_TOML,
            reason=f"Failed to read {path}",
        ) from exc


def parse_manifest(text: str) -> WorkspaceManifest | PackageManifest:
    """Decode manifest text into whichever supported shape it matches."""
    try:
        data = tomllib.loads(text)
        return manifest_adapter.validate_python(data)
    except (tomllib.TOMLDecodeError, ValidationError) as exc:
        raise ScriptError(
            kind=ErrorKind.NO_SCRIPT_INFO,
            reason=NO_SCRIPT_INFO_REASON,
        ) from exc


def load_script_table(path: Path) -> ScriptTable:
    """Load the name -> script text table declared by the manifest at ``path``."""
    shape = parse_manifest(read_manifest_text(path))
    return MappingProxyType(dict(scripts_of(shape)))


def print_script_names(table: ScriptTable, stream: TextIO | None = None) -> None:
    out = stream if stream is not None else sys.stdout
    for name in table:
        print(name, file=out)
