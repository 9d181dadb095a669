from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class RuntimeConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CARGORUN_", case_sensitive=False)

    manifest_path: Path = Path("Cargo.toml")
    log_level: str = "info"
    log_format: Literal["json", "text"] = "json"
    log_dir: Path | None = None


@lru_cache
def get_runtime_config() -> RuntimeConfig:
    return RuntimeConfig()
