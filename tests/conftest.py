import logging
from pathlib import Path

import pytest

from cargorun.core.config import get_runtime_config

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def isolated_runtime(monkeypatch):
    "keeps env-driven config and logging handlers from leaking between tests"
    for name in ("MANIFEST_PATH", "LOG_LEVEL", "LOG_FORMAT", "LOG_DIR"):
        monkeypatch.delenv(f"CARGORUN_{name}", raising=False)
    get_runtime_config.cache_clear()
    logger = logging.getLogger("cargorun")
    saved = list(logger.handlers)
    yield
    for handler in list(logger.handlers):
        if handler not in saved:
            logger.removeHandler(handler)
            handler.close()
    get_runtime_config.cache_clear()


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture
def write_manifest(tmp_path):
    def _write(body: str, name: str = "Cargo.toml") -> Path:
        path = tmp_path / name
        path.write_text(body, encoding="utf-8")
        return path

    return _write
