import json
import sys

import pytest

from cargorun import cli
from cargorun.core.config import RuntimeConfig, get_runtime_config

posix_only = pytest.mark.skipif(sys.platform == "win32", reason="needs sh")


def test_runtime_config_defaults():
    config = RuntimeConfig()
    assert str(config.manifest_path) == "Cargo.toml"
    assert config.log_level == "info"
    assert config.log_format == "json"
    assert config.log_dir is None


def test_runtime_config_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("CARGORUN_MANIFEST_PATH", str(tmp_path / "m.toml"))
    monkeypatch.setenv("cargorun_log_format", "text")
    config = get_runtime_config()
    assert config.manifest_path == tmp_path / "m.toml"
    assert config.log_format == "text"


def test_main_reports_error_on_stderr(write_manifest, capsys):
    path = write_manifest('[workspace.metadata.scripts]\nbuild = "true"\n')
    code = cli.main(["cargo-run", "nope"], manifest_path=path)

    captured = capsys.readouterr()
    assert code == 2
    assert captured.out == "build\n"
    assert captured.err == "error [2]: script name is invalid\n"


def test_main_uses_configured_manifest_path(monkeypatch, tmp_path, capsys):
    monkeypatch.setenv("CARGORUN_MANIFEST_PATH", str(tmp_path / "absent.toml"))
    code = cli.main(["cargo-run", "build"])

    assert code == 7
    assert "error [7]:" in capsys.readouterr().err


def test_main_defaults_to_cargo_toml_in_working_directory(
    monkeypatch, tmp_path, capsys
):
    (tmp_path / "Cargo.toml").write_text("[package]\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    code = cli.main(["cargo-run"])

    assert code == 5
    assert capsys.readouterr().err.startswith("error [5]: toml file does not contain")


def test_main_reads_sys_argv_by_default(monkeypatch, write_manifest, capsys):
    path = write_manifest('[package.metadata.scripts]\nbuild = "true"\n')
    monkeypatch.setattr(sys, "argv", ["cargo-run"])
    code = cli.main(manifest_path=path)

    assert code == 1
    assert capsys.readouterr().err == "error [1]: no script name provided\n"


@posix_only
def test_main_writes_json_events_to_log_dir(monkeypatch, write_manifest, tmp_path):
    path = write_manifest('[package.metadata.scripts]\nbuild = "exit 3"\n')
    log_dir = tmp_path / "logs"
    monkeypatch.setenv("CARGORUN_LOG_DIR", str(log_dir))

    code = cli.main(["cargo-run", "build"], manifest_path=path)

    assert code == 3
    lines = (log_dir / "cargorun.log").read_text(encoding="utf-8").splitlines()
    events = [json.loads(line)["event"] for line in lines]
    assert events == [
        "manifest_loaded",
        "script_resolved",
        "script_started",
        "script_finished",
        "run_failed",
    ]


@posix_only
def test_log_records_argument_count_not_values(monkeypatch, write_manifest, tmp_path):
    path = write_manifest('[package.metadata.scripts]\nbuild = "exit 3"\n')
    log_dir = tmp_path / "logs"
    monkeypatch.setenv("CARGORUN_LOG_DIR", str(log_dir))

    cli.main(["cargo-run", "build", "hunter2", "--token"], manifest_path=path)

    text = (log_dir / "cargorun.log").read_text(encoding="utf-8")
    started = [
        payload
        for payload in map(json.loads, text.splitlines())
        if payload["event"] == "script_started"
    ]
    assert started == [{"event": "script_started", "script": "build", "arguments": 2}]
    assert "hunter2" not in text
    failed = [json.loads(line) for line in text.splitlines()][-1]
    assert failed["reason"] == "script failed (exit status 3)"
