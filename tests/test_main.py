"""Tests for the command-line entry point."""

import logging

import orjson
import pytest

import main
from evosim.exceptions import ConfigurationError
from evosim.logging_config import LOG_LEVEL_ENV_VAR, resolve_level

pytestmark = pytest.mark.integration


@pytest.fixture(autouse=True)
def _no_basic_config(monkeypatch):
    # Keep the CLI from installing root handlers inside the test session.
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: None)
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


def test_missing_names_file_aborts_before_running(tmp_path, capsys, caplog):
    code = main.main(["--names", str(tmp_path / "missing.txt")])

    assert code == 1
    assert "Starting Simulation" not in capsys.readouterr().out
    assert "missing.txt" in caplog.text


def test_invalid_config_exit_code(names_file):
    assert main.main(["--names", str(names_file), "--spawn-chance", "2"]) == 2


def test_seeded_run_prints_summaries(names_file, capsys):
    code = main.main(["--names", str(names_file), "--cycles", "3", "--seed", "7"])
    out = capsys.readouterr().out

    assert code == 0
    assert "Starting Simulation..." in out
    assert "--- Cycle 1 Summary ---" in out
    assert "Simulation ended. Final state:" in out


def test_export_stats(names_file, tmp_path, capsys):
    target = tmp_path / "stats.json"
    code = main.main(
        ["--names", str(names_file), "--cycles", "4", "--seed", "3", "--variant", "simple", "--export-stats", str(target)]
    )
    capsys.readouterr()

    assert code == 0
    data = orjson.loads(target.read_bytes())
    assert data["config"]["variant"] == "simple"
    assert data["summary"]["cycles_requested"] == 4
    assert len(data["cycles"]) == data["summary"]["cycles_run"]
    assert len(data["survivors"]) == data["cycles"][-1]["population"]


def test_same_seed_same_output(names_file, capsys):
    main.main(["--names", str(names_file), "--cycles", "15", "--seed", "21"])
    first = capsys.readouterr().out
    main.main(["--names", str(names_file), "--cycles", "15", "--seed", "21"])
    assert capsys.readouterr().out == first


def test_log_level_from_env(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "debug")
    assert resolve_level() == "DEBUG"
    assert resolve_level("warning") == "WARNING"
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR)
    assert resolve_level() == "INFO"


def test_unknown_log_level_flag_is_a_usage_error(names_file, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main.main(["--names", str(names_file), "--log-level", "loud"])
    assert excinfo.value.code == 2
    assert "--log-level" in capsys.readouterr().err


def test_log_level_flag_is_case_insensitive(names_file, capsys):
    assert main.main(["--names", str(names_file), "--cycles", "1", "--log-level", "DEBUG"]) == 0
    capsys.readouterr()


def test_unknown_log_level_env_var_exit_code(names_file, monkeypatch, capsys):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "loud")
    assert main.main(["--names", str(names_file), "--cycles", "1"]) == 2
    assert "Starting Simulation" not in capsys.readouterr().out


def test_resolve_level_rejects_unknown_names():
    with pytest.raises(ConfigurationError, match="loud"):
        resolve_level("loud")


def test_roster_larger_than_variant_cap_exit_code(names_file, capsys):
    roster = [f"C{i}" for i in range(1001)]
    assert main.main(["--names", str(names_file), "--roster", *roster]) == 2
    assert "Starting Simulation" not in capsys.readouterr().out
