"""
Tests for the statecore CLI.
"""

import json
import textwrap

import pytest
from typer.testing import CliRunner

from statecore.cli import main as cli_main

runner = CliRunner()

REDUCERS_MODULE = textwrap.dedent(
    '''
    from statecore.core import UNDEFINED, action_type_of


    def count(state, action):
        if state is UNDEFINED:
            state = 0
        return state + 1 if action_type_of(action) == "INC" else state


    ROOT = {"count": count}
    BROKEN = {"a": lambda s, a: UNDEFINED}
    RAISING = {"a": lambda s, a: a.payload["n"] if s is UNDEFINED else s}
    NOT_A_REDUCER = 42
    '''
)


@pytest.fixture
def reducers_module(tmp_path, monkeypatch):
    (tmp_path / "cli_app_reducers.py").write_text(REDUCERS_MODULE, encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    monkeypatch.setattr(cli_main, "setup_logging", lambda: None)
    return "cli_app_reducers"


@pytest.fixture
def action_log(tmp_path):
    path = tmp_path / "actions.jsonl"
    lines = [{"type": "INC"}, {"type": "INC"}, {"type": "NOOP"}]
    path.write_text("".join(json.dumps(rec) + "\n" for rec in lines), encoding="utf-8")
    return str(path)


def test_version(reducers_module):
    result = runner.invoke(cli_main.app, ["version"])

    assert result.exit_code == 0
    assert "statecore" in result.stdout


def test_check_ok(reducers_module):
    result = runner.invoke(cli_main.app, ["check", "-r", f"{reducers_module}:ROOT", "--json"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data == {"ok": True, "keys": ["count"], "error": None}


def test_check_broken(reducers_module):
    result = runner.invoke(cli_main.app, ["check", "-r", f"{reducers_module}:BROKEN", "--json"])

    assert result.exit_code == 1
    data = json.loads(result.stdout)
    assert data["ok"] is False
    assert 'Reducer "a"' in data["error"]


def test_check_bad_reference(reducers_module):
    result = runner.invoke(cli_main.app, ["check", "-r", f"{reducers_module}:NOT_A_REDUCER", "--json"])

    assert result.exit_code == 2
    assert "not a reducer" in json.loads(result.stdout)["error"]


def test_replay_json(reducers_module, action_log):
    result = runner.invoke(
        cli_main.app,
        ["replay", "-r", f"{reducers_module}:ROOT", "-l", action_log, "--json", "--show-state"],
    )

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["success"] is True
    assert data["actions_replayed"] == 3
    assert data["state_changes"] == 2
    assert data["action_counts"] == {"INC": 2, "NOOP": 1}
    assert data["state"] == {"count": 2}
    assert len(data["state_hash"]) == 64


def test_replay_rich_output(reducers_module, action_log):
    result = runner.invoke(cli_main.app, ["replay", "-r", f"{reducers_module}:ROOT", "-l", action_log])

    assert result.exit_code == 0
    assert "Replayed 3 actions" in result.stdout


def test_replay_missing_log(reducers_module, tmp_path):
    missing = str(tmp_path / "missing.jsonl")
    result = runner.invoke(cli_main.app, ["replay", "-r", f"{reducers_module}:ROOT", "-l", missing, "--json"])

    assert result.exit_code == 2
    assert json.loads(result.stdout) == {"error": "Log file not found", "path": missing}


def test_replay_broken_reducers(reducers_module, action_log):
    result = runner.invoke(
        cli_main.app, ["replay", "-r", f"{reducers_module}:BROKEN", "-l", action_log, "--json"]
    )

    assert result.exit_code == 2
    assert "during initialization" in json.loads(result.stdout)["error"]


def test_check_reducer_raising_during_shape_check(reducers_module):
    result = runner.invoke(cli_main.app, ["check", "-r", f"{reducers_module}:RAISING", "--json"])

    assert result.exit_code == 1
    data = json.loads(result.stdout)
    assert data["ok"] is False
    assert "n" in data["error"]


def test_replay_reducer_raising_during_shape_check(reducers_module, action_log):
    result = runner.invoke(
        cli_main.app, ["replay", "-r", f"{reducers_module}:RAISING", "-l", action_log, "--json"]
    )

    assert result.exit_code == 2
    assert "error" in json.loads(result.stdout)


def test_loader_production_follows_environment(reducers_module, monkeypatch):
    from statecore.cli.loader import load_reducer

    monkeypatch.setenv("STATECORE_ENV", "production")
    assert load_reducer(f"{reducers_module}:ROOT").production is True

    monkeypatch.setenv("STATECORE_ENV", "development")
    assert load_reducer(f"{reducers_module}:ROOT").production is False
    assert load_reducer(f"{reducers_module}:ROOT", production=True).production is True
