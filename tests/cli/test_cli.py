"""Tests for the fitplan CLI.

Commands run in-process through Typer's CliRunner; logging setup is
stubbed so tests do not reconfigure loguru sinks.
"""

import json

import pytest
from rich.console import Console
from typer.testing import CliRunner

from cli.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def quiet_logger(monkeypatch):
    monkeypatch.setattr("cli.cli.setup_logger", lambda **_: None)
    monkeypatch.setattr("cli.cli.console", Console(width=200))


def test_generate_writes_program(tmp_path):
    output = tmp_path / "out" / "program.json"

    result = runner.invoke(
        app,
        ["generate", "-e", "advanced", "-g", "hypertrophy", "-f", "heavy", "-d", "1,2,3,4,5", "-o", str(output)],
    )

    assert result.exit_code == 0, result.output
    program = json.loads(output.read_text(encoding="utf-8"))
    assert program["style"] == "push_pull_legs"
    assert program["restDays"] == [0, 6]
    assert [d["name"] for d in program["workoutDays"]] == ["Push 1", "Pull 1", "Legs 1", "Push 2", "Pull 2"]


def test_generate_from_profile_file(tmp_path):
    profile = tmp_path / "profile.json"
    profile.write_text(json.dumps({"trainingExperience": "none", "trainingDays": [1, 3, 5]}), encoding="utf-8")
    output = tmp_path / "program.json"

    result = runner.invoke(app, ["generate", "--profile", str(profile), "--output", str(output)])

    assert result.exit_code == 0, result.output
    program = json.loads(output.read_text(encoding="utf-8"))
    assert program["level"] == "none"
    assert len(program["workoutDays"]) == 3


def test_options_override_profile_file(tmp_path):
    profile = tmp_path / "profile.json"
    profile.write_text(json.dumps({"trainingExperience": "none", "trainingDays": [1, 3, 5]}), encoding="utf-8")
    output = tmp_path / "program.json"

    result = runner.invoke(app, ["generate", "-p", str(profile), "-d", "2", "-o", str(output)])

    assert result.exit_code == 0, result.output
    assert json.loads(output.read_text(encoding="utf-8"))["restDays"] == [0, 1, 3, 4, 5, 6]


def test_generate_prints_json():
    result = runner.invoke(app, ["generate", "-e", "beginner", "-d", "1,4"])

    assert result.exit_code == 0, result.output
    assert "workoutDays" in result.output


def test_invalid_profile_exits_with_code_2():
    result = runner.invoke(app, ["generate", "-d", "1,9"])
    assert result.exit_code == 2


def test_generation_failure_exits_with_code_1(monkeypatch):
    monkeypatch.setattr("fitplan.training.program.time_adjustment_for", lambda _: 0.0)

    result = runner.invoke(app, ["generate", "-e", "beginner", "-d", "1"])

    assert result.exit_code == 1


def test_validate_valid_week():
    result = runner.invoke(app, ["validate", "-e", "advanced", "-g", "hypertrophy", "-f", "heavy", "-d", "1,2,3,4,5"])

    assert result.exit_code == 0, result.output
    assert "Week is valid" in result.output


def test_validate_lists_issues():
    result = runner.invoke(app, ["validate", "-e", "none", "-d", "1,3,5"])

    assert result.exit_code == 0, result.output
    assert "Validation issues" in result.output


def test_catalog_lists_exercises():
    result = runner.invoke(app, ["catalog", "chest", "--level", "beginner"])

    assert result.exit_code == 0, result.output
    assert "bench_press" in result.output
    assert "decline_press" not in result.output
