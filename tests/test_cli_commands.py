"""Tests for CLI commands using Typer's CliRunner."""

import json
import logging

import pytest
from typer.testing import CliRunner

from motorcar.core.registry import registry
from motorcar.main import app
from tests.plugins.steam_engine import MinimalEngine, NoEchoEngine

runner = CliRunner()


def test_demo_defaults():
    result = runner.invoke(app, ["demo"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "Car is starting with Petrol Engine",
        "Petrol engine is starting...",
        "Car is stopping with Petrol Engine",
        "Petrol engine is stopping...",
        "Engine replaced with: Electric Engine",
        "Car is starting with Electric Engine",
        "Electric engine is starting...",
        "Car is stopping with Electric Engine",
        "Electric engine is stopping...",
    ]


def test_demo_options():
    result = runner.invoke(app, ["demo", "--engine", "hybrid", "-r", "petrol"])
    assert result.exit_code == 0
    assert "Car is starting with Hybrid Engine" in result.stdout
    assert "Engine replaced with: Petrol Engine" in result.stdout


def test_demo_uses_system_config(temp_workspace):
    result = runner.invoke(app, ["demo"])
    assert result.exit_code == 0
    assert result.stdout.splitlines()[0] == "Car is starting with Hybrid Engine"
    assert "Engine replaced with: Petrol Engine" in result.stdout


def test_demo_config_option(tmp_path):
    cfg = tmp_path / "car.yaml"
    cfg.write_text("car:\n  engine: electric\n  replacement: hybrid\n")
    result = runner.invoke(app, ["demo", "--config", str(cfg)])
    assert result.exit_code == 0
    assert result.stdout.splitlines()[0] == "Car is starting with Electric Engine"
    assert "Engine replaced with: Hybrid Engine" in result.stdout


def test_demo_unknown_engine_fails():
    result = runner.invoke(app, ["demo", "--engine", "warp"])
    assert result.exit_code == 1
    assert "Car is starting" not in result.stdout


def test_demo_writes_log_file(tmp_path):
    log_file = tmp_path / "demo.log"
    result = runner.invoke(app, ["demo", "-v", "--log-file", str(log_file)])
    assert result.exit_code == 0
    assert "Engine swapped: Petrol Engine -> Electric Engine" in log_file.read_text()


def test_list():
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0
    assert "Available Engines:" in result.stdout
    assert "petrol: Petrol Engine" in result.stdout
    assert "electric: Electric Engine" in result.stdout
    assert "hybrid: Hybrid Engine" in result.stdout


def test_show_includes_plugin(steam_engine):
    result = runner.invoke(app, ["show", "steam"])
    assert result.exit_code == 0
    assert "Steam Engine" in result.stdout
    assert "Coal-fired" in result.stdout


def test_show_unknown_fails():
    result = runner.invoke(app, ["show", "warp"])
    assert result.exit_code == 1


def test_config_show(temp_workspace):
    result = runner.invoke(app, ["config", "show"])
    assert result.exit_code == 0
    assert "engine: hybrid" in result.stdout
    assert "log_file: null" in result.stdout


@pytest.fixture
def extra_engines():
    registry.register("noecho", NoEchoEngine, overwrite=True)
    registry.register("minimal", MinimalEngine, overwrite=True)
    yield
    registry.unregister("noecho")
    registry.unregister("minimal")


def test_list_survives_engine_that_cannot_be_built(extra_engines):
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0
    assert "noecho: <unavailable>" in result.stdout
    assert "minimal: Minimal Engine" in result.stdout
    assert "petrol: Petrol Engine" in result.stdout


def test_show_engine_without_metadata(extra_engines):
    result = runner.invoke(app, ["show", "minimal"])
    assert result.exit_code == 0
    assert "Name:        minimal" in result.stdout
    assert "Type:        Minimal Engine" in result.stdout
    assert "Description: -" in result.stdout


def test_demo_with_engine_without_metadata(extra_engines):
    result = runner.invoke(app, ["demo", "-e", "minimal", "-r", "hybrid"])
    assert result.exit_code == 0
    assert result.stdout.splitlines()[:2] == [
        "Car is starting with Minimal Engine",
        "Minimal engine is starting...",
    ]


def test_demo_json_log_file(tmp_path):
    log_file = tmp_path / "demo.jsonl"
    result = runner.invoke(
        app, ["demo", "-v", "--log-json", "--log-file", str(log_file)]
    )
    assert result.exit_code == 0

    records = [json.loads(line) for line in log_file.read_text().splitlines()]
    assert records
    assert all(r["logger"] == "motorcar" for r in records)
    assert {"time", "level", "msg"} <= set(records[0])
    assert any(
        r["level"] == "DEBUG"
        and r["msg"] == "Engine swapped: Petrol Engine -> Electric Engine"
        for r in records
    )


def test_demo_suppress_warnings():
    result = runner.invoke(app, ["demo", "--suppress-warnings"])
    assert result.exit_code == 0
    assert logging.getLogger("py.warnings").level == logging.ERROR
