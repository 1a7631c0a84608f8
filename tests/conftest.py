"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add package and repo root to sys.path
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir / "packages" / "motorcar"))
sys.path.insert(0, str(root_dir))

from motorcar.core.config_loader import ENV_VAR, load_system_config  # noqa: E402
from motorcar.core.errors import configure_logging  # noqa: E402
from motorcar.core.registry import registry  # noqa: E402


@pytest.fixture(autouse=True)
def isolate_env(tmp_path, monkeypatch):
    """Keep the user's home config and env overrides out of tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    monkeypatch.delenv(ENV_VAR, raising=False)
    # Bind log handlers to this test's captured stderr
    configure_logging()
    load_system_config(force_reload=True)
    yield home


@pytest.fixture
def lines():
    """Collected output lines; pass ``lines.append`` as an echo sink."""
    return []


@pytest.fixture
def temp_workspace(tmp_path, monkeypatch):
    """Create a workspace with a system config selected via the env var."""
    workspace = tmp_path / "workspace"
    workspace.mkdir()
    system_config_path = workspace / "system.yaml"

    import yaml

    with open(system_config_path, "w") as f:
        yaml.dump({"car": {"engine": "hybrid", "replacement": "petrol"}}, f)

    monkeypatch.setenv(ENV_VAR, str(system_config_path))
    load_system_config(force_reload=True)

    yield workspace


@pytest.fixture
def steam_engine():
    """Register the steam test plugin for the duration of a test."""
    from tests.plugins.steam_engine import SteamEngine

    registry.register("steam", SteamEngine, overwrite=True, tags=["test"])
    yield SteamEngine
    registry.unregister("steam")
