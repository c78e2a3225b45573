"""
Shared fixtures for config tests.

Every test runs with a private HOME and no ilo/XDG overrides so nothing can
touch the real user config directory.
"""

from pathlib import Path

import pytest

from ilo_config import ENV_CONFIG_HOME


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    for k in [ENV_CONFIG_HOME, "XDG_CONFIG_HOME", "APPDATA"]:
        monkeypatch.delenv(k, raising=False)
    return home

@pytest.fixture()
def config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ILO_CONFIG_HOME at an empty temp directory."""
    root = tmp_path / "ilo-home"
    monkeypatch.setenv(ENV_CONFIG_HOME, str(root))
    return root
