import os
from pathlib import Path

import pytest

from ilo_config import (
    ENV_CONFIG_HOME,
    ConfigIOError,
    InvalidConfigNameError,
    NoHomeError,
    config_root,
    resolve_config_path,
)
from ilo_config.core import paths
from ilo_config.core.environment import IloConfigEnvironment, load_env

posix_only = pytest.mark.skipif(os.name == "nt", reason="XDG layout is POSIX only")


def test_load_env_treats_empty_as_unset():
    assert load_env({ENV_CONFIG_HOME: ""}) == IloConfigEnvironment(None)
    assert load_env({}) == IloConfigEnvironment(None)
    assert load_env({ENV_CONFIG_HOME: "/tmp/x"}).ilo_config_home == "/tmp/x"


def test_override_is_used_verbatim():
    assert config_root({ENV_CONFIG_HOME: "~/not-expanded"}) == Path("~/not-expanded")


@posix_only
def test_default_root_is_dot_config_ilo(isolated_env: Path):
    assert config_root() == isolated_env / ".config" / "ilo"


@posix_only
def test_default_root_honors_absolute_xdg(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    assert config_root() == tmp_path / "xdg" / "ilo"

    # Relative XDG paths are ignored
    monkeypatch.setenv("XDG_CONFIG_HOME", "relative/xdg")
    assert config_root().is_absolute()


def test_env_is_reread_on_every_call(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv(ENV_CONFIG_HOME, str(tmp_path / "a"))
    first = resolve_config_path("cfg")
    monkeypatch.setenv(ENV_CONFIG_HOME, str(tmp_path / "b"))
    second = resolve_config_path("cfg")

    assert first == tmp_path / "a" / "cfg.json"
    assert second == tmp_path / "b" / "cfg.json"


def test_resolve_creates_nested_root(tmp_path: Path):
    root = tmp_path / "deep" / "er" / "root"
    path = resolve_config_path("cfg", environ={ENV_CONFIG_HOME: str(root)})

    assert root.is_dir()
    assert path == root / "cfg.json"
    assert not path.exists()
    # Existing directory is fine
    assert resolve_config_path("cfg", environ={ENV_CONFIG_HOME: str(root)}) == path


def test_resolve_uses_codec_extension(config_home: Path):
    assert resolve_config_path("cfg", ".toml") == config_home / "cfg.toml"


@pytest.mark.parametrize("name", ["", ".", "..", "a/b", "../escape", "nul\x00"])
def test_invalid_names_rejected(name: str, config_home: Path):
    with pytest.raises(InvalidConfigNameError):
        resolve_config_path(name)
    assert not config_home.exists()


def test_invalid_name_is_value_error(config_home: Path):
    with pytest.raises(ValueError):
        resolve_config_path("..")


def test_root_blocked_by_file_raises_io_error(tmp_path: Path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("x")

    with pytest.raises(ConfigIOError) as exc_info:
        resolve_config_path("cfg", environ={ENV_CONFIG_HOME: str(blocker / "sub")})

    assert isinstance(exc_info.value.os_error, OSError)
    assert exc_info.value.__cause__ is exc_info.value.os_error


@posix_only
def test_no_home_raises(monkeypatch: pytest.MonkeyPatch):
    def no_home() -> Path:
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(paths.Path, "home", staticmethod(no_home))

    with pytest.raises(NoHomeError):
        config_root()
    # Override still works without a home directory
    assert config_root({ENV_CONFIG_HOME: "/srv/ilo"}) == Path("/srv/ilo")
