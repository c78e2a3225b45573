"""Config root and config file path resolution."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from ilo_config.core.environment import load_env
from ilo_config.core.errors import ConfigIOError, InvalidConfigNameError, NoHomeError

logger = logging.getLogger(__name__)

APP_DIRNAME = "ilo"
DEFAULT_EXTENSION = ".json"


def _home_dir() -> Path:
    try:
        return Path.home()
    except (RuntimeError, KeyError) as e:
        raise NoHomeError() from e


def _platform_config_dir(environ: Mapping[str, str]) -> Path:
    """Per-user config directory following the platform convention."""
    if os.name == "nt":
        appdata = environ.get("APPDATA", "")
        if appdata:
            return Path(appdata)
        return _home_dir() / "AppData" / "Roaming"
    xdg = environ.get("XDG_CONFIG_HOME", "")
    # XDG base dir spec: relative paths are invalid and must be ignored
    if xdg and Path(xdg).is_absolute():
        return Path(xdg)
    return _home_dir() / ".config"


def config_root(environ: Mapping[str, str] | None = None) -> Path:
    """Return ConfigHome without touching the filesystem.

    ``$ILO_CONFIG_HOME`` is used verbatim when set and non-empty; otherwise the
    platform config directory joined with ``ilo``.
    """
    env = os.environ if environ is None else environ
    override = load_env(env).ilo_config_home
    if override is not None:
        return Path(override)
    return _platform_config_dir(env) / APP_DIRNAME


def ensure_config_root(environ: Mapping[str, str] | None = None) -> Path:
    """Return ConfigHome, creating it (and any parents) if absent."""
    root = config_root(environ)
    try:
        root.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigIOError(
            f"Config root dir does not exist at {root} and could not be created",
            e,
            path=root,
        ) from e
    return root


def validate_config_name(name: str) -> str:
    if not isinstance(name, str):
        raise InvalidConfigNameError(repr(name), "must be a string")
    if not name:
        raise InvalidConfigNameError(name, "must not be empty")
    if name in (".", ".."):
        raise InvalidConfigNameError(name, "must not be a relative directory reference")
    if "\x00" in name:
        raise InvalidConfigNameError(name, "must not contain NUL characters")
    for sep in {"/", os.sep, os.altsep}:
        if sep and sep in name:
            raise InvalidConfigNameError(name, f"must not contain {sep!r}")
    return name


def resolve_config_path(
    name: str,
    extension: str = DEFAULT_EXTENSION,
    environ: Mapping[str, str] | None = None,
) -> Path:
    """Resolve ``{ConfigHome}/{name}{extension}``, creating ConfigHome if needed."""
    validate_config_name(name)
    root = ensure_config_root(environ)
    path = root / f"{name}{extension}"
    logger.debug("Resolved config %r to %s", name, path)
    return path
