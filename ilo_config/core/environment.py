"""Bootstrap environment for locating the rest of the configs.

Users may set ``ILO_CONFIG_HOME`` to choose where config files are stored.
When it is unset or empty, configs live in the platform's per-user config
directory under ``ilo/`` (``~/.config/ilo/`` on Linux and macOS).

The environment is read on every call, never cached, so a process can switch
config roots between loads.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

ENV_CONFIG_HOME = "ILO_CONFIG_HOME"


@dataclass(frozen=True)
class IloConfigEnvironment:
    ilo_config_home: str | None = None


def _env(environ: Mapping[str, str], key: str) -> str | None:
    value = environ.get(key, "")
    return value or None


def load_env(environ: Mapping[str, str] | None = None) -> IloConfigEnvironment:
    """Read the library's environment variables; empty values count as unset."""
    env = os.environ if environ is None else environ
    return IloConfigEnvironment(ilo_config_home=_env(env, ENV_CONFIG_HOME))
