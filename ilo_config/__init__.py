"""Library for maintaining typed configs on disk in a simple, ergonomic way.

- Configs are stored as JSON, one file per name, in ``$ILO_CONFIG_HOME`` or
  the user's config directory under ``ilo/``.
- Saves are atomic; new config files are created user-only (0600) in case
  they contain sensitive data.

See ``examples/`` for runnable usage.
"""

import logging

from ilo_config.config import Config, load
from ilo_config.core.codec import Codec, JsonCodec
from ilo_config.core.environment import ENV_CONFIG_HOME
from ilo_config.core.errors import (
    ConfigError,
    ConfigIOError,
    DecodeError,
    EncodeError,
    ErrorCategory,
    InvalidConfigNameError,
    NoHomeError,
)
from ilo_config.core.paths import config_root, resolve_config_path

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Codec",
    "Config",
    "ConfigError",
    "ConfigIOError",
    "DecodeError",
    "ENV_CONFIG_HOME",
    "EncodeError",
    "ErrorCategory",
    "InvalidConfigNameError",
    "JsonCodec",
    "NoHomeError",
    "config_root",
    "load",
    "resolve_config_path",
]
