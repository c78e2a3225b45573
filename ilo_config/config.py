"""Typed config handle: load-or-default, in-memory access, explicit save.

Config files live in ``$ILO_CONFIG_HOME`` or, when that is unset,
``~/.config/ilo/`` (the platform config directory on Windows).

File and directory creation for the config itself is lazy: loading a config
that does not exist yet returns ``T()`` and writes nothing; the file appears
on the first ``save()``.

A handle is not thread-safe and holds no lock. Two handles saving the same
name race and the last writer wins.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Generic, TypeVar

from ilo_config.core.codec import Codec, JsonCodec
from ilo_config.core.errors import ConfigIOError, DecodeError, EncodeError, error_context
from ilo_config.core.paths import resolve_config_path
from ilo_config.persistence.atomic import write_bytes_atomic

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Config(Generic[T]):
    """An app's chunk of config data, backed by one file on disk.

    Example::

        @dataclass
        class QuickstartConfig:
            url: str | None = None
            comment: str | None = None

        config = Config.load("example-config", QuickstartConfig)
        config.data_mut().comment = "x"
        config.save()
    """

    def __init__(self, name: str, path: Path, data: T, codec: Codec[T]):
        self._name = name
        self._path = path
        self._data = data
        self._codec = codec

    @classmethod
    @error_context(__name__, "load")
    def load(
        cls,
        name: str,
        data_type: Any = None,
        *,
        codec: Codec[T] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> Config[T]:
        """Load config ``name``, or its default value if no file exists yet.

        Raises ConfigIOError if the config directory or file cannot be read,
        and DecodeError if the file does not match the expected type. A file
        that fails to decode is never replaced by defaults.
        """
        if (data_type is None) == (codec is None):
            raise TypeError("Config.load() needs exactly one of data_type or codec")
        if codec is None:
            codec = JsonCodec(data_type)

        path = resolve_config_path(name, codec.extension, environ)
        try:
            raw = path.read_bytes()
        except FileNotFoundError:
            logger.debug("No config file at %s, using defaults", path)
            return cls(name, path, codec.default(), codec)
        except OSError as e:
            raise ConfigIOError(
                f"Config path exists at {path} but config could not be loaded",
                e,
                path=path,
            ) from e

        try:
            data = codec.decode(raw)
        except DecodeError as e:
            e.path = path
            e.message = f"Config at {path} could not be decoded: {e.message}"
            e.args = (e.message,)
            raise
        logger.debug("Loaded config %r from %s", name, path)
        return cls(name, path, data, codec)

    @error_context(__name__, "save")
    def save(self) -> Path:
        """Flush the in-memory value to disk atomically and return the path.

        Always re-encodes and rewrites, whether or not the value changed.
        """
        try:
            encoded = self._codec.encode(self._data)
        except EncodeError as e:
            e.path = self._path
            raise
        write_bytes_atomic(self._path, encoded)
        logger.debug("Saved config %r to %s", self._name, self._path)
        return self._path

    @property
    def data(self) -> T:
        return self._data

    @data.setter
    def data(self, value: T) -> None:
        self._data = value

    def data_mut(self) -> T:
        """Return the value for in-place mutation.

        Callers must not share the handle across threads while mutating; no
        locking is done.
        """
        return self._data

    @property
    def name(self) -> str:
        return self._name

    @property
    def path(self) -> Path:
        return self._path

    @property
    def codec(self) -> Codec[T]:
        return self._codec

    def __repr__(self) -> str:
        type_name = getattr(self._codec, "type_name", type(self._data).__name__)
        return f"Config[{type_name}](name={self._name!r}, data={self._data!r})"


def load(
    name: str,
    data_type: Any = None,
    *,
    codec: Codec[Any] | None = None,
    environ: Mapping[str, str] | None = None,
) -> Config[Any]:
    """Shortcut for ``Config.load``."""
    return Config.load(name, data_type, codec=codec, environ=environ)
