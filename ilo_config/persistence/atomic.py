"""Crash-safe file writes: temp file in the same directory, fsync, then replace."""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path

from ilo_config.core.errors import ConfigIOError

logger = logging.getLogger(__name__)

NEW_FILE_MODE = 0o600


def _target_mode(path: Path) -> int:
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        return NEW_FILE_MODE


def write_bytes_atomic(path: Path, data: bytes) -> Path:
    """Write ``data`` to ``path`` so readers only ever see old or new content.

    The temp file is fully written and fsynced before ``os.replace``; on any
    failure it is removed and ``path`` is left untouched. New files are
    created user-only (0600), existing files keep their permission bits.
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        mode = _target_mode(path)
        fd, tmp_path = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent)
        )
    except OSError as e:
        raise ConfigIOError(
            f"Config path location {path} could not be opened for writing", e, path=path
        ) from e

    try:
        with os.fdopen(fd, "wb") as tmp_file:
            tmp_file.write(data)
            tmp_file.flush()
            os.fsync(tmp_file.fileno())
        os.chmod(tmp_path, mode)
        # Atomic replace
        os.replace(tmp_path, path)
    except OSError as e:
        raise ConfigIOError(
            f"Config could not be written to {path}", e, path=path
        ) from e
    finally:
        try:
            tmp = Path(tmp_path)
            if tmp.exists():
                tmp.unlink()
        except OSError:
            logger.warning("Could not remove temporary file %s", tmp_path)

    logger.debug("Wrote %d bytes to %s", len(data), path)
    return path
