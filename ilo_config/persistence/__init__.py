"""Durable on-disk writes for config files."""

from ilo_config.persistence.atomic import write_bytes_atomic

__all__ = ["write_bytes_atomic"]
