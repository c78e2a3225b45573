# Error taxonomy and error logging helpers for config loading and saving

import functools
import logging
from enum import Enum
from pathlib import Path
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])


class ErrorCategory(Enum):
    ENVIRONMENT = "environment"
    IO = "io"
    DECODE = "decode"
    ENCODE = "encode"


class ConfigError(Exception):
    """Base exception for every failure raised by ilo_config"""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.IO,
        path: Path | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category
        self.path = path
        self.context = context or {}


class NoHomeError(ConfigError):
    """$ILO_CONFIG_HOME is unset and the user's home directory is unknown"""

    def __init__(self, message: str | None = None, **kwargs: Any):
        super().__init__(
            message
            or "$ILO_CONFIG_HOME is not set and user home directory could not be determined",
            ErrorCategory.ENVIRONMENT,
            **kwargs,
        )


class InvalidConfigNameError(ConfigError, ValueError):
    """Config name is not a single, safe filesystem path component"""

    def __init__(self, name: str, reason: str):
        super().__init__(
            f"Invalid config name {name!r}: {reason}",
            ErrorCategory.ENVIRONMENT,
            context={"name": name},
        )
        self.name = name


class ConfigIOError(ConfigError):
    """Filesystem operation failed; the OSError is kept as ``os_error``"""

    def __init__(
        self, message: str, os_error: OSError, path: Path | None = None, **kwargs: Any
    ):
        super().__init__(
            f"{message}: {os_error}", ErrorCategory.IO, path=path, **kwargs
        )
        self.os_error = os_error


class DecodeError(ConfigError):
    """Config file exists but its content does not match the expected type"""

    def __init__(self, message: str, path: Path | None = None, **kwargs: Any):
        super().__init__(message, ErrorCategory.DECODE, path=path, **kwargs)


class EncodeError(ConfigError):
    """In-memory value cannot be represented by the codec"""

    def __init__(self, message: str, path: Path | None = None, **kwargs: Any):
        super().__init__(message, ErrorCategory.ENCODE, path=path, **kwargs)


_LOG_LEVELS = {
    ErrorCategory.ENVIRONMENT: logging.ERROR,
    ErrorCategory.IO: logging.ERROR,
    ErrorCategory.DECODE: logging.WARNING,
    ErrorCategory.ENCODE: logging.WARNING,
}


def log_config_error(
    error: ConfigError, logger: logging.Logger, module: str = "", function: str = ""
) -> None:
    """Log a ConfigError once, at a level chosen by its category"""
    log_message = f"{error.category.value.upper()}: {error.message}"
    where = ".".join(part for part in (module, function) if part)
    if where:
        log_message = f"[{where}] {log_message}"
    if error.context:
        log_message += f" | Context: {error.context}"
    logger.log(_LOG_LEVELS[error.category], log_message)


def error_context(module: str, function: str = "") -> Callable[[F], F]:
    """Decorator that logs ConfigErrors raised by the wrapped function and re-raises them"""

    logger = logging.getLogger(module)

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except ConfigError as e:
                log_config_error(e, logger, module, function or func.__name__)
                raise

        return wrapper  # type: ignore[return-value]

    return decorator
