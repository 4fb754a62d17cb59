"""Logging configuration for the k8s_controller package."""
import logging
import sys
from typing import Any, Optional, Protocol

from .config import Config

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
    "panic": logging.CRITICAL,
}


def parse_level(name: Optional[str]) -> int:
    """Map a level name to a logging level, falling back to INFO."""
    return LEVELS.get((name or "").lower(), logging.INFO)


def setup_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """
    Set up a logger with the specified name and log level.

    Args:
        name: The name of the logger
        level: The logging level (default: logging.INFO)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Don't add handlers if they're already configured
    if not logger.handlers:
        # Diagnostics go to stderr so rendered output on stdout stays clean
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(level)

        formatter = logging.Formatter(Config.LOG_FORMAT, datefmt=Config.LOG_DATEFMT)
        handler.setFormatter(formatter)

        logger.addHandler(handler)
    else:
        for handler in logger.handlers:
            handler.setLevel(level)
            if isinstance(handler, logging.StreamHandler):
                handler.stream = sys.stderr

    # Keep HTTP client chatter out of non-debug runs
    noisy = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    logging.getLogger("urllib3").setLevel(noisy)
    logging.getLogger("kubernetes").setLevel(noisy)

    return logger


class LoggingPort(Protocol):
    """Leveled logging with key-value context, as consumed by the core."""

    def debug(self, msg: str, **fields: Any) -> None: ...

    def info(self, msg: str, **fields: Any) -> None: ...

    def warning(self, msg: str, **fields: Any) -> None: ...

    def error(self, msg: str, **fields: Any) -> None: ...


def _render(msg: str, fields: dict) -> str:
    if not fields:
        return msg
    pairs = " ".join(f"{key}={value}" for key, value in fields.items())
    return f"{msg} {pairs}"


class StdLoggingPort:
    """LoggingPort backed by a standard library logger."""

    def __init__(self, logger: logging.Logger, **context: Any):
        self._logger = logger
        self._context = context

    def _log(self, level: int, msg: str, fields: dict) -> None:
        if self._logger.isEnabledFor(level):
            merged = {**self._context, **fields}
            self._logger.log(level, _render(msg, merged), extra={"fields": merged})

    def debug(self, msg: str, **fields: Any) -> None:
        self._log(logging.DEBUG, msg, fields)

    def info(self, msg: str, **fields: Any) -> None:
        self._log(logging.INFO, msg, fields)

    def warning(self, msg: str, **fields: Any) -> None:
        self._log(logging.WARNING, msg, fields)

    def error(self, msg: str, **fields: Any) -> None:
        self._log(logging.ERROR, msg, fields)


def get_logger(name: str = "k8s_controller", **context: Any) -> StdLoggingPort:
    """Return a logging port for ``name``; ``context`` is added to every entry."""
    return StdLoggingPort(logging.getLogger(name), **context)
