"""
Logging utilities for tagver.

This module centralizes logger configuration, formatting, and retrieval
for the tagver package. Diagnostic output always goes to stderr so that
stdout carries nothing but command results. Color is an explicit setting
handed in by the caller rather than a global switch.
"""

from __future__ import annotations

import os
import sys
import logging
import threading
from typing import IO, Optional

from tagver.constants import (
    LOG_DATE_FORMAT,
    LOG_DEFAULT_FORMAT,
    LOG_VERBOSE_FORMAT,
)

_ROOT_LOGGER_NAME = "tagver"

_lock = threading.Lock()


class ColoredFormatter(logging.Formatter):
    """Logging formatter with optional ANSI color support."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(
        self,
        fmt: str,
        *,
        datefmt: Optional[str] = None,
        use_color: bool = True,
        stream: Optional[IO[str]] = None,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = use_color
        self.stream = stream

    def format(self, record: logging.LogRecord) -> str:
        levelname = record.levelname
        if self.use_color and self._should_use_color(self.stream):
            color = self.COLORS.get(levelname)
            if color:
                record.levelname = f"{color}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            # Records are shared between handlers
            record.levelname = levelname

    @staticmethod
    def _should_use_color(stream: Optional[IO[str]] = None) -> bool:
        """Determine whether ANSI colors should be emitted."""
        if os.environ.get("NO_COLOR"):
            return False
        if os.environ.get("CI"):
            return False
        try:
            return (stream or sys.stderr).isatty()
        except (AttributeError, OSError, ValueError):
            return False


def setup_logging(
    *,
    level: int = logging.WARNING,
    verbose: bool = False,
    color: bool = True,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """Configure the ``tagver`` logger hierarchy.

    Safe to call multiple times: the previous handler is replaced, never
    duplicated.

    Args:
        level: Logging level (e.g., ``logging.INFO``, ``logging.DEBUG``).
        verbose: Enable verbose formatting with timestamps.
        color: Colorize level names (still subject to tty detection).
        stream: Output stream; defaults to ``sys.stderr``.

    Returns:
        The configured package root logger.
    """
    with _lock:
        root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
        root_logger.handlers.clear()
        root_logger.setLevel(level)

        target = stream or sys.stderr
        handler = logging.StreamHandler(target)
        handler.setLevel(level)

        fmt = LOG_VERBOSE_FORMAT if verbose else LOG_DEFAULT_FORMAT
        handler.setFormatter(
            ColoredFormatter(
                fmt,
                datefmt=LOG_DATE_FORMAT,
                use_color=color,
                stream=target,
            )
        )

        root_logger.addHandler(handler)
        root_logger.propagate = False
        return root_logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger within the tagver namespace.

    Args:
        name: Logger name, either relative (``"core.git"``) or already
            prefixed (``"tagver.core.git"``).

    Returns:
        A logger instance under the ``tagver`` hierarchy.
    """
    if not name or name == _ROOT_LOGGER_NAME:
        logger = logging.getLogger(_ROOT_LOGGER_NAME)
    elif name.startswith(f"{_ROOT_LOGGER_NAME}."):
        logger = logging.getLogger(name)
    else:
        logger = logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")

    # Library use without setup_logging() must stay silent
    if not logger.handlers and (not logger.parent or not logger.parent.handlers):
        logger.addHandler(logging.NullHandler())

    return logger


def disable_logging() -> None:
    """Disable all tagver logging output."""
    with _lock:
        root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
        root_logger.handlers.clear()
        root_logger.addHandler(logging.NullHandler())
        root_logger.setLevel(logging.NOTSET)


def setup_cli_logging(*, debug: bool, color: bool = True) -> None:
    """Configure logging for a CLI run from the ``--debug``/``--color`` flags.

    Debug runs log everything with timestamps; normal runs only warnings.
    """
    level = logging.DEBUG if debug else logging.WARNING
    setup_logging(level=level, verbose=debug, color=color)
    get_logger("cli").debug(
        "Logging initialized at %s level", logging.getLevelName(level)
    )
