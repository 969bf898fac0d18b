"""
Custom exception hierarchy for tagver.

This module defines structured exception types used across tagver.
All exceptions inherit from :class:`TagVerError` and support optional
structured metadata via the ``details`` attribute to improve diagnostics
and logging.
"""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Optional, Sequence


class TagVerError(Exception):
    """Base exception for all tagver errors.

    Args:
        message: Human-readable error message.
        details: Optional structured metadata describing the error.
    """

    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.message: str = message
        self.details: MutableMapping[str, Any] = dict(details) if details else {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        formatted = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({formatted})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, details={dict(self.details)!r})"
        )


def _add_if(details: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Add a key to ``details`` only if ``value`` is not ``None``."""
    if value is not None:
        details[key] = value


def _truncate(text: str, max_length: int = 200) -> str:
    """Truncate long text for safe logging or error reporting."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


class ConfigError(TagVerError):
    """Raised when a configuration file is missing, unreadable or invalid.

    Args:
        message: Error description.
        config_path: Path of the configuration file involved.
        option: Name of the offending option, if any.
    """

    __slots__ = ("config_path", "option")

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[str] = None,
        option: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", config_path)
        _add_if(details, "option", option)

        super().__init__(message, details)

        self.config_path = config_path
        self.option = option


class GitCommandError(TagVerError):
    """Raised when a git invocation fails or cannot be started.

    Args:
        message: Error description.
        command: Full argument vector that was executed.
        returncode: Exit status of the process, ``None`` if it never ran.
        stderr: Captured standard error, truncated for safety.
    """

    __slots__ = ("command", "returncode", "stderr")

    def __init__(
        self,
        message: str,
        *,
        command: Optional[Sequence[str]] = None,
        returncode: Optional[int] = None,
        stderr: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "command", " ".join(command) if command else None)
        _add_if(details, "returncode", returncode)
        if stderr:
            details["stderr"] = _truncate(stderr.strip())

        super().__init__(message, details)

        self.command = list(command) if command else []
        self.returncode = returncode
        self.stderr = stderr


class InvalidStrategyError(TagVerError):
    """Raised for a versioning strategy name that is not supported.

    Args:
        strategy: The rejected strategy name.
        choices: Names that would have been accepted.
    """

    __slots__ = ("strategy",)

    def __init__(self, strategy: str, choices: Sequence[str]) -> None:
        super().__init__(
            f"Unknown versioning strategy: '{strategy}', "
            f"expected {', '.join(choices)}"
        )
        self.strategy = strategy


class InvalidCommandError(TagVerError):
    """Raised when the describe tool gets no command or an unknown one.

    Args:
        message: Error description.
        command: The rejected command, ``None`` if none was given.
    """

    __slots__ = ("command",)

    def __init__(self, message: str, *, command: Optional[str] = None) -> None:
        super().__init__(message)
        self.command = command
