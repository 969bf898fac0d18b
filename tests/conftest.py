from __future__ import annotations

import logging
from typing import Generator, List, Optional, Tuple, Union

import pytest

from tagver.exceptions import GitCommandError

Output = Union[str, Exception]


class FakeGit:
    """In-memory :class:`~tagver.core.git.GitBackend` returning canned output.

    ``describe`` may be a single output used for every query or a mapping
    keyed by ``(abbrev, always, ref)``.
    """

    def __init__(self, remotes: Output = "", describe: object = "") -> None:
        self.remote_output = remotes
        self.describe_output = describe
        self.calls: List[Tuple] = []

    def remotes(self) -> str:
        self.calls.append(("remotes",))
        return self._answer(self.remote_output)

    def describe(
        self,
        *,
        abbrev: int,
        tags: bool = True,
        always: bool = False,
        ref: Optional[str] = None,
    ) -> str:
        self.calls.append(("describe", abbrev, always, ref))
        output = self.describe_output
        if isinstance(output, dict):
            output = output[(abbrev, always, ref)]
        return self._answer(output)

    @staticmethod
    def _answer(output: Output) -> str:
        if isinstance(output, Exception):
            raise output
        return output


@pytest.fixture
def make_git() -> type:
    """Return the FakeGit class for building backends with canned output."""
    return FakeGit


@pytest.fixture
def git_failure() -> GitCommandError:
    return GitCommandError(
        "git describe failed",
        command=["git", "describe"],
        returncode=128,
        stderr="fatal: No names found, cannot describe anything.",
    )


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove environment variables that change tagver behavior."""
    for name in ("PROJECT_NAME", "TAGVER_CONFIG", "NO_COLOR", "CI"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def clean_logger_state() -> Generator[None, None, None]:
    """Reset the tagver logger before and after a test."""
    root_logger = logging.getLogger("tagver")
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
    yield
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
