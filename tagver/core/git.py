"""
Git collaborator for tagver.

All version-control data enters tagver through a :class:`GitBackend`: an
object answering the two queries the tools need (remote listing and tag
describe) with raw text. :class:`GitClient` is the subprocess-backed
implementation; tests substitute a fake that returns canned output.

Every query runs exactly once. There is no retry and no timeout.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List, Optional, Protocol, Union

from tagver.exceptions import GitCommandError
from tagver.utils.logger import get_logger
from tagver.constants import GIT_EXECUTABLE, TAG_MATCH_PATTERN

logger = get_logger("core.git")


class GitBackend(Protocol):
    """Source of raw git output consumed by :class:`~tagver.core.Describer`."""

    def remotes(self) -> str:
        """Return ``git remote -v`` output."""
        ...

    def describe(
        self,
        *,
        abbrev: int,
        tags: bool = True,
        always: bool = False,
        ref: Optional[str] = None,
    ) -> str:
        """Return ``git describe`` output for tags matching ``v[0-9]*``."""
        ...


def describe_args(
    *,
    abbrev: int,
    tags: bool = True,
    always: bool = False,
    ref: Optional[str] = None,
) -> List[str]:
    """Build the argument list of a ``git describe`` query.

    Examples:
        >>> describe_args(abbrev=0, ref="HEAD")
        ['describe', '--match', 'v[0-9]*', '--abbrev=0', '--tags', 'HEAD']
    """
    args = ["describe", "--match", TAG_MATCH_PATTERN, f"--abbrev={abbrev}"]
    if always:
        args.append("--always")
    if tags:
        args.append("--tags")
    if ref:
        args.append(ref)
    return args


class GitClient:
    """Run git queries as subprocesses.

    Args:
        cwd: Working directory for git; defaults to the process cwd.
        executable: git binary to invoke.
    """

    def __init__(
        self,
        cwd: Optional[Union[str, Path]] = None,
        *,
        executable: str = GIT_EXECUTABLE,
    ) -> None:
        self.cwd = cwd
        self.executable = executable

    def run(self, *args: str) -> str:
        """Run ``git <args>`` and return its standard output.

        Raises:
            GitCommandError: git exited non-zero or could not be started.
        """
        command = [self.executable, *args]
        logger.debug("Running: %s", " ".join(command))

        try:
            result = subprocess.run(
                command,
                cwd=self.cwd,
                capture_output=True,
                text=True,
                errors="replace",
                check=False,
            )
        except OSError as exc:
            raise GitCommandError(
                f"Cannot run {self.executable}: {exc}",
                command=command,
            ) from exc

        if result.returncode != 0:
            raise GitCommandError(
                f"{' '.join(command[:2])} failed",
                command=command,
                returncode=result.returncode,
                stderr=result.stderr,
            )

        logger.debug("Output of %s: %r", " ".join(command), result.stdout)
        return result.stdout

    def remotes(self) -> str:
        return self.run("remote", "-v")

    def describe(
        self,
        *,
        abbrev: int,
        tags: bool = True,
        always: bool = False,
        ref: Optional[str] = None,
    ) -> str:
        return self.run(*describe_args(abbrev=abbrev, tags=tags, always=always, ref=ref))

    def __repr__(self) -> str:
        return f"GitClient(cwd={self.cwd!r}, executable={self.executable!r})"
