"""
Describe tool core: project metadata from git remotes and tags.

:class:`Describer` answers the five describe commands. It gets its git
data from an injected :class:`~tagver.core.git.GitBackend` and its
settings as constructor arguments, so a run is a pure function of git
output and configuration.

A failed git query is not an error here: it is logged and the answer
falls back to an empty string.

Typical usage::

    describer = Describer(GitClient(), release=True, strategy="abbrev")
    print(describer.run("full"))
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

from tagver.models import DescribeOutput
from tagver.utils.logger import get_logger
from tagver.core.git import GitBackend
from tagver.core.strategies import VersionStrategy, get_strategy
from tagver.exceptions import GitCommandError, InvalidCommandError
from tagver.core.remote import extract_module_name, extract_project_name
from tagver.constants import (
    DEFAULT_RELEASE,
    DEFAULT_STRATEGY,
    DESCRIBE_COMMANDS,
    HEAD_REF,
    SHORT_ABBREV,
)

logger = get_logger("core.describer")


def release_number(output: str) -> str:
    """Release number from ``git describe --abbrev=2 --tags`` output.

    Returns the commit distance since the tag, ``"0"`` when HEAD is the tag
    and ``""`` for empty output.

    Examples:
        >>> release_number("v1.2.3-5-gabc123")
        '5'
        >>> release_number("v1.2.3")
        '0'
    """
    parsed = DescribeOutput.parse(output)
    if parsed is None:
        return ""
    return parsed.release_number


class Describer:
    """Resolve project name, module name, version and release.

    Args:
        git: Backend answering remote and describe queries.
        release: Use the commit distance as release number instead of
            the constant ``"1"``.
        strategy: Versioning strategy name (``tag``, ``abbrev``, ``rank``).
        project_name: Override for both project and module name, normally
            taken from the ``PROJECT_NAME`` environment variable.

    Raises:
        InvalidStrategyError: ``strategy`` is unknown.
    """

    def __init__(
        self,
        git: GitBackend,
        *,
        release: bool = False,
        strategy: str = DEFAULT_STRATEGY,
        project_name: Optional[str] = None,
    ) -> None:
        self.git = git
        self.use_commit_release = release
        self.strategy: VersionStrategy = get_strategy(strategy)
        self.project_name = project_name or None

        self._commands: Dict[str, Callable[[], str]] = {
            "project": self.project,
            "module": self.module,
            "version": self.version,
            "release": self.release,
            "full": self.full,
        }
        logger.debug("Versioning strategy set to: %s", self.strategy.name)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def project(self) -> str:
        """Project name, e.g. ``org-repo``."""
        if self.project_name:
            logger.info("Using PROJECT_NAME from environment: %s", self.project_name)
            return self.project_name

        logger.info("PROJECT_NAME not set, extracting from git remote")
        listing = self._query("remote", self.git.remotes)
        return extract_project_name(listing) if listing else ""

    def module(self) -> str:
        """Module name, e.g. ``repo``."""
        if self.project_name:
            logger.info(
                "Using PROJECT_NAME from environment for module: %s",
                self.project_name,
            )
            return self.project_name

        logger.info("PROJECT_NAME not set, extracting module from git remote")
        listing = self._query("remote", self.git.remotes)
        return extract_module_name(listing) if listing else ""

    def version(self) -> str:
        """Version string according to the configured strategy."""
        strategy = self.strategy
        logger.info("Using '%s' versioning strategy", strategy.name)

        output = self._query(
            "describe",
            lambda: self.git.describe(
                abbrev=strategy.abbrev,
                always=strategy.always,
                ref=strategy.ref,
            ),
        )
        if not output:
            return ""

        version = strategy.resolve(output)
        if version:
            logger.info("Extracted version (%s): %s", strategy.name, version)
        else:
            logger.info("No version found for %s strategy", strategy.name)
        return version

    def release(self) -> str:
        """Release number: commit distance when enabled, ``"1"`` otherwise."""
        if not self.use_commit_release:
            logger.info("Release number not using commit, defaulting to 1")
            return DEFAULT_RELEASE

        logger.info("Using commit number as release number")
        output = self._query(
            "describe",
            lambda: self.git.describe(abbrev=SHORT_ABBREV, ref=HEAD_REF),
        )
        number = release_number(output)
        logger.info("Extracted release number: %s", number or "<none>")
        return number

    def full(self) -> str:
        """``<project>-<version>-<release>``."""
        return f"{self.project()}-{self.version()}-{self.release()}"

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def run(self, command: str) -> str:
        """Execute a describe command by name.

        Raises:
            InvalidCommandError: ``command`` is not one of
                :data:`~tagver.constants.DESCRIBE_COMMANDS`.
        """
        handler = self._commands.get(command)
        if handler is None:
            raise InvalidCommandError(
                f"Unknown command: '{command}'. "
                f"Usage: describe {'|'.join(DESCRIBE_COMMANDS)}",
                command=command,
            )
        logger.info("Executing '%s' command", command)
        return handler()

    def _query(self, what: str, call: Callable[[], str]) -> str:
        try:
            return call()
        except GitCommandError as exc:
            logger.info("Failed to get git %s: %s", what, exc)
            return ""
