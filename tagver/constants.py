"""
Centralized constants for tagver.

This module defines immutable configuration values used across tagver,
including git query parameters, command and strategy names, version rules,
exit codes and logging formats. All values are intended to be treated as
read-only.
"""

from typing import Final, Sequence, Tuple

# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

#: Environment variable overriding project and module name extraction.
PROJECT_NAME_ENV: Final[str] = "PROJECT_NAME"

#: Environment variable pointing at an explicit configuration file.
CONFIG_PATH_ENV: Final[str] = "TAGVER_CONFIG"

# ---------------------------------------------------------------------------
# Git queries
# ---------------------------------------------------------------------------

#: Executable used for all version-control queries.
GIT_EXECUTABLE: Final[str] = "git"

#: Tag glob passed to ``git describe --match``.
TAG_MATCH_PATTERN: Final[str] = "v[0-9]*"

#: Abbreviation length for describe queries that keep the commit suffix.
SHORT_ABBREV: Final[int] = 2

#: Abbreviation length that makes ``git describe`` print the tag only.
TAG_ONLY_ABBREV: Final[int] = 0

#: Ref described by the ``tag`` strategy and the release query.
HEAD_REF: Final[str] = "HEAD"

# ---------------------------------------------------------------------------
# Describe tool
# ---------------------------------------------------------------------------

#: Commands accepted by the describe tool.
DESCRIBE_COMMANDS: Final[Sequence[str]] = (
    "project",
    "module",
    "version",
    "release",
    "full",
)

#: Versioning strategies accepted by ``--strategy``.
VERSION_STRATEGIES: Final[Sequence[str]] = ("tag", "abbrev", "rank")

#: Strategy used when neither the CLI nor the config file names one.
DEFAULT_STRATEGY: Final[str] = "tag"

#: Release number reported when release tracking is disabled.
DEFAULT_RELEASE: Final[str] = "1"

#: Release number reported when the current commit is exactly on a tag.
TAGGED_RELEASE: Final[str] = "0"

#: Whether the commit distance is used as release number by default.
DEFAULT_RELEASE_TRACKING: Final[bool] = False

# ---------------------------------------------------------------------------
# Version rules (precedence order)
# ---------------------------------------------------------------------------

_BASE: Final[str] = r"^v?[0-9]+\.[0-9]+\.[0-9]+"
_QUALIFIERS: Final[str] = r"(\.[0-9]+|\_[a-zA-Z]+(\.[0-9]+)*)*$"

#: ``(rule name, regular expression)`` pairs, checked top to bottom.
VERSION_RULES: Final[Tuple[Tuple[str, str], ...]] = (
    ("release", _BASE + r"$"),
    ("prerelease", _BASE + r"(\-|\~)(alpha|beta|rc|pre)" + _QUALIFIERS),
    ("postrelease", _BASE + r"\.(fix|next|post)" + _QUALIFIERS),
    ("intermediate", _BASE + r"\_[a-zA-Z]+" + _QUALIFIERS),
)

#: CMake build type for release versions.
BUILD_TYPE_RELEASE: Final[str] = "Release"

#: CMake build type for every non-release version.
BUILD_TYPE_DEBUG: Final[str] = "Debug"

# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

EXIT_SUCCESS: Final[int] = 0
EXIT_FAILURE: Final[int] = 1
EXIT_INTERRUPTED: Final[int] = 130

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
