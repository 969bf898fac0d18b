"""
tagver: project versioning metadata from git tag history.

tagver ships two small command-line tools:

    • ``describe``       prints the project name, module name, version,
                         release number or a combined identifier derived
                         from ``git remote`` and ``git describe`` output
    • ``version-check``  validates a version string against the project
                         version rules and reports its type or a CMake
                         build type

Both tools are thin wrappers around pure parsing functions that can be
used directly:

    >>> from tagver import classify_version
    >>> classify_version("1.2.3-rc.1").label
    'Pre release'
"""

from __future__ import annotations

from tagver.__version__ import __version__
from tagver.core import (
    Describer,
    GitClient,
    classify_version,
    extract_module_name,
    extract_project_name,
)
from tagver.models import DescribeOutput, VersionType

# ---------------------------------------------------------------------------
# Package Metadata
# ---------------------------------------------------------------------------

__author__ = "tagver Contributors"
__license__ = "Apache-2.0"
__description__ = "Project name, version and release numbers from git tags."

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "__version__",
    "Describer",
    "GitClient",
    "DescribeOutput",
    "VersionType",
    "classify_version",
    "extract_module_name",
    "extract_project_name",
]
