"""
Core functionality exports for tagver.

    from tagver.core import Describer, GitClient, classify_version
"""

from __future__ import annotations

from tagver.core.git import GitBackend, GitClient
from tagver.core.describer import Describer, release_number
from tagver.core.classifier import classify_version, version_rules
from tagver.core.remote import extract_module_name, extract_project_name
from tagver.core.strategies import STRATEGIES, VersionStrategy, get_strategy

__all__ = [
    "Describer",
    "GitBackend",
    "GitClient",
    "STRATEGIES",
    "VersionStrategy",
    "classify_version",
    "extract_module_name",
    "extract_project_name",
    "get_strategy",
    "release_number",
    "version_rules",
]
