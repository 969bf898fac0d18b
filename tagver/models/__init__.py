"""
Unified data model exports for tagver.

Example:
    >>> from tagver.models import DescribeOutput, VersionType
"""

from __future__ import annotations

from tagver.models.version_type import VersionType
from tagver.models.describe_output import DescribeOutput

__all__ = [
    "DescribeOutput",
    "VersionType",
]
