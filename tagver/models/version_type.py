"""
Version classification result.
"""

from __future__ import annotations

from enum import Enum

from tagver.constants import BUILD_TYPE_DEBUG, BUILD_TYPE_RELEASE


class VersionType(Enum):
    """Category a version string belongs to.

    The value is the label printed by ``version-check --type``.
    """

    RELEASE = "Release"
    PRERELEASE = "Pre release"
    POSTRELEASE = "Post release"
    INTERMEDIATE = "Intermediate release"

    @property
    def label(self) -> str:
        return self.value

    @property
    def is_release(self) -> bool:
        return self is VersionType.RELEASE

    @property
    def build_type(self) -> str:
        """CMake build type: ``Release`` for releases, ``Debug`` otherwise."""
        return BUILD_TYPE_RELEASE if self.is_release else BUILD_TYPE_DEBUG
