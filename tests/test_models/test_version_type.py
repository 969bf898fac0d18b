from __future__ import annotations

import pytest

from tagver.models import VersionType


@pytest.mark.unit
class TestVersionType:
    """Tests for VersionType labels and build types."""

    @pytest.mark.parametrize(
        "version_type,label",
        [
            (VersionType.RELEASE, "Release"),
            (VersionType.PRERELEASE, "Pre release"),
            (VersionType.POSTRELEASE, "Post release"),
            (VersionType.INTERMEDIATE, "Intermediate release"),
        ],
    )
    def test_labels(self, version_type: VersionType, label: str) -> None:
        assert version_type.label == label

    def test_release_builds_as_release(self) -> None:
        assert VersionType.RELEASE.is_release is True
        assert VersionType.RELEASE.build_type == "Release"

    @pytest.mark.parametrize(
        "version_type",
        [VersionType.PRERELEASE, VersionType.POSTRELEASE, VersionType.INTERMEDIATE],
    )
    def test_other_types_build_as_debug(self, version_type: VersionType) -> None:
        assert version_type.is_release is False
        assert version_type.build_type == "Debug"
