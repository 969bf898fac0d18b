from __future__ import annotations

import dataclasses

import pytest

from tagver.models import DescribeOutput


@pytest.mark.unit
class TestDescribeOutputParse:
    """Tests for DescribeOutput.parse."""

    def test_parses_tag_distance_and_commit(self) -> None:
        """Test full describe output is split into its three parts."""
        parsed = DescribeOutput.parse("v1.2.3-5-gabc123\n")

        assert parsed == DescribeOutput(tag="v1.2.3", distance=5, commit="abc123")
        assert parsed.is_exact is False

    def test_bare_tag_has_no_distance(self) -> None:
        """Test output of a tagged commit keeps the whole line as tag."""
        parsed = DescribeOutput.parse("v1.2.3\n")

        assert parsed is not None
        assert parsed.tag == "v1.2.3"
        assert parsed.distance is None
        assert parsed.commit is None
        assert parsed.is_exact is True

    def test_tag_containing_dashes(self) -> None:
        """Test distance and hash are taken from the right of the tag."""
        parsed = DescribeOutput.parse("v1.2.3-beta-12-g0f3a")

        assert parsed is not None
        assert parsed.tag == "v1.2.3-beta"
        assert parsed.distance == 12
        assert parsed.commit == "0f3a"

    def test_pre_release_tag_without_distance(self) -> None:
        """Test a dashed tag on its own is not mistaken for a distance."""
        parsed = DescribeOutput.parse("v1.2.3-rc-1")

        assert parsed is not None
        assert parsed.tag == "v1.2.3-rc-1"
        assert parsed.distance is None

    @pytest.mark.parametrize("output", ["", "\n", "   \n\n"])
    def test_empty_output_returns_none(self, output: str) -> None:
        """Test blank output parses to None."""
        assert DescribeOutput.parse(output) is None

    def test_only_first_line_is_used(self) -> None:
        """Test trailing lines are ignored."""
        parsed = DescribeOutput.parse("\nv2.0.0-1-gdead\nv1.0.0\n")

        assert parsed is not None
        assert parsed.tag == "v2.0.0"


@pytest.mark.unit
class TestDescribeOutputProperties:
    """Tests for derived DescribeOutput values."""

    def test_release_number_is_distance(self) -> None:
        assert DescribeOutput("v1.2.3", 5, "abc").release_number == "5"

    def test_release_number_on_tag_is_zero(self) -> None:
        assert DescribeOutput("v1.2.3").release_number == "0"

    def test_str_round_trips_git_format(self) -> None:
        assert str(DescribeOutput("v1.2.3", 5, "abc")) == "v1.2.3-5-gabc"
        assert str(DescribeOutput("v1.2.3")) == "v1.2.3"

    def test_is_frozen(self) -> None:
        parsed = DescribeOutput("v1.2.3")

        with pytest.raises(dataclasses.FrozenInstanceError):
            parsed.tag = "v2.0.0"  # type: ignore[misc]
