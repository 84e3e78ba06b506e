"""
Tests for version comparison.
"""

import pytest

from launchpath.classpath.version_comparator import compare_versions


class TestCompareVersions:
    """Tests for compare_versions."""

    def test_numeric_not_lexicographic(self):
        assert compare_versions("1.2.0", "1.10.0") < 0
        assert compare_versions("1.10.0", "1.2.0") > 0

    def test_more_segments_wins_tie(self):
        assert compare_versions("1.2", "1.2.0") < 0
        assert compare_versions("1.2.0", "1.2") > 0

    def test_equal_versions(self):
        assert compare_versions("3.3.1", "3.3.1") == 0

    def test_returns_difference_of_first_differing_segment(self):
        assert compare_versions("1.7.3", "1.2.9") == 5

    def test_qualifier_is_ignored(self):
        """A qualifier does not influence ordering, 1.0-beta equals 1.0."""
        assert compare_versions("1.0-beta", "1.0") == 0
        assert compare_versions("2.0-rc1", "2.0-SNAPSHOT") == 0

    @pytest.mark.parametrize("segment", ["beta", "", "x1"])
    def test_non_numeric_segment_counts_as_zero(self, segment):
        assert compare_versions(f"1.{segment}", "1.0") == 0
        assert compare_versions(f"1.{segment}", "1.1") < 0
