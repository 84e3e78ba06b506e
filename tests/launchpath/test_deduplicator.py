"""
Tests for removing libraries that differ only by version.
"""

from launchpath.classpath.accumulator import ClasspathAccumulator
from launchpath.classpath.deduplicator import remove_duplicate_libraries, split_versioned_name


class TestSplitVersionedName:
    """Tests for split_versioned_name."""

    def test_plain_version(self):
        assert split_versioned_name("guava-31.1.jar") == ("guava", "31.1")

    def test_version_with_qualifier(self):
        assert split_versioned_name("guava-31.1-jre.jar") == ("guava", "31.1-jre")

    def test_hyphenated_base_name(self):
        assert split_versioned_name("commons-io-2.11.0.jar") == ("commons-io", "2.11.0")

    def test_no_version(self):
        assert split_versioned_name("bar.jar") is None

    def test_classifier_after_version_is_not_a_version(self):
        assert split_versioned_name("lwjgl-3.3.1-natives-linux.jar") is None


class TestRemoveDuplicateLibraries:
    """Tests for remove_duplicate_libraries."""

    def test_keeps_newest_version(self):
        result = remove_duplicate_libraries(["foo-1.0.jar", "foo-2.0.jar", "bar.jar"])

        assert result == ["foo-2.0.jar", "bar.jar"]

    def test_newer_first_is_kept(self):
        result = remove_duplicate_libraries(["/l/foo-2.0.jar", "/l/foo-1.0.jar"])

        assert result == ["/l/foo-2.0.jar"]

    def test_group_keeps_position_of_first_occurrence(self):
        result = remove_duplicate_libraries(
            ["/l/a-1.0.jar", "/l/b-1.0.jar", "/l/a-1.10.jar", "/l/c.jar"]
        )

        assert result == ["/l/a-1.10.jar", "/l/b-1.0.jar", "/l/c.jar"]

    def test_equal_versions_keep_first(self):
        result = remove_duplicate_libraries(["/one/foo-1.0.jar", "/two/foo-1.0.jar"])

        assert result == ["/one/foo-1.0.jar"]

    def test_unversioned_never_collapses_with_versioned(self):
        result = remove_duplicate_libraries(["/l/foo-1.0.jar", "/l/foo.jar"])

        assert result == ["/l/foo-1.0.jar", "/l/foo.jar"]

    def test_no_duplicates_returns_same_entries(self):
        classpath = ["/v/1.20.1.jar", "/l/foo-1.0.jar", "/l/bar-2.0.jar"]

        assert remove_duplicate_libraries(classpath) == classpath

    def test_accumulator_reset_when_changed(self):
        accumulator = ClasspathAccumulator()
        for path in ["/l/foo-1.0.jar", "/l/foo-2.0.jar"]:
            accumulator.add(path, normalize=False, validate=False)

        remove_duplicate_libraries(accumulator.entries, accumulator)

        assert accumulator.entries == ("/l/foo-2.0.jar",)

    def test_accumulator_untouched_without_change(self):
        accumulator = ClasspathAccumulator()
        accumulator.add("/l/foo-1.0.jar", normalize=False, validate=False)
        accumulator.add("/l/bar-1.0.jar", normalize=False, validate=False)

        remove_duplicate_libraries(["/l/other-1.0.jar"], accumulator)

        assert accumulator.entries == ("/l/foo-1.0.jar", "/l/bar-1.0.jar")

    def test_non_ascii_digits_are_not_a_version(self):
        assert split_versioned_name("foo-١.jar") is None
        assert remove_duplicate_libraries(["/l/foo-١.jar", "/l/foo-0.jar"]) == [
            "/l/foo-١.jar",
            "/l/foo-0.jar",
        ]
