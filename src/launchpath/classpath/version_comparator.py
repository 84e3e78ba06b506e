"""
Comparison of dotted library versions as they appear in artifact file names.
"""

import re

_NUMERIC = re.compile(r"[0-9]+")


def _segment_value(segment: str) -> int:
    # "3-beta" compares as 3, "beta" and "" compare as 0
    head = segment.split("-")[0]
    if _NUMERIC.fullmatch(head):
        return int(head)
    return 0


def compare_versions(version1: str, version2: str) -> int:
    """
    Compares two version strings to determine which is newer.

    Segments are compared numerically up to the shorter length. When all of
    them are equal the version with more segments is newer, so "1.2.0" is
    newer than "1.2". Qualifiers such as "-beta" are ignored, which means
    "1.0-beta" and "1.0" compare equal.

    Args:
        version1: First version string to compare
        version2: Second version string to compare

    Returns:
        A positive value if version1 is newer, 0 if they are the same,
        or a negative value if version1 is older
    """
    parts1 = version1.split(".")
    parts2 = version2.split(".")

    for part1, part2 in zip(parts1, parts2):
        num1 = _segment_value(part1)
        num2 = _segment_value(part2)
        if num1 != num2:
            return num1 - num2

    return len(parts1) - len(parts2)
