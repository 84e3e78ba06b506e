"""
Classpath resolution.

This package handles:
1. Filtering manifest entries by platform rules
2. Validating artifacts on disk
3. Accumulating the ordered classpath, fetching what is missing
4. Collapsing libraries that differ only by version
"""

from .accumulator import ClasspathAccumulator
from .artifact_validator import is_valid_artifact
from .deduplicator import remove_duplicate_libraries, split_versioned_name
from .platform_rules import is_allowed
from .version_comparator import compare_versions
from .resolver import ResolutionEngine, ResolutionResult

__all__ = [
    "ClasspathAccumulator",
    "ResolutionEngine",
    "ResolutionResult",
    "compare_versions",
    "is_allowed",
    "is_valid_artifact",
    "remove_duplicate_libraries",
    "split_versioned_name",
]
