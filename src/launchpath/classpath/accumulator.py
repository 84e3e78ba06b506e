"""
Ordered, duplicate-free collection of classpath entries.
"""

import logging
from typing import Iterable, List, Optional, Tuple

from launchpath.classpath.artifact_validator import is_valid_artifact
from launchpath.launchpath_logger import LaunchpathLogger
from launchpath.launchpath_utils import PathUtils


class ClasspathAccumulator:
    """
    Collects the artifact paths of one resolution run.

    Insertion order is kept because it defines classpath precedence for the
    JVM. An accumulator belongs to a single run and must not be shared
    between concurrent resolutions.
    """

    def __init__(self, logger: Optional[LaunchpathLogger] = None):
        self.logger = logger
        self._entries: List[str] = []
        self._members = set()

    def add(self, path: str, normalize: bool = True, validate: bool = True) -> bool:
        """
        Adds an artifact to the classpath.

        Args:
            path: The path to the artifact
            normalize: Whether to make the path absolute and normalized first
            validate: Whether to require an existing, non-empty file

        Returns:
            True if the path was appended, False if it was already present or invalid
        """
        entry = PathUtils.normalize(path) if normalize else path
        if entry in self._members:
            self._log(f"Artifact already in classpath: {entry}")
            return False

        if validate and not is_valid_artifact(entry, self.logger):
            return False

        self._entries.append(entry)
        self._members.add(entry)
        self._log(f"Added artifact to classpath: {entry}")
        return True

    def contains(self, path: str, normalize: bool = True) -> bool:
        entry = PathUtils.normalize(path) if normalize else path
        return entry in self._members

    def clear(self) -> None:
        self._entries.clear()
        self._members.clear()

    def reset(self, paths: Iterable[str]) -> None:
        """
        Replaces the retained entries with paths, as given and in order.
        """
        self.clear()
        for path in paths:
            if path not in self._members:
                self._entries.append(path)
                self._members.add(path)

    @property
    def entries(self) -> Tuple[str, ...]:
        """Immutable ordered view of the current entries."""
        return tuple(self._entries)

    def __contains__(self, path: str) -> bool:
        return self.contains(path)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(tuple(self._entries))

    def _log(self, message: str) -> None:
        if self.logger:
            self.logger.log(message, logging.DEBUG)
