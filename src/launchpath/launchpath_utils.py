"""
This file contains various utility functions like path handling and platform detection
"""

import os
import platform
from enum import Enum

from launchpath.launchpath_exceptions import UnsupportedPlatformError


class OSTag(str, Enum):
    """
    Operating system tags used by version manifest rules
    """

    WINDOWS = "windows"
    OSX = "osx"
    LINUX = "linux"


class PlatformUtils:
    """
    This class provides utilities for platform detection and identification.
    """

    @staticmethod
    def get_os_tag() -> OSTag:
        """
        Returns the manifest OS tag for the current host
        """
        system = platform.system()
        if system == "Windows":
            return OSTag.WINDOWS
        if system == "Darwin":
            return OSTag.OSX
        if system == "Linux":
            return OSTag.LINUX
        raise UnsupportedPlatformError(f"Unknown platform: {system=}")


class PathUtils:
    """
    Utility functions for composing artifact paths
    """

    @staticmethod
    def normalize(path: str) -> str:
        """
        Normalizes a path to an absolute path with host separators.
        """
        normalized = os.path.normpath(path)
        if os.path.isabs(normalized):
            return normalized
        return os.path.abspath(normalized)

    @staticmethod
    def join_normalized(root: str, relative_path: str) -> str:
        """
        Joins a manifest relative path (always "/" separated) onto root and normalizes it.
        """
        parts = [part for part in relative_path.split("/") if part]
        return PathUtils.normalize(os.path.join(root, *parts))
