"""
launchpath resolves the classpath needed to launch a game version from its
version manifest, downloading missing libraries on the way.
"""

from launchpath.classpath import ResolutionEngine, ResolutionResult
from launchpath.launchpath_config import LaunchpathConfig, ProgressOptions
from launchpath.launchpath_logger import LaunchpathLogger
from launchpath.version_manifest_models import VersionManifest

__all__ = [
    "LaunchpathConfig",
    "LaunchpathLogger",
    "ProgressOptions",
    "ResolutionEngine",
    "ResolutionResult",
    "VersionManifest",
]
