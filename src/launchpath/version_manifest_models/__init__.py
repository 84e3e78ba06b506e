"""
Version manifest models.

This package provides Pydantic data models for already-parsed version
manifests: the primary artifact download and the library entries with
their platform rules and artifact descriptors.
"""

from .version_manifest import (
    ArtifactDescriptor,
    ClientDownloads,
    LibraryDownloads,
    ManifestEntry,
    OsConstraint,
    PlatformRule,
    RuleAction,
    VersionManifest,
)

__all__ = [
    "ArtifactDescriptor",
    "ClientDownloads",
    "LibraryDownloads",
    "ManifestEntry",
    "OsConstraint",
    "PlatformRule",
    "RuleAction",
    "VersionManifest",
]
