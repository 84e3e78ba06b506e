"""
Pydantic data models for version manifest JSON documents.

The models mirror the manifest shape closely and keep unknown keys, so a
manifest can be loaded without knowing every field the launcher format has
grown over time. Fields needed to build a classpath are optional: an entry
missing them is skipped by the resolver rather than rejected here.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class RuleAction(str, Enum):
    """Actions a platform rule can take."""

    ALLOW = "allow"
    DISALLOW = "disallow"


class OsConstraint(BaseModel):
    """Operating system condition of a rule."""

    name: Optional[str] = Field(None, description="OS tag: windows, osx or linux")
    arch: Optional[str] = Field(None, description="Architecture, e.g. x86")
    version: Optional[str] = Field(None, description="OS version regex")

    class Config:
        extra = "allow"


class PlatformRule(BaseModel):
    """
    A conditional rule attached to a manifest entry.

    Any action other than "allow" denies the entry when the rule matches.
    """

    action: str = Field(..., description="allow or disallow")
    os: Optional[OsConstraint] = Field(None, description="OS condition, absent means unconditional")

    class Config:
        extra = "allow"

    @property
    def target_os(self) -> Optional[str]:
        """The OS name this rule is restricted to, None if unconstrained."""
        if self.os is None:
            return None
        return self.os.name

    def allows(self) -> bool:
        return self.action == RuleAction.ALLOW.value


class ArtifactDescriptor(BaseModel):
    """A downloadable artifact stored under a relative path."""

    path: Optional[str] = Field(None, description="Path relative to the libraries directory")
    url: Optional[str] = Field(None, description="URL to download from")
    sha1: Optional[str] = None
    size: Optional[int] = None

    class Config:
        extra = "allow"


class LibraryDownloads(BaseModel):
    """Download section of a library entry."""

    artifact: Optional[ArtifactDescriptor] = None
    classifiers: Optional[Dict[str, ArtifactDescriptor]] = None

    class Config:
        extra = "allow"


class ManifestEntry(BaseModel):
    """
    A library declared by a version manifest.
    """

    name: Optional[str] = Field(None, description="Maven coordinate of the library")
    downloads: Optional[LibraryDownloads] = None
    rules: Optional[List[PlatformRule]] = None

    class Config:
        extra = "allow"

    @property
    def artifact_path(self) -> Optional[str]:
        """
        Relative storage path of the artifact, None when the entry has no
        resolvable artifact descriptor.
        """
        if self.downloads is None or self.downloads.artifact is None:
            return None
        return self.downloads.artifact.path or None


class ClientDownloads(BaseModel):
    """Download section of a version manifest."""

    client: Optional[ArtifactDescriptor] = None

    class Config:
        extra = "allow"


class VersionManifest(BaseModel):
    """
    Complete version manifest.

    Structure:
    {
      "id": "1.20.1",
      "mainClass": "net.minecraft.client.main.Main",
      "downloads": {"client": {"url": "...", "sha1": "...", "size": 123}},
      "libraries": [
        {
          "name": "group:artifact:version",
          "downloads": {"artifact": {"path": "...", "url": "..."}},
          "rules": [{"action": "allow", "os": {"name": "osx"}}]
        },
        ...
      ]
    }
    """

    id: Optional[str] = None
    main_class: Optional[str] = Field(None, alias="mainClass")
    inherits_from: Optional[str] = Field(None, alias="inheritsFrom")
    downloads: Optional[ClientDownloads] = None
    libraries: Optional[List[ManifestEntry]] = None

    class Config:
        extra = "allow"
        populate_by_name = True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VersionManifest":
        return cls(**data)

    @property
    def primary_artifact(self) -> Optional[ArtifactDescriptor]:
        """The client download descriptor, if the manifest declares one."""
        if self.downloads is None:
            return None
        return self.downloads.client
