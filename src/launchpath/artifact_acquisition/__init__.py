"""
Artifact acquisition.

This package handles:
1. The contract the resolver uses to fetch missing artifacts
2. Planning which artifacts of a manifest need to be downloaded
3. Downloading them with progress reporting
4. Tracking download states
"""

from .collaborator import AcquisitionCollaborator
from .download_plan import DownloadPlan, DownloadStatus
from .downloader import ArtifactDownloader

__all__ = [
    "AcquisitionCollaborator",
    "ArtifactDownloader",
    "DownloadPlan",
    "DownloadStatus",
]
