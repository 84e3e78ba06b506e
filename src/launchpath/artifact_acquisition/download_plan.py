"""
Download plans and their statuses.
"""

from typing import Optional


class DownloadStatus:
    """Enumeration of download statuses."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    FAILED = "failed"


class DownloadPlan:
    """
    A plan to download a specific artifact.

    Captures all information needed to fetch the artifact to its local path.
    """

    def __init__(
            self,
            artifact_key: str,
            url: str,
            destination_path: str,
            expected_size: Optional[int] = None,
            status: str = DownloadStatus.PENDING,
    ):
        """
        Initialize a download plan.

        Args:
            artifact_key: Unique key for the artifact, e.g. a library coordinate
            url: URL to download from
            destination_path: Absolute local path of the artifact
            expected_size: Size declared by the manifest, used for progress only
            status: Current download status
        """
        self.artifact_key = artifact_key
        self.url = url
        self.destination_path = destination_path
        self.expected_size = expected_size
        self.status = status
        self.error_message: Optional[str] = None

    def is_downloaded(self) -> bool:
        return self.status == DownloadStatus.COMPLETED

    def __repr__(self) -> str:
        return (
            f"DownloadPlan(key={self.artifact_key}, "
            f"status={self.status}, url={self.url})"
        )
