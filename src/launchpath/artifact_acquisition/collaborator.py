"""
Contract between the classpath resolver and whatever fetches artifacts.
"""

from abc import ABC, abstractmethod

from launchpath.version_manifest_models import VersionManifest


class AcquisitionCollaborator(ABC):
    """
    Fetches artifacts the resolver found missing or invalid.

    Implementations signal failure by raising AcquisitionError. Calls are
    blocking; the resolver waits for each one before moving on.
    """

    @abstractmethod
    def acquire_primary_artifact(self, manifest: VersionManifest, version_id: str) -> None:
        """
        Fetch the primary artifact of version_id into its canonical location.

        Raises:
            AcquisitionError: If the artifact could not be fetched
        """

    @abstractmethod
    def acquire_dependencies(self, manifest: VersionManifest) -> None:
        """
        Fetch every outstanding dependency of the manifest.

        Raises:
            AcquisitionError: If any dependency could not be fetched
        """

    def wait_for_completion(self) -> None:
        """
        Block until a previous acquire_dependencies call has fully finished.

        Implementations that download synchronously are already done when this
        is called.
        """
        return None
