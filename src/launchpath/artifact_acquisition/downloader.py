"""
Artifact downloader implementation.

Handles downloading the primary artifact and library artifacts of a version
manifest over HTTP.
"""

import logging
import os
import pathlib
from typing import Dict, List, Optional

import requests

from launchpath.artifact_acquisition.collaborator import AcquisitionCollaborator
from launchpath.artifact_acquisition.download_plan import DownloadPlan, DownloadStatus
from launchpath.classpath.artifact_validator import is_valid_artifact
from launchpath.classpath.platform_rules import is_allowed
from launchpath.launchpath_config import LaunchpathConfig
from launchpath.launchpath_exceptions import AcquisitionError
from launchpath.launchpath_logger import LaunchpathLogger
from launchpath.launchpath_utils import PathUtils
from launchpath.version_manifest_models import VersionManifest

CHUNK_SIZE = 64 * 1024


class ArtifactDownloader(AcquisitionCollaborator):
    """
    Downloads missing artifacts of a version manifest.

    Creates download plans, executes them in manifest order, reports progress
    and keeps the plans around for inspection.
    """

    def __init__(
        self,
        config: LaunchpathConfig,
        logger: LaunchpathLogger,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the artifact downloader.

        Args:
            config: Configuration with directories, timeout and progress options
            logger: Logger for progress and error messages
            session: HTTP session to use, a new one is created when omitted
        """
        self.config = config
        self.logger = logger
        self.progress = config.progress
        self.session = session or requests.Session()
        self.download_plans: Dict[str, DownloadPlan] = {}

    def get_primary_artifact_path(self, version_id: str) -> str:
        return PathUtils.normalize(
            os.path.join(self.config.versions_dir, version_id, f"{version_id}.jar")
        )

    def acquire_primary_artifact(self, manifest: VersionManifest, version_id: str) -> None:
        descriptor = manifest.primary_artifact
        if descriptor is None or not descriptor.url:
            raise AcquisitionError(f"No client download declared for {version_id}")

        plan = DownloadPlan(
            artifact_key=f"client:{version_id}",
            url=descriptor.url,
            destination_path=self.get_primary_artifact_path(version_id),
            expected_size=descriptor.size,
        )
        self.download_plans[plan.artifact_key] = plan

        if not self.download_artifact(plan):
            raise AcquisitionError(f"Failed to download client jar: {plan.error_message}")

        self.logger.log(f"Downloaded client jar for {version_id}", logging.INFO)

    def acquire_dependencies(self, manifest: VersionManifest) -> None:
        plans = self.create_download_plan(manifest)

        if not plans:
            self.logger.log("No pending downloads", logging.INFO)
            return

        self.logger.log(f"Starting download of {len(plans)} libraries", logging.INFO)

        failed = []
        last_reported = 0.0
        for index, plan in enumerate(plans, start=1):
            if not self.download_artifact(plan):
                failed.append(plan)
            last_reported = self._report_operation_progress(index, len(plans), last_reported)

        if failed:
            raise AcquisitionError(
                f"Failed to download libraries: {len(failed)} of {len(plans)} failed "
                f"({', '.join(p.artifact_key for p in failed)})"
            )

    def create_download_plan(self, manifest: VersionManifest) -> List[DownloadPlan]:
        """
        Create download plans for every library of the manifest that applies
        to the host and is not yet valid on disk.

        Returns:
            The pending plans in manifest order
        """
        host_os = self.config.get_host_os()
        plans = []
        for entry in manifest.libraries or []:
            if not is_allowed(entry.rules, host_os):
                continue

            relative_path = entry.artifact_path
            if relative_path is None:
                continue

            artifact = entry.downloads.artifact
            if not artifact.url:
                self.logger.log(
                    f"Library {entry.name or relative_path} has no download URL",
                    logging.WARNING,
                )
                continue

            destination = PathUtils.join_normalized(self.config.libraries_dir, relative_path)
            if is_valid_artifact(destination):
                continue

            plan = DownloadPlan(
                artifact_key=entry.name or relative_path,
                url=artifact.url,
                destination_path=destination,
                expected_size=artifact.size,
            )
            self.download_plans[plan.artifact_key] = plan
            plans.append(plan)

        return plans

    def download_artifact(self, plan: DownloadPlan) -> bool:
        """
        Download a single artifact.

        The body is streamed to a ".part" file next to the destination which
        replaces the destination once complete.

        Args:
            plan: The download plan to execute

        Returns:
            True if download succeeded, False otherwise
        """
        partial_path = f"{plan.destination_path}.part"
        try:
            self.logger.log(f"Downloading {plan.artifact_key} from {plan.url}", logging.INFO)
            plan.status = DownloadStatus.IN_PROGRESS

            pathlib.Path(plan.destination_path).parent.mkdir(parents=True, exist_ok=True)

            with self.session.get(plan.url, stream=True, timeout=self.config.download_timeout) as response:
                response.raise_for_status()
                total = self._content_length(response, plan)
                done = 0
                with open(partial_path, "wb") as f:
                    for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                        if not chunk:
                            continue
                        f.write(chunk)
                        done += len(chunk)
                        if self.progress.on_download_progress:
                            self.progress.on_download_progress(done, total)

            if not is_valid_artifact(partial_path, self.logger):
                raise AcquisitionError(f"Download verification failed for {plan.artifact_key}")

            os.replace(partial_path, plan.destination_path)

            plan.status = DownloadStatus.COMPLETED
            self.logger.log(
                f"Successfully downloaded {plan.artifact_key} to {plan.destination_path}",
                logging.INFO,
            )
            return True

        except (requests.RequestException, OSError, AcquisitionError) as e:
            plan.error_message = f"Failed to download {plan.artifact_key}: {str(e)}"
            plan.status = DownloadStatus.FAILED
            self.logger.log(plan.error_message, logging.ERROR)
            if os.path.exists(partial_path):
                os.remove(partial_path)
            return False

    def get_download_summary(self) -> dict:
        """
        Get a summary of download results.

        Returns:
            Dictionary with counts of completed, failed, and pending downloads
        """
        plans = list(self.download_plans.values())
        completed = sum(1 for p in plans if p.is_downloaded())
        failed = sum(1 for p in plans if p.status == DownloadStatus.FAILED)
        pending = sum(1 for p in plans if p.status == DownloadStatus.PENDING)

        return {
            "completed": completed,
            "failed": failed,
            "pending": pending,
            "total": len(plans),
        }

    def _report_operation_progress(self, done: int, total: int, last_reported: float) -> float:
        if not self.progress.on_operation_progress or total == 0:
            return last_reported

        percent = done * 100.0 / total
        if percent - last_reported >= self.progress.progress_report_rate or done == total:
            self.progress.on_operation_progress(percent)
            return percent
        return last_reported

    @staticmethod
    def _content_length(response, plan: DownloadPlan) -> int:
        # progress only, a missing or malformed header falls back to the manifest size
        try:
            return int(response.headers.get("content-length"))
        except (TypeError, ValueError):
            return plan.expected_size or 0
