"""
Builds the classpath of a version from its manifest, fetching missing
artifacts on the way.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from launchpath.artifact_acquisition import AcquisitionCollaborator, ArtifactDownloader
from launchpath.classpath.accumulator import ClasspathAccumulator
from launchpath.classpath.deduplicator import remove_duplicate_libraries
from launchpath.classpath.platform_rules import is_allowed
from launchpath.launchpath_config import LaunchpathConfig
from launchpath.launchpath_exceptions import PrimaryArtifactError
from launchpath.launchpath_logger import LaunchpathLogger
from launchpath.launchpath_utils import PathUtils
from launchpath.version_manifest_models import VersionManifest


@dataclass
class ResolutionResult:
    """
    Outcome of a resolution run.

    missing_libraries counts dependencies still unresolved when the run
    finished, initially_missing counts those whose first lookup failed,
    including the ones recovered by a download.
    """

    classpath: Tuple[str, ...]
    primary_artifact: Optional[str]
    missing_libraries: int = 0
    initially_missing: int = 0
    diagnostics: List[str] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return self.primary_artifact is not None and self.missing_libraries == 0

    def to_classpath_string(self, separator: str = os.pathsep) -> str:
        """Joins the entries into a value for the JVM -cp option."""
        return separator.join(self.classpath)


class ResolutionEngine:
    """
    Resolves the classpath required to launch a version.

    The engine keeps no state between runs: every call to resolve works on a
    fresh ClasspathAccumulator, so one engine per concurrent resolution is
    enough to keep runs independent.
    """

    def __init__(
        self,
        config: LaunchpathConfig,
        logger: Optional[LaunchpathLogger] = None,
        acquisition: Optional[AcquisitionCollaborator] = None,
    ):
        """
        Args:
            config: Directories, host OS and progress options
            logger: Logger for diagnostics, a default one is created when omitted
            acquisition: Collaborator fetching missing artifacts, defaults to an
                ArtifactDownloader built from config
        """
        self.config = config
        self.logger = logger or LaunchpathLogger()
        self.acquisition = acquisition or ArtifactDownloader(config, self.logger)

    def get_primary_artifact_path(self, version_id: str) -> str:
        """
        Returns the absolute path of the client jar of version_id.
        """
        return PathUtils.normalize(
            os.path.join(self.config.versions_dir, version_id, f"{version_id}.jar")
        )

    def resolve(
        self,
        manifest: VersionManifest,
        version_id: str,
        custom_primary_artifact: Optional[str] = None,
    ) -> ResolutionResult:
        """
        Builds the full classpath for the specified version.

        The primary artifact comes first, followed by the libraries that apply
        to the host in manifest order. Missing libraries trigger a download of
        all outstanding libraries followed by one retry; libraries that still
        fail are reported and left out.

        Args:
            manifest: The version manifest containing library dependencies
            version_id: The version identifier
            custom_primary_artifact: Optional path overriding the client jar

        Returns:
            The resolved classpath together with its diagnostics

        Raises:
            PrimaryArtifactError: If the client jar was missing and could not be downloaded
        """
        accumulator = ClasspathAccumulator(self.logger)
        accumulator.clear()
        diagnostics: List[str] = []

        primary_artifact = self._resolve_primary_artifact(
            accumulator, manifest, version_id, custom_primary_artifact, diagnostics
        )
        initially_missing, missing = self._resolve_libraries(accumulator, manifest, diagnostics)

        if initially_missing > 0:
            self._diagnose(
                diagnostics, f"Warning: {initially_missing} library files not found", logging.WARNING
            )
        if missing > 0:
            self._diagnose(
                diagnostics, f"{missing} libraries could not be resolved", logging.WARNING
            )

        classpath = accumulator.entries
        if self.config.remove_duplicates:
            classpath = tuple(remove_duplicate_libraries(classpath, accumulator, self.logger))

        self.logger.log(f"Number of JAR files in classpath: {len(classpath)}", logging.INFO)

        return ResolutionResult(
            classpath=classpath,
            primary_artifact=primary_artifact,
            missing_libraries=missing,
            initially_missing=initially_missing,
            diagnostics=diagnostics,
        )

    def _resolve_primary_artifact(
        self,
        accumulator: ClasspathAccumulator,
        manifest: VersionManifest,
        version_id: str,
        custom_primary_artifact: Optional[str],
        diagnostics: List[str],
    ) -> Optional[str]:
        if custom_primary_artifact is not None:
            if accumulator.add(custom_primary_artifact):
                self.logger.log(f"Using custom client JAR: {custom_primary_artifact}", logging.INFO)
                return PathUtils.normalize(custom_primary_artifact)
            self._diagnose(
                diagnostics, f"Custom client JAR is invalid: {custom_primary_artifact}", logging.WARNING
            )
            return None

        client_jar_path = self.get_primary_artifact_path(version_id)

        if not os.path.exists(client_jar_path):
            self.logger.log(
                f"Client JAR file not found. Trying to download: {client_jar_path}", logging.INFO
            )
            try:
                self.acquisition.acquire_primary_artifact(manifest, version_id)
            except Exception as e:
                self.logger.log(f"Failed to download client jar for {version_id}: {e}", logging.ERROR)
                raise PrimaryArtifactError(
                    version_id, f"Failed to download client jar for {version_id}: {e}"
                ) from e

            if accumulator.add(client_jar_path):
                self.logger.log(
                    f"Downloaded and added client jar to classpath: {client_jar_path}", logging.INFO
                )
                return client_jar_path
            self._diagnose(
                diagnostics, f"Client jar still invalid after download: {client_jar_path}", logging.ERROR
            )
            return None

        if accumulator.add(client_jar_path):
            self.logger.log(f"Added client jar to classpath: {client_jar_path}", logging.INFO)
            return client_jar_path

        self._diagnose(diagnostics, f"Client jar is invalid: {client_jar_path}", logging.WARNING)
        return None

    def _resolve_libraries(
        self,
        accumulator: ClasspathAccumulator,
        manifest: VersionManifest,
        diagnostics: List[str],
    ) -> Tuple[int, int]:
        host_os = self.config.get_host_os()
        initially_missing = 0
        missing = 0

        for library in manifest.libraries or []:
            if not is_allowed(library.rules, host_os):
                continue

            relative_path = library.artifact_path
            if relative_path is None:
                continue

            library_path = PathUtils.join_normalized(self.config.libraries_dir, relative_path)

            if accumulator.contains(library_path):
                self.logger.log(f"Library declared twice: {library_path}", logging.DEBUG)
                continue

            if accumulator.add(library_path):
                continue

            initially_missing += 1
            self.logger.log(f"Library not found or invalid: {library_path}", logging.INFO)

            try:
                self.acquisition.acquire_dependencies(manifest)
                self.acquisition.wait_for_completion()
            except Exception as e:
                missing += 1
                self._diagnose(diagnostics, f"Failed to download library: {e}", logging.ERROR)
                continue

            if accumulator.add(library_path):
                self.logger.log(
                    f"Downloaded and added library to classpath: {library_path}", logging.INFO
                )
            else:
                missing += 1
                self._diagnose(
                    diagnostics,
                    f"Library still invalid after download attempt: {library_path}",
                    logging.WARNING,
                )

        return initially_missing, missing

    def _diagnose(self, diagnostics: List[str], message: str, level: int) -> None:
        diagnostics.append(message)
        self.logger.log(message, level)
