"""
Configuration parameters for launchpath.
"""

import inspect
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, Optional

try:
    import tomllib
except ModuleNotFoundError:
    # Python < 3.11
    import tomli as tomllib

from launchpath.launchpath_exceptions import ConfigurationError
from launchpath.launchpath_settings import LaunchpathSettings
from launchpath.launchpath_utils import OSTag, PlatformUtils

DownloadProgressCallback = Callable[[int, int], None]
OperationProgressCallback = Callable[[float], None]


@dataclass
class ProgressOptions:
    """
    Progress reporting options handed unopened to the acquisition collaborator.
    """

    on_download_progress: Optional[DownloadProgressCallback] = None
    on_operation_progress: Optional[OperationProgressCallback] = None
    progress_report_rate: int = 10


@dataclass
class LaunchpathConfig:
    """
    Configuration parameters for a classpath resolution
    """

    game_dir: Optional[str] = None
    host_os: Optional[OSTag] = None
    libraries_dir: Optional[str] = None
    versions_dir: Optional[str] = None
    progress_report_rate: int = 10
    remove_duplicates: bool = False
    download_timeout: float = 30.0
    progress: ProgressOptions = field(default_factory=ProgressOptions, repr=False)

    def __post_init__(self):
        if self.host_os is not None and not isinstance(self.host_os, OSTag):
            try:
                self.host_os = OSTag(str(self.host_os).lower())
            except ValueError:
                raise ConfigurationError(f"Unsupported host_os: {self.host_os}")

        if not self.game_dir:
            self.game_dir = LaunchpathSettings.get_default_game_directory(self.get_host_os())

        try:
            self.progress_report_rate = int(self.progress_report_rate)
        except (TypeError, ValueError):
            raise ConfigurationError(f"progress_report_rate must be an integer, got {self.progress_report_rate}")
        if not 1 <= self.progress_report_rate <= 100:
            raise ConfigurationError(
                f"progress_report_rate must be between 1 and 100, got {self.progress_report_rate}"
            )

        try:
            self.download_timeout = float(self.download_timeout)
        except (TypeError, ValueError):
            raise ConfigurationError(f"download_timeout must be a number, got {self.download_timeout}")
        if self.download_timeout <= 0:
            raise ConfigurationError("download_timeout must be positive")

        if not isinstance(self.remove_duplicates, bool):
            raise ConfigurationError(
                f"remove_duplicates must be true or false, got {self.remove_duplicates!r}"
            )

        if self.libraries_dir is None:
            self.libraries_dir = LaunchpathSettings.get_libraries_directory(self.game_dir)
        if self.versions_dir is None:
            self.versions_dir = LaunchpathSettings.get_versions_directory(self.game_dir)

        self.progress = replace(self.progress, progress_report_rate=self.progress_report_rate)

    def get_host_os(self) -> OSTag:
        """
        Returns the configured host OS, detecting it when not configured
        """
        if self.host_os is None:
            self.host_os = PlatformUtils.get_os_tag()
        return self.host_os

    @classmethod
    def from_dict(cls, env: Dict[str, Any]) -> "LaunchpathConfig":
        """
        Create a LaunchpathConfig instance from a dictionary, ignoring unknown keys
        """
        parameters = inspect.signature(cls).parameters
        return cls(**{k: v for k, v in env.items() if k in parameters and k != "progress"})

    @classmethod
    def from_toml(cls, path: str) -> "LaunchpathConfig":
        """
        Load the configuration from the [launchpath] table of a TOML file.

        Raises:
            ConfigurationError: If the file is missing, malformed or has no [launchpath] table
        """
        try:
            with open(path, "rb") as f:
                config_dict = tomllib.load(f)
        except FileNotFoundError:
            raise ConfigurationError(f"Configuration file not found: {path}")
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"Invalid TOML in {path}: {e}") from e

        section = config_dict.get("launchpath")
        if not isinstance(section, dict):
            raise ConfigurationError(f"No [launchpath] table in {path}")

        return cls.from_dict(section)
