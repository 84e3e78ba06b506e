"""
This module contains the exceptions raised by the launchpath library.
"""


class LaunchpathException(Exception):
    """
    Base exception for all launchpath errors.
    """

    def __init__(self, message: str):
        super().__init__(message)


class ConfigurationError(LaunchpathException):
    """Raised when a LaunchpathConfig is built from invalid values."""

    pass


class UnsupportedPlatformError(LaunchpathException):
    """Raised when the host operating system is not windows, osx or linux."""

    pass


class AcquisitionError(LaunchpathException):
    """
    Raised by an acquisition collaborator when it fails to fetch artifacts.
    """

    pass


class PrimaryArtifactError(LaunchpathException):
    """
    Raised by the resolver when the primary artifact could not be acquired.

    This is the only fatal outcome of a resolution run. The underlying
    AcquisitionError is chained as __cause__.
    """

    def __init__(self, version_id: str, message: str):
        super().__init__(message)
        self.version_id = version_id
