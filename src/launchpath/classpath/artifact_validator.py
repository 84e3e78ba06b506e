"""
Checks whether an artifact on disk is usable.
"""

import logging
import os
from typing import Optional

from launchpath.launchpath_logger import LaunchpathLogger


def is_valid_artifact(path: str, logger: Optional[LaunchpathLogger] = None) -> bool:
    """
    Checks if an artifact exists and has content.

    Never raises: a missing file, an empty file and any OS error raised while
    probing all count as invalid.

    Args:
        path: Path to the artifact
        logger: Optional logger receiving the reason for rejection

    Returns:
        True if the file exists and has non-zero size
    """
    try:
        if not os.path.isfile(path):
            if logger:
                logger.log(f"Artifact does not exist: {path}", logging.DEBUG)
            return False

        if os.path.getsize(path) <= 0:
            if logger:
                logger.log(f"Artifact is empty: {path}", logging.DEBUG)
            return False
    except OSError as e:
        if logger:
            logger.log(f"Could not probe artifact {path}: {e}", logging.WARNING)
        return False

    return True
