"""
Shared fixtures for launchpath tests.
"""

import pytest

from launchpath.launchpath_config import LaunchpathConfig
from launchpath.launchpath_logger import LaunchpathLogger
from launchpath.launchpath_utils import OSTag


@pytest.fixture
def game_dir(tmp_path):
    """Empty game directory."""
    directory = tmp_path / "game"
    directory.mkdir()
    return directory


@pytest.fixture
def config(game_dir):
    """Configuration pinned to linux so rule evaluation is deterministic."""
    return LaunchpathConfig(game_dir=str(game_dir), host_os=OSTag.LINUX)


@pytest.fixture
def logger():
    return LaunchpathLogger()
