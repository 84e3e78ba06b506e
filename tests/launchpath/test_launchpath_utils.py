"""
Tests for platform detection, path helpers and logging.
"""

import json
import logging
import os

import pytest

from launchpath.launchpath_exceptions import UnsupportedPlatformError
from launchpath.launchpath_logger import LaunchpathLogger
from launchpath.launchpath_utils import OSTag, PathUtils, PlatformUtils


@pytest.mark.parametrize(
    "system, tag",
    [("Windows", OSTag.WINDOWS), ("Darwin", OSTag.OSX), ("Linux", OSTag.LINUX)],
)
def test_get_os_tag(monkeypatch, system, tag):
    monkeypatch.setattr("platform.system", lambda: system)

    assert PlatformUtils.get_os_tag() == tag


def test_get_os_tag_unsupported(monkeypatch):
    monkeypatch.setattr("platform.system", lambda: "Haiku")

    with pytest.raises(UnsupportedPlatformError):
        PlatformUtils.get_os_tag()


def test_join_normalized(tmp_path):
    joined = PathUtils.join_normalized(str(tmp_path), "org/lwjgl/../lwjgl/lwjgl-3.3.1.jar")

    assert joined == os.path.join(str(tmp_path), "org", "lwjgl", "lwjgl-3.3.1.jar")


def test_logger_emits_json_lines(caplog):
    logger = LaunchpathLogger()

    with caplog.at_level(logging.INFO, logger="launchpath"):
        logger.log("Added artifact\nto classpath", logging.INFO)

    line = json.loads(caplog.records[-1].getMessage())
    assert line["message"] == "Added artifact to classpath"
    assert line["level"] == "INFO"
    assert line["caller_name"] == "test_logger_emits_json_lines"
