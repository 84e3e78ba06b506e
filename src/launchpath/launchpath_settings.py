"""
Defines the default directories used by launchpath.
"""

import os
import pathlib

from launchpath.launchpath_utils import OSTag


class LaunchpathSettings:
    """
    Provides the default game directory layout for each host OS
    """

    @staticmethod
    def get_default_game_directory(os_tag: OSTag) -> str:
        """
        Returns the conventional game directory for the given OS
        """
        home = pathlib.Path.home()
        if os_tag == OSTag.WINDOWS:
            appdata = os.environ.get("APPDATA", str(home / "AppData" / "Roaming"))
            return str(pathlib.PurePath(appdata, ".minecraft"))
        if os_tag == OSTag.OSX:
            return str(home / "Library" / "Application Support" / "minecraft")
        return str(home / ".minecraft")

    @staticmethod
    def get_libraries_directory(game_dir: str) -> str:
        return str(pathlib.PurePath(game_dir, "libraries"))

    @staticmethod
    def get_versions_directory(game_dir: str) -> str:
        return str(pathlib.PurePath(game_dir, "versions"))
