"""
Collapses classpath entries that differ only by version.
"""

import logging
import os
import re
from typing import Dict, List, Optional, Sequence, Tuple

from launchpath.classpath.accumulator import ClasspathAccumulator
from launchpath.classpath.version_comparator import compare_versions
from launchpath.launchpath_logger import LaunchpathLogger

VERSION_SUFFIX = re.compile(r"-([\d.]+(?:-[\w.]+)?)\.jar$", re.ASCII)


def split_versioned_name(file_name: str) -> Optional[Tuple[str, str]]:
    """
    Splits "name-1.2.3.jar" into ("name", "1.2.3").

    Returns:
        (base_name, version) or None if the file name carries no version suffix
    """
    match = VERSION_SUFFIX.search(file_name)
    if match is None:
        return None
    return file_name[: match.start()], match.group(1)


def remove_duplicate_libraries(
    classpath: Sequence[str],
    accumulator: Optional[ClasspathAccumulator] = None,
    logger: Optional[LaunchpathLogger] = None,
) -> List[str]:
    """
    Removes duplicate libraries from the classpath, keeping only the newest version.

    Versioned entries are grouped by base name and the highest version per
    compare_versions wins; on a tie the earlier entry stays. Entries without
    a version suffix are grouped by their whole file name, so two of them
    only collapse when the file names are identical (the later path wins).
    Groups keep the position of their first occurrence.

    Args:
        classpath: The classpath entries to optimize
        accumulator: When given and entries were removed, its retained set is
            reset to the optimized list
        logger: Optional logger for replacement decisions

    Returns:
        The optimized classpath with duplicates removed
    """
    library_paths: Dict[Tuple[str, str], str] = {}
    library_versions: Dict[str, str] = {}

    for path in classpath:
        file_name = os.path.basename(path)
        versioned = split_versioned_name(file_name)

        if versioned is None:
            library_paths[("file", file_name)] = path
            continue

        base_name, version = versioned
        key = ("versioned", base_name)
        existing_version = library_versions.get(base_name)
        if existing_version is None:
            library_versions[base_name] = version
            library_paths[key] = path
        elif compare_versions(version, existing_version) > 0:
            if logger:
                logger.log(
                    f"Replacing {base_name} {existing_version} with {version}",
                    logging.DEBUG,
                )
            library_versions[base_name] = version
            library_paths[key] = path

    optimized = list(library_paths.values())

    if len(optimized) != len(classpath):
        if logger:
            logger.log(
                f"Optimized classpath: removed {len(classpath) - len(optimized)} duplicate libraries",
                logging.INFO,
            )
        if accumulator is not None:
            accumulator.reset(optimized)

    return optimized
