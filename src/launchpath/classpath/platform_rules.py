"""
Evaluation of manifest platform rules against the host operating system.
"""

from typing import Optional, Sequence, Union

from launchpath.launchpath_utils import OSTag
from launchpath.version_manifest_models import PlatformRule


def is_allowed(rules: Optional[Sequence[PlatformRule]], host_os: Union[OSTag, str]) -> bool:
    """
    Decides whether a manifest entry applies on host_os.

    Without rules an entry is allowed. Once rules exist the entry starts out
    denied and every rule whose OS condition matches overwrites the decision
    with its own action, so the last matching rule wins. A rule restricted to
    another OS never changes the decision.
    """
    if not rules:
        return True

    host = host_os.value if isinstance(host_os, OSTag) else host_os

    allowed = False
    for rule in rules:
        target = rule.target_os
        if target is None or target == host:
            allowed = rule.allows()

    return allowed
