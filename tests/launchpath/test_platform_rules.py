"""
Tests for platform rule evaluation.
"""

import pytest

from launchpath.classpath.platform_rules import is_allowed
from launchpath.launchpath_utils import OSTag
from launchpath.version_manifest_models import PlatformRule


def rules(*specs):
    out = []
    for action, os_name in specs:
        data = {"action": action}
        if os_name is not None:
            data["os"] = {"name": os_name}
        out.append(PlatformRule(**data))
    return out


class TestIsAllowed:
    """Tests for is_allowed."""

    @pytest.mark.parametrize("host", list(OSTag))
    def test_no_rules_allows(self, host):
        assert is_allowed(None, host)
        assert is_allowed([], host)

    def test_unmatched_host_stays_denied(self):
        """Once rules exist an entry is denied unless some rule matches the host."""
        constrained = rules(("allow", "linux"), ("disallow", "windows"))

        assert is_allowed(constrained, OSTag.LINUX)
        assert not is_allowed(constrained, OSTag.WINDOWS)
        assert not is_allowed(constrained, OSTag.OSX)

    def test_last_matching_rule_wins(self):
        allow_then_deny_osx = rules(("allow", None), ("disallow", "osx"))

        assert is_allowed(allow_then_deny_osx, OSTag.LINUX)
        assert is_allowed(allow_then_deny_osx, OSTag.WINDOWS)
        assert not is_allowed(allow_then_deny_osx, OSTag.OSX)

    def test_later_unconstrained_rule_overrides(self):
        deny_then_allow = rules(("disallow", "osx"), ("allow", None))

        assert is_allowed(deny_then_allow, OSTag.OSX)

    def test_only_allow_for_other_os(self):
        assert not is_allowed(rules(("allow", "osx")), OSTag.LINUX)

    def test_os_without_name_matches_every_host(self):
        rule = [PlatformRule(action="allow", os={"arch": "x86"})]

        assert is_allowed(rule, OSTag.WINDOWS)

    def test_unknown_action_denies(self):
        assert not is_allowed(rules(("maybe", None)), OSTag.LINUX)

    def test_host_given_as_string(self):
        assert is_allowed(rules(("allow", "linux")), "linux")
        assert not is_allowed(rules(("allow", "linux")), "freebsd")
