"""Unit tests for the permission gates."""

import pytest

from qeta.domain.error import PermissionDeniedError
from qeta.domain.service import AllowAllPermissionGate, PolicyPermissionGate
from qeta.domain.value import Permission, ViewerId

ALICE = ViewerId("user:default/alice")
GUEST = ViewerId("user:default/guest")


class TestAllowAllPermissionGate:
    def test_allows_everything(self):
        gate = AllowAllPermissionGate()

        for permission in Permission:
            assert gate.is_allowed(GUEST, permission) is True
            gate.check(GUEST, permission)


class TestPolicyPermissionGate:
    """Tests for rule evaluation."""

    def test_permission_without_rule_is_allowed(self):
        """Tags without a rule should be open to everyone."""
        gate = PolicyPermissionGate(rules={})

        assert gate.is_allowed(GUEST, Permission.CREATE_QUESTION) is True

    def test_glob_pattern_matches_viewer(self):
        """Rules should match viewers by shell-style pattern."""
        gate = PolicyPermissionGate(
            rules={Permission.CREATE_ANSWER.value: ["user:default/a*"]}
        )

        assert gate.is_allowed(ALICE, Permission.CREATE_ANSWER) is True
        assert gate.is_allowed(GUEST, Permission.CREATE_ANSWER) is False

    def test_check_raises_when_denied(self):
        """check should raise PermissionDeniedError for a denied viewer."""
        gate = PolicyPermissionGate(rules={Permission.READ.value: []})

        with pytest.raises(PermissionDeniedError):
            gate.check(ALICE, Permission.READ)


class TestCanModerate:
    def test_only_configured_moderators(self):
        gate = AllowAllPermissionGate(moderators=[ALICE])

        assert gate.can_moderate(ALICE) is True
        assert gate.can_moderate(GUEST) is False
