"""Permission gate.

The gate is a capability chosen once at startup: a rule evaluator when
permissions are enabled, or an always-allow gate when they are not.
"""

from abc import ABC, abstractmethod
from fnmatch import fnmatchcase

import logfire

from qeta.domain.error import PermissionDeniedError
from qeta.domain.value import Permission, ViewerId


class PermissionGate(ABC):
    """Allows or denies actions for a viewer."""

    def __init__(self, moderators: list[str] | None = None) -> None:
        """Initialize permission gate.

        Args:
            moderators: Viewers allowed to delete content of others
        """
        self.moderators = set(moderators or [])

    @abstractmethod
    def is_allowed(self, viewer: ViewerId, permission: Permission) -> bool:
        """Evaluate a permission for a viewer."""
        pass

    def check(self, viewer: ViewerId, permission: Permission) -> None:
        """Require a permission.

        Raises:
            PermissionDeniedError: If the viewer is denied
        """
        if not self.is_allowed(viewer, permission):
            logfire.warn(
                "Permission denied", viewer=viewer, permission=permission.value
            )
            raise PermissionDeniedError(permission.value, viewer)

    def can_moderate(self, viewer: ViewerId) -> bool:
        """Whether the viewer may delete content authored by others."""
        return viewer in self.moderators


class AllowAllPermissionGate(PermissionGate):
    """Gate used when permission enforcement is disabled."""

    def is_allowed(self, viewer: ViewerId, permission: Permission) -> bool:
        return True


class PolicyPermissionGate(PermissionGate):
    """Gate evaluating configured allow rules.

    Each rule maps a permission tag to viewer glob patterns. A permission
    without a rule is allowed.
    """

    def __init__(
        self, rules: dict[str, list[str]], moderators: list[str] | None = None
    ) -> None:
        super().__init__(moderators=moderators)
        self.rules = rules

    def is_allowed(self, viewer: ViewerId, permission: Permission) -> bool:
        patterns = self.rules.get(permission.value)
        if patterns is None:
            return True
        return any(fnmatchcase(viewer, pattern) for pattern in patterns)
