"""
Toolgate Permission Models

The fixed set of answers a decision-maker can give when an inspection
result requires approval, and the principal granularity at which
"always" answers are scoped. Persisting standing policies is the
caller's job; these types only carry the decision.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Permission(str, Enum):
    """A human (or delegate) answer to an approval prompt."""
    ALWAYS_ALLOW = "AlwaysAllow"
    ALLOW_ONCE = "AllowOnce"
    CANCEL = "Cancel"
    DENY_ONCE = "DenyOnce"
    ALWAYS_DENY = "AlwaysDeny"


class PrincipalType(str, Enum):
    """What a standing permission is scoped to."""
    EXTENSION = "Extension"
    TOOL = "Tool"


class PermissionLevel(str, Enum):
    """Standing policy value recorded against a principal."""
    ALWAYS_ALLOW = "always_allow"
    ASK_BEFORE = "ask_before"
    NEVER_ALLOW = "never_allow"


class PermissionConfirmation(BaseModel):
    """Answer to one approval prompt."""
    model_config = ConfigDict(frozen=True)

    principal_type: PrincipalType
    permission: Permission

    @property
    def allows_execution(self) -> bool:
        return self.permission in (Permission.ALWAYS_ALLOW, Permission.ALLOW_ONCE)

    @property
    def is_standing(self) -> bool:
        """True if the caller should remember this answer for the principal."""
        return self.permission in (Permission.ALWAYS_ALLOW, Permission.ALWAYS_DENY)

    def standing_level(self) -> PermissionLevel | None:
        """The policy to persist, or None for once/cancel answers."""
        if self.permission == Permission.ALWAYS_ALLOW:
            return PermissionLevel.ALWAYS_ALLOW
        if self.permission == Permission.ALWAYS_DENY:
            return PermissionLevel.NEVER_ALLOW
        return None
