"""
Toolgate Inspection Models

Value types for one inspector's verdict on one tool request. Results are
frozen pydantic models: once an inspector produces one, nothing
downstream can change it.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ActionKind(str, Enum):
    """Closed set of inspection decisions."""
    ALLOW = "ALLOW"
    DENY = "DENY"
    REQUIRE_APPROVAL = "REQUIRE_APPROVAL"


# Higher wins when verdicts for the same request disagree
_RESTRICTIVENESS: dict[ActionKind, int] = {
    ActionKind.ALLOW: 0,
    ActionKind.REQUIRE_APPROVAL: 1,
    ActionKind.DENY: 2,
}


class InspectionAction(BaseModel):
    """What to do with a tool request.

    ``note`` is only meaningful for REQUIRE_APPROVAL, where it is the
    warning shown to whoever makes the decision.
    """
    model_config = ConfigDict(frozen=True)

    kind: ActionKind
    note: str | None = None

    @classmethod
    def allow(cls) -> InspectionAction:
        return cls(kind=ActionKind.ALLOW)

    @classmethod
    def deny(cls) -> InspectionAction:
        return cls(kind=ActionKind.DENY)

    @classmethod
    def require_approval(cls, note: str | None = None) -> InspectionAction:
        return cls(kind=ActionKind.REQUIRE_APPROVAL, note=note)

    @property
    def is_allow(self) -> bool:
        return self.kind == ActionKind.ALLOW

    @property
    def is_deny(self) -> bool:
        return self.kind == ActionKind.DENY

    @property
    def requires_approval(self) -> bool:
        return self.kind == ActionKind.REQUIRE_APPROVAL

    @property
    def restrictiveness(self) -> int:
        return _RESTRICTIVENESS[self.kind]

    def __str__(self) -> str:
        if self.note:
            return f"{self.kind.value}({self.note})"
        return self.kind.value


class InspectionResult(BaseModel):
    """One inspector's verdict on one tool request."""
    model_config = ConfigDict(frozen=True)

    tool_request_id: str
    action: InspectionAction
    reason: str = ""
    confidence: float = Field(default=1.0, ge=0.0, le=1.0)
    inspector_name: str
    finding_id: str | None = None
