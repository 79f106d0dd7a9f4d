"""
Toolgate Core Data Models

Conversation-side types the governance core consumes. Tool requests and
messages arrive already materialised from the agent reply loop; nothing
in this package mutates them.
"""

from __future__ import annotations

import json
import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ─── Enums ───────────────────────────────────────────────────

class GovernanceMode(str, Enum):
    """Session-level strictness setting, interpreted by each inspector."""
    AUTO = "auto"
    APPROVE = "approve"
    SMART_APPROVE = "smart_approve"
    CHAT = "chat"


class Role(str, Enum):
    """Author of a conversation message."""
    USER = "user"
    ASSISTANT = "assistant"


# ─── Tool Request ────────────────────────────────────────────

class ToolRequest(BaseModel):
    """A single pending tool call proposed by the model.

    ``arguments`` may be supplied as a mapping or as JSON text; both are
    stored as a mapping. A request whose call could not be parsed carries
    ``error`` and has no usable call.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: f"req-{uuid.uuid4().hex[:8]}")
    tool_name: str
    arguments: dict[str, Any] = Field(default_factory=dict)
    error: str | None = None

    @field_validator("arguments", mode="before")
    @classmethod
    def _parse_arguments(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, (str, bytes)):
            text = value.strip() if isinstance(value, str) else value.decode("utf-8").strip()
            if not text:
                return {}
            return json.loads(text)
        return value

    @property
    def is_valid(self) -> bool:
        return self.error is None


# ─── Message ─────────────────────────────────────────────────

class Message(BaseModel):
    """One conversation turn handed to inspectors as context."""
    model_config = ConfigDict(frozen=True)

    role: Role
    content: str = ""
    tool_requests: list[ToolRequest] = Field(default_factory=list)
    created: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
