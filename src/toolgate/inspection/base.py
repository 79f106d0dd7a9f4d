"""
Toolgate Tool Inspector

The pluggable unit of governance policy. Every inspector receives the
same batch of pending tool requests, the conversation they came from and
the active governance mode, and answers with zero or more
InspectionResults. Failing is allowed: the manager isolates it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from toolgate.core.models import GovernanceMode, Message, ToolRequest
from toolgate.inspection.models import InspectionResult


class ToolInspector(ABC):
    """Base class for all tool inspectors.

    Subclasses set ``name`` and implement ``inspect``. Inspectors must
    treat their inputs as read-only. Stateless inspectors may be called
    concurrently; stateful ones serialise themselves.
    """

    name: str = ""

    @abstractmethod
    async def inspect(
        self,
        tool_requests: Sequence[ToolRequest],
        messages: Sequence[Message],
        mode: GovernanceMode,
    ) -> list[InspectionResult]:
        """Return verdicts for the pending tool requests."""

    def is_enabled(self) -> bool:
        """Whether the manager should run this inspector for the next batch."""
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
