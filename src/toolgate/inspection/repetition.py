"""
Toolgate Repetition Inspector

Cuts off a model that is stuck issuing the same tool call over and over.

A call's signature is (tool name, canonical argument encoding). Each
consecutive call with the same signature increments a counter; any other
signature resets it to 1. Calls are allowed while the counter is at or
below ``max_repetitions`` and denied after that, for as long as the same
signature keeps arriving.

State lives for the lifetime of the instance and must see calls in the
order they are attempted, so one instance belongs to exactly one agent
session. A batch is walked without yielding to the event loop, so
concurrent ``inspect`` calls on one instance never interleave.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from toolgate.core.canonical import encode_arguments
from toolgate.core.models import GovernanceMode, Message, ToolRequest
from toolgate.inspection.base import ToolInspector
from toolgate.inspection.models import InspectionAction, InspectionResult
from toolgate.logging import get_logger

logger = get_logger("toolgate.inspection.repetition")

DEFAULT_MAX_REPETITIONS = 5
REPETITION_FINDING_ID = "REP-001"

Signature = tuple[str, str]


class RepetitionInspector(ToolInspector):
    """Denies runs of identical consecutive tool calls past a threshold."""

    name = "repetition"

    def __init__(self, max_repetitions: int | None = None):
        self._max_repetitions = self._validate(
            DEFAULT_MAX_REPETITIONS if max_repetitions is None else max_repetitions
        )
        self._last_signature: Signature | None = None
        self._repeat_count = 0
        self._call_counts: dict[str, int] = {}

    @staticmethod
    def _validate(value: int) -> int:
        if value < 1:
            raise ValueError(f"max_repetitions must be at least 1, got {value}")
        return value

    @property
    def max_repetitions(self) -> int:
        return self._max_repetitions

    def set_max_repetitions(self, value: int) -> None:
        """Change the threshold; the current run of repeats is kept."""
        self._max_repetitions = self._validate(value)

    @property
    def repeat_count(self) -> int:
        return self._repeat_count

    def call_count(self, tool_name: str) -> int:
        """Total calls seen for ``tool_name``, repeated or not."""
        return self._call_counts.get(tool_name, 0)

    def check_tool_call(self, tool_name: str, arguments: dict[str, Any] | str | None = None) -> bool:
        """Record one attempted call and return whether it is allowed.

        Raises:
            ArgumentEncodingError: ``arguments`` is text that is not valid JSON.
                No state is changed.
        """
        signature = (tool_name, encode_arguments(arguments))
        self._call_counts[tool_name] = self._call_counts.get(tool_name, 0) + 1

        if signature == self._last_signature:
            self._repeat_count += 1
        else:
            self._last_signature = signature
            self._repeat_count = 1

        return self._repeat_count <= self._max_repetitions

    def reset(self) -> None:
        self._last_signature = None
        self._repeat_count = 0
        self._call_counts.clear()

    async def inspect(
        self,
        tool_requests: Sequence[ToolRequest],
        messages: Sequence[Message],
        mode: GovernanceMode,
    ) -> list[InspectionResult]:
        results: list[InspectionResult] = []

        for request in tool_requests:
            if not request.is_valid:
                continue

            if self.check_tool_call(request.tool_name, request.arguments):
                results.append(InspectionResult(
                    tool_request_id=request.id,
                    action=InspectionAction.allow(),
                    reason=f"Tool '{request.tool_name}' is within the repetition limit",
                    confidence=1.0,
                    inspector_name=self.name,
                ))
                continue

            logger.warning(
                "Repeated tool call denied",
                extra={
                    "tool_name": request.tool_name,
                    "tool_request_id": request.id,
                    "repeat_count": self._repeat_count,
                },
            )
            results.append(InspectionResult(
                tool_request_id=request.id,
                action=InspectionAction.deny(),
                reason=(
                    f"Tool '{request.tool_name}' has exceeded maximum repetitions "
                    f"({self._repeat_count} consecutive identical calls, max {self._max_repetitions})"
                ),
                confidence=1.0,
                inspector_name=self.name,
                finding_id=REPETITION_FINDING_ID,
            ))

        return results
