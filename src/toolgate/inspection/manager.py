"""
Toolgate Tool Inspection Manager

Owns the ordered registry of inspectors and runs them over each batch of
pending tool requests. The flow for one batch:

1. Snapshot requests and messages into tuples
2. Run every enabled inspector concurrently over the snapshot
3. Isolate failures: log them, record them, report them to the
   optional failure callback, and drop that inspector's results
4. Concatenate the surviving results in registration order

The manager never reconciles contradictory verdicts; see
toolgate.inspection.reconcile for that.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Iterator, Sequence
from datetime import datetime, timezone
from typing import TypeVar

from pydantic import BaseModel, Field

from toolgate.core.models import GovernanceMode, Message, ToolRequest
from toolgate.exceptions import InspectorError
from toolgate.inspection.base import ToolInspector
from toolgate.inspection.models import InspectionResult
from toolgate.logging import get_logger

logger = get_logger("toolgate.inspection")

InspectorT = TypeVar("InspectorT", bound=ToolInspector)


class InspectorFailure(BaseModel):
    """Record of one inspector failing on one batch."""
    inspector_name: str
    error_type: str
    message: str
    tool_request_ids: list[str] = Field(default_factory=list)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ToolInspectionManager:
    """Runs all registered inspectors and aggregates their verdicts.

    Registration is append-only and its order is the order results are
    reported in. One manager serves one agent session; callers must not
    have two ``inspect_tools`` batches in flight on the same instance.
    """

    def __init__(
        self,
        inspectors: Sequence[ToolInspector] | None = None,
        on_failure: Callable | None = None,
    ):
        self._inspectors: list[ToolInspector] = []
        self._on_failure = on_failure
        self._last_failures: list[InspectorFailure] = []
        for inspector in inspectors or ():
            self.add_inspector(inspector)

    def add_inspector(self, inspector: ToolInspector) -> None:
        """Register an inspector. Inspectors report in the order they are added."""
        self._inspectors.append(inspector)

    def inspector_names(self) -> list[str]:
        return [inspector.name for inspector in self._inspectors]

    def get_inspector(self, inspector_type: type[InspectorT]) -> InspectorT | None:
        """Return the first registered inspector of the given concrete type."""
        for inspector in self._inspectors:
            if isinstance(inspector, inspector_type):
                return inspector
        return None

    @property
    def last_failures(self) -> list[InspectorFailure]:
        """Failures from the most recent ``inspect_tools`` call."""
        return list(self._last_failures)

    async def inspect_tools(
        self,
        tool_requests: Sequence[ToolRequest],
        messages: Sequence[Message],
        mode: GovernanceMode,
    ) -> list[InspectionResult]:
        """Run every enabled inspector over the batch. Never raises for inspector failures.

        Each inspector works on its own deep copy of the batch and the
        conversation, so nothing it does to them reaches the caller or the
        other inspectors.
        """
        requests = tuple(tool_requests)
        conversation = tuple(messages)
        self._last_failures = []

        outcomes = await asyncio.gather(
            *(
                self._run_inspector(
                    inspector,
                    tuple(r.model_copy(deep=True) for r in requests),
                    tuple(m.model_copy(deep=True) for m in conversation),
                    mode,
                )
                for inspector in self._inspectors
            )
        )

        all_results: list[InspectionResult] = []
        for results in outcomes:
            all_results.extend(results)
        return all_results

    async def _run_inspector(
        self,
        inspector: ToolInspector,
        requests: tuple[ToolRequest, ...],
        conversation: tuple[Message, ...],
        mode: GovernanceMode,
    ) -> list[InspectionResult]:
        try:
            if not inspector.is_enabled():
                return []
            logger.debug(
                "Running tool inspector",
                extra={
                    "inspector_name": inspector.name,
                    "tool_count": len(requests),
                    "mode": getattr(mode, "value", mode),
                },
            )
            results = list(await inspector.inspect(requests, conversation, mode))
        except Exception as e:
            await self._report_failure(inspector, requests, e)
            return []

        logger.debug(
            "Tool inspector completed",
            extra={"inspector_name": inspector.name, "result_count": len(results)},
        )
        return results

    async def _report_failure(
        self,
        inspector: ToolInspector,
        requests: tuple[ToolRequest, ...],
        error: Exception,
    ) -> None:
        logger.error(
            "Tool inspector failed",
            extra={"inspector_name": inspector.name, "error": f"{type(error).__name__}: {error}"},
        )
        failure = InspectorFailure(
            inspector_name=inspector.name,
            error_type=type(error).__name__,
            message=str(error),
            tool_request_ids=[r.id for r in requests],
        )
        self._last_failures.append(failure)

        if self._on_failure is None:
            return

        wrapped = error if isinstance(error, InspectorError) else InspectorError(
            inspector.name, str(error), details={"error_type": type(error).__name__}
        )
        try:
            outcome = self._on_failure(failure, wrapped)
            if asyncio.iscoroutine(outcome):
                await outcome
        except Exception as callback_error:
            logger.error(
                "Inspector failure callback raised",
                extra={"inspector_name": inspector.name, "error": str(callback_error)},
            )

    def __len__(self) -> int:
        return len(self._inspectors)

    def __contains__(self, name: str) -> bool:
        return any(inspector.name == name for inspector in self._inspectors)

    def __iter__(self) -> Iterator[ToolInspector]:
        return iter(list(self._inspectors))
