"""
Toolgate Verdict Reconciliation

The manager concatenates verdicts without resolving conflicts. These
helpers turn that list into one decision per request for the reply loop.
Precedence is most-restrictive-wins:

  DENY  >  REQUIRE_APPROVAL  >  ALLOW

A request no inspector spoke about defaults to REQUIRE_APPROVAL.
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, Field

from toolgate.core.models import ToolRequest
from toolgate.exceptions import InspectionContractError
from toolgate.inspection.models import InspectionAction, InspectionResult
from toolgate.logging import get_logger
from toolgate.permission.models import PermissionConfirmation

logger = get_logger("toolgate.inspection.reconcile")


class PermissionCheckResult(BaseModel):
    """Pending tool requests split by what the reply loop must do with them."""
    approved: list[ToolRequest] = Field(default_factory=list)
    needs_approval: list[ToolRequest] = Field(default_factory=list)
    denied: list[ToolRequest] = Field(default_factory=list)

    def find(self, request_id: str) -> ToolRequest | None:
        for bucket in (self.approved, self.needs_approval, self.denied):
            for request in bucket:
                if request.id == request_id:
                    return request
        return None

    def discard(self, request_id: str) -> None:
        self.approved = [r for r in self.approved if r.id != request_id]
        self.needs_approval = [r for r in self.needs_approval if r.id != request_id]
        self.denied = [r for r in self.denied if r.id != request_id]

    def confirm(self, request_id: str, confirmation: PermissionConfirmation) -> ToolRequest:
        """Apply a decision-maker's answer to a request awaiting approval.

        Allow answers move it to ``approved``; deny and cancel answers move
        it to ``denied``. Raises KeyError if the request is not pending.
        """
        request = next((r for r in self.needs_approval if r.id == request_id), None)
        if request is None:
            raise KeyError(f"Tool request '{request_id}' is not awaiting approval")

        self.needs_approval = [r for r in self.needs_approval if r.id != request_id]
        if confirmation.allows_execution:
            self.approved.append(request)
        else:
            self.denied.append(request)
        return request


def apply_inspection_results(
    check: PermissionCheckResult,
    results: Sequence[InspectionResult],
) -> PermissionCheckResult:
    """Overlay inspection verdicts on an existing split.

    DENY moves a request to ``denied`` from anywhere. REQUIRE_APPROVAL
    moves an approved request to ``needs_approval``. ALLOW never
    overrides a stricter placement.
    """
    updated = check.model_copy(deep=True)

    for result in results:
        logger.info(
            "Applying inspection result",
            extra={
                "inspector_name": result.inspector_name,
                "tool_request_id": result.tool_request_id,
                "action": str(result.action),
            },
        )
        request = updated.find(result.tool_request_id)
        if request is None or result.action.is_allow:
            continue

        if result.action.is_deny:
            updated.discard(request.id)
            updated.denied.append(request)
        elif any(r.id == request.id for r in updated.approved):
            updated.approved = [r for r in updated.approved if r.id != request.id]
            updated.needs_approval.append(request)

    return updated


def resolve_actions(
    tool_requests: Sequence[ToolRequest],
    results: Sequence[InspectionResult],
) -> dict[str, InspectionAction]:
    """Collapse all verdicts into one action per request id."""
    resolved: dict[str, InspectionAction] = {}
    known = {request.id for request in tool_requests}

    for result in results:
        if result.tool_request_id not in known:
            continue
        current = resolved.get(result.tool_request_id)
        if current is None or result.action.restrictiveness > current.restrictiveness:
            resolved[result.tool_request_id] = result.action
        elif (
            result.action.restrictiveness == current.restrictiveness
            and current.note is None
            and result.action.note is not None
        ):
            resolved[result.tool_request_id] = result.action

    for request in tool_requests:
        resolved.setdefault(request.id, InspectionAction.require_approval())
    return resolved


def partition(
    tool_requests: Sequence[ToolRequest],
    results: Sequence[InspectionResult],
) -> PermissionCheckResult:
    """Split a batch into approved, needs-approval and denied requests."""
    actions = resolve_actions(tool_requests, results)
    check = PermissionCheckResult()
    for request in tool_requests:
        action = actions[request.id]
        if action.is_allow:
            check.approved.append(request)
        elif action.is_deny:
            check.denied.append(request)
        else:
            check.needs_approval.append(request)
    return check


def find_finding_id(
    tool_request_id: str,
    results: Sequence[InspectionResult],
    inspector_name: str | None = None,
) -> str | None:
    """First finding id attached to a request, optionally from one inspector."""
    for result in results:
        if result.tool_request_id != tool_request_id or result.finding_id is None:
            continue
        if inspector_name is None or result.inspector_name == inspector_name:
            return result.finding_id
    return None


def verify_result_ids(
    tool_requests: Sequence[ToolRequest],
    results: Sequence[InspectionResult],
) -> None:
    """Raise InspectionContractError if any result names a request outside the batch."""
    known = {request.id for request in tool_requests}
    unknown = sorted({r.tool_request_id for r in results if r.tool_request_id not in known})
    if unknown:
        raise InspectionContractError(unknown)
