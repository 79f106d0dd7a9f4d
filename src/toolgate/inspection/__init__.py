"""
Toolgate Tool Inspection

Every batch of pending tool calls passes through the inspection manager
before anything executes:

    Model response → ToolInspectionManager → [inspectors] → reconcile → reply loop

Components:
- ToolInspector: Base class for pluggable policy units
- ToolInspectionManager: Ordered registry, failure isolation, aggregation
- RepetitionInspector: Blocks runaway identical tool calls
- reconcile: Most-restrictive-wins helpers for the reply loop
"""

from toolgate.inspection.base import ToolInspector
from toolgate.inspection.manager import InspectorFailure, ToolInspectionManager
from toolgate.inspection.models import ActionKind, InspectionAction, InspectionResult
from toolgate.inspection.reconcile import (
    PermissionCheckResult,
    apply_inspection_results,
    find_finding_id,
    partition,
    resolve_actions,
    verify_result_ids,
)
from toolgate.inspection.repetition import DEFAULT_MAX_REPETITIONS, RepetitionInspector

__all__ = [
    "ActionKind",
    "DEFAULT_MAX_REPETITIONS",
    "InspectionAction",
    "InspectionResult",
    "InspectorFailure",
    "PermissionCheckResult",
    "RepetitionInspector",
    "ToolInspectionManager",
    "ToolInspector",
    "apply_inspection_results",
    "find_finding_id",
    "partition",
    "resolve_actions",
    "verify_result_ids",
]
