"""
Toolgate — Tool Governance Core for autonomous agents

Usage:
    from toolgate import GovernanceMode, ToolRequest, build_manager, partition

    manager = build_manager()
    results = await manager.inspect_tools(requests, messages, GovernanceMode.APPROVE)
    decision = partition(requests, results)

    # decision.approved       → execute
    # decision.needs_approval → prompt, then decision.confirm(request_id, confirmation)
    # decision.denied         → report rejection back to the model
"""

from toolgate.config import GovernanceSettings, build_manager
from toolgate.core.models import GovernanceMode, Message, Role, ToolRequest
from toolgate.exceptions import (
    ArgumentEncodingError,
    ConfigurationError,
    InspectionContractError,
    InspectorError,
    ToolgateError,
)
from toolgate.inspection import (
    DEFAULT_MAX_REPETITIONS,
    ActionKind,
    InspectionAction,
    InspectionResult,
    InspectorFailure,
    PermissionCheckResult,
    RepetitionInspector,
    ToolInspectionManager,
    ToolInspector,
    apply_inspection_results,
    find_finding_id,
    partition,
    resolve_actions,
    verify_result_ids,
)
from toolgate.permission import (
    Permission,
    PermissionConfirmation,
    PermissionLevel,
    PrincipalType,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Bootstrap
    "GovernanceSettings",
    "build_manager",
    # Conversation data
    "GovernanceMode",
    "Message",
    "Role",
    "ToolRequest",
    # Inspection
    "ActionKind",
    "DEFAULT_MAX_REPETITIONS",
    "InspectionAction",
    "InspectionResult",
    "InspectorFailure",
    "RepetitionInspector",
    "ToolInspectionManager",
    "ToolInspector",
    # Reconciliation
    "PermissionCheckResult",
    "apply_inspection_results",
    "find_finding_id",
    "partition",
    "resolve_actions",
    "verify_result_ids",
    # Permission
    "Permission",
    "PermissionConfirmation",
    "PermissionLevel",
    "PrincipalType",
    # Errors
    "ArgumentEncodingError",
    "ConfigurationError",
    "InspectionContractError",
    "InspectorError",
    "ToolgateError",
]
