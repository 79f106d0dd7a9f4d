"""
Toolgate Permission Model

Decision vocabulary used when an inspection result requires a human
answer: the five possible answers, and whether an "always" answer is
scoped to a whole extension or to a single tool.
"""

from toolgate.permission.models import (
    Permission,
    PermissionConfirmation,
    PermissionLevel,
    PrincipalType,
)

__all__ = [
    "Permission",
    "PermissionConfirmation",
    "PermissionLevel",
    "PrincipalType",
]
