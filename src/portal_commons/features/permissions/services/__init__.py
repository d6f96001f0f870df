"""Permission services: pure evaluator functions and the capability facade."""

from .capabilities import ANONYMOUS_CAPABILITIES, Capabilities, derive_capabilities
from .evaluator import (
    APPROVER_ROLES,
    PRE_APPROVAL_STATUSES,
    can_approve_content,
    can_delete_content,
    can_edit_content,
    can_manage_users,
    can_reject_content,
    can_view_all_clients,
    has_all_permissions,
    has_any_permission,
    has_permission,
    has_role,
    is_agency_role,
    is_client_role,
)

__all__ = [
    "has_permission",
    "has_any_permission",
    "has_all_permissions",
    "has_role",
    "is_agency_role",
    "is_client_role",
    "can_edit_content",
    "can_delete_content",
    "can_approve_content",
    "can_reject_content",
    "can_view_all_clients",
    "can_manage_users",
    "PRE_APPROVAL_STATUSES",
    "APPROVER_ROLES",
    "Capabilities",
    "ANONYMOUS_CAPABILITIES",
    "derive_capabilities",
]
