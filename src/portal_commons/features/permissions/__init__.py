"""Permissions feature for portal-commons.

Feature-First architecture for role-based authorization:
- entities/: closed Role/Permission vocabularies and the permission matrix
- services/: pure evaluator functions and the per-actor capability facade
"""

from .entities import (
    AGENCY_ROLES,
    CLIENT_ROLES,
    PERMISSION_MATRIX,
    ROLE_DISPLAY_NAMES,
    Permission,
    PermissionMatrix,
    Role,
    get_role_display_name,
)
from .services import (
    ANONYMOUS_CAPABILITIES,
    Capabilities,
    can_approve_content,
    can_delete_content,
    can_edit_content,
    can_manage_users,
    can_reject_content,
    can_view_all_clients,
    derive_capabilities,
    has_all_permissions,
    has_any_permission,
    has_permission,
    has_role,
    is_agency_role,
    is_client_role,
)

__all__ = [
    # Entities
    "Role",
    "Permission",
    "PermissionMatrix",
    "PERMISSION_MATRIX",
    "ROLE_DISPLAY_NAMES",
    "AGENCY_ROLES",
    "CLIENT_ROLES",
    "get_role_display_name",
    
    # Evaluator
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
    
    # Capability facade
    "Capabilities",
    "ANONYMOUS_CAPABILITIES",
    "derive_capabilities",
]
