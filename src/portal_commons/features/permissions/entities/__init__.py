"""Permission entities package.

Closed role and permission vocabularies and the static matrix between them.
"""

from .matrix import PERMISSION_MATRIX, PermissionMatrix
from .permission import Permission
from .role import (
    AGENCY_ROLES,
    CLIENT_ROLES,
    ROLE_DISPLAY_NAMES,
    Role,
    get_role_display_name,
)

__all__ = [
    "Role",
    "Permission",
    "PermissionMatrix",
    "PERMISSION_MATRIX",
    "ROLE_DISPLAY_NAMES",
    "AGENCY_ROLES",
    "CLIENT_ROLES",
    "get_role_display_name",
]
