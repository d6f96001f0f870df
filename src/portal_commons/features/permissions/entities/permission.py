"""Permission vocabulary: atomic, independently grantable action tokens."""

from enum import Enum
from typing import Any, Optional


class Permission(str, Enum):
    """Coarse action tokens. Flags are independent, not hierarchical."""
    
    # Content Management
    CREATE_CONTENT = "CREATE_CONTENT"
    EDIT_CONTENT = "EDIT_CONTENT"
    DELETE_CONTENT = "DELETE_CONTENT"
    
    # Approval Actions
    APPROVE_CONTENT = "APPROVE_CONTENT"
    REJECT_CONTENT = "REJECT_CONTENT"
    
    # View Permissions
    VIEW_ALL_CLIENTS = "VIEW_ALL_CLIENTS"
    VIEW_OWN_CLIENT = "VIEW_OWN_CLIENT"
    VIEW_ANALYTICS = "VIEW_ANALYTICS"
    
    # User Management
    MANAGE_USERS = "MANAGE_USERS"
    
    # System
    SYSTEM_CONFIG = "SYSTEM_CONFIG"
    BILLING_MANAGEMENT = "BILLING_MANAGEMENT"
    
    @classmethod
    def parse(cls, value: Any) -> Optional["Permission"]:
        """Return the matching permission, or None for anything unrecognized."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None
