"""Role vocabulary for the agency portal.

Agency roles:
- AGENCY_ADMIN: full system access, manages all clients and users
- AGENCY_STAFF: creates and manages content for all clients
Client roles:
- CLIENT_ADMIN: full access to their company's portal, approves/rejects content
- CLIENT_USER: read-only access to most features
"""

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional


class Role(str, Enum):
    """The single coarse category assigned to an actor."""
    
    AGENCY_ADMIN = "AGENCY_ADMIN"
    AGENCY_STAFF = "AGENCY_STAFF"
    CLIENT_ADMIN = "CLIENT_ADMIN"
    CLIENT_USER = "CLIENT_USER"
    
    @classmethod
    def parse(cls, value: Any) -> Optional["Role"]:
        """Return the matching role, or None for anything unrecognized."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


AGENCY_ROLES = frozenset({Role.AGENCY_ADMIN, Role.AGENCY_STAFF})
CLIENT_ROLES = frozenset({Role.CLIENT_ADMIN, Role.CLIENT_USER})

ROLE_DISPLAY_NAMES: Mapping[Role, str] = MappingProxyType({
    Role.AGENCY_ADMIN: "Agency Admin",
    Role.AGENCY_STAFF: "Agency Staff",
    Role.CLIENT_ADMIN: "Client Admin",
    Role.CLIENT_USER: "Client User",
})


def get_role_display_name(role: Any) -> str:
    """Human-readable label for a role; "Unknown" for unrecognized input."""
    parsed = Role.parse(role)
    if parsed is None:
        return "Unknown"
    return ROLE_DISPLAY_NAMES[parsed]
