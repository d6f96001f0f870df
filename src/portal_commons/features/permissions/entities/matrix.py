"""Static role -> permission matrix.

Initialized once at import and read-only thereafter. Lookups never raise:
an unrecognized role maps to the empty set.
"""

from types import MappingProxyType
from typing import Any, FrozenSet, Iterator, Mapping

from .permission import Permission
from .role import Role


_EMPTY: FrozenSet[Permission] = frozenset()


class PermissionMatrix(Mapping[Role, FrozenSet[Permission]]):
    """Total, read-only mapping from Role to its granted permissions."""
    
    def __init__(self, grants: Mapping[Role, FrozenSet[Permission]]):
        self._grants = MappingProxyType({
            role: frozenset(grants.get(role, _EMPTY)) for role in Role
        })
    
    def __getitem__(self, role: Any) -> FrozenSet[Permission]:
        parsed = Role.parse(role)
        if parsed is None:
            return _EMPTY
        return self._grants[parsed]
    
    def __contains__(self, role: object) -> bool:
        return Role.parse(role) is not None
    
    def __iter__(self) -> Iterator[Role]:
        return iter(self._grants)
    
    def __len__(self) -> int:
        return len(self._grants)
    
    def roles_with(self, permission: Permission) -> FrozenSet[Role]:
        """Roles whose grant set contains ``permission``."""
        return frozenset(role for role, granted in self._grants.items() if permission in granted)
    
    def __repr__(self) -> str:
        counts = ", ".join(f"{role.value}={len(granted)}" for role, granted in self._grants.items())
        return f"PermissionMatrix({counts})"


PERMISSION_MATRIX = PermissionMatrix({
    Role.AGENCY_ADMIN: frozenset({
        Permission.CREATE_CONTENT,
        Permission.EDIT_CONTENT,
        Permission.DELETE_CONTENT,
        Permission.APPROVE_CONTENT,
        Permission.REJECT_CONTENT,
        Permission.VIEW_ALL_CLIENTS,
        Permission.VIEW_OWN_CLIENT,
        Permission.VIEW_ANALYTICS,
        Permission.MANAGE_USERS,
        Permission.SYSTEM_CONFIG,
        Permission.BILLING_MANAGEMENT,
    }),
    Role.AGENCY_STAFF: frozenset({
        Permission.CREATE_CONTENT,
        Permission.EDIT_CONTENT,
        Permission.DELETE_CONTENT,  # own content, before approval
        Permission.VIEW_ALL_CLIENTS,
        Permission.VIEW_OWN_CLIENT,
        Permission.VIEW_ANALYTICS,
        Permission.MANAGE_USERS,  # limited
    }),
    Role.CLIENT_ADMIN: frozenset({
        Permission.APPROVE_CONTENT,
        Permission.REJECT_CONTENT,
        Permission.VIEW_OWN_CLIENT,
        Permission.VIEW_ANALYTICS,
        Permission.MANAGE_USERS,  # own client's users only
        Permission.BILLING_MANAGEMENT,
    }),
    Role.CLIENT_USER: frozenset({
        Permission.VIEW_OWN_CLIENT,
        Permission.VIEW_ANALYTICS,
    }),
})
