"""Authorization evaluator.

Pure, total functions answering "may this role perform this action". Every
function returns a boolean: unknown roles, missing ids or unrecognized
statuses deny. Nothing here raises, reads the clock, or touches the session,
so identical arguments always produce identical answers.
"""

import logging
from typing import Any, Iterable, Optional

from ..entities.matrix import PERMISSION_MATRIX
from ..entities.permission import Permission
from ..entities.role import AGENCY_ROLES, CLIENT_ROLES, Role

logger = logging.getLogger(__name__)

# Statuses in which a staff author may still revise or remove their own work
PRE_APPROVAL_STATUSES = frozenset({"draft", "rejected"})

APPROVER_ROLES = frozenset({Role.AGENCY_ADMIN, Role.CLIENT_ADMIN})


def _status_value(status: Any) -> Optional[str]:
    value = getattr(status, "value", status)
    return value if isinstance(value, str) else None


def _present(identifier: Any) -> bool:
    return identifier is not None and identifier != ""


def _as_collection(values: Any) -> Optional[tuple]:
    """Tuple of ``values``; a bare string is one entry, a non-iterable is ``None``."""
    if isinstance(values, str):
        return (values,)
    if values is None or not isinstance(values, Iterable):
        return None
    return tuple(values)


def has_permission(role: Any, permission: Any) -> bool:
    """True iff ``permission`` is granted to ``role`` by the permission matrix."""
    parsed = Permission.parse(permission)
    if parsed is None:
        return False
    return parsed in PERMISSION_MATRIX[role]


def has_any_permission(role: Any, permissions: Iterable[Any]) -> bool:
    """True if the role holds at least one of ``permissions``."""
    candidates = _as_collection(permissions)
    if candidates is None:
        return False
    return any(has_permission(role, permission) for permission in candidates)


def has_all_permissions(role: Any, permissions: Iterable[Any]) -> bool:
    """True if the role is known and holds every one of ``permissions``."""
    candidates = _as_collection(permissions)
    if Role.parse(role) is None or candidates is None:
        return False
    return all(has_permission(role, permission) for permission in candidates)


def has_role(role: Any, allowed_roles: Iterable[Any]) -> bool:
    """True if ``role`` is one of ``allowed_roles``."""
    parsed = Role.parse(role)
    candidates = _as_collection(allowed_roles)
    if parsed is None or candidates is None:
        return False
    return any(Role.parse(allowed) is parsed for allowed in candidates)


def is_agency_role(role: Any) -> bool:
    return Role.parse(role) in AGENCY_ROLES


def is_client_role(role: Any) -> bool:
    return Role.parse(role) in CLIENT_ROLES


def can_edit_content(
    role: Any,
    content_author_id: Optional[str] = None,
    actor_id: Optional[str] = None,
    content_status: Any = None,
) -> bool:
    """Check whether a role may edit a specific content item.
    
    AGENCY_ADMIN may always edit. AGENCY_STAFF may edit only their own content
    while it is still a draft or has been rejected. Every other role is denied.
    """
    parsed = Role.parse(role)
    if parsed is Role.AGENCY_ADMIN:
        return True
    
    if parsed is Role.AGENCY_STAFF:
        if not (_present(content_author_id) and _present(actor_id)):
            return False
        if content_author_id != actor_id:
            return False
        return _status_value(content_status) in PRE_APPROVAL_STATUSES
    
    return False


def can_delete_content(
    role: Any,
    content_author_id: Optional[str] = None,
    actor_id: Optional[str] = None,
    content_status: Any = None,
) -> bool:
    """Check whether a role may delete a specific content item.
    
    Same rule as editing: admins always, staff only for their own draft or
    rejected content.
    """
    return can_edit_content(role, content_author_id, actor_id, content_status)


def can_approve_content(role: Any) -> bool:
    """Only the agency admin and the client admin may approve."""
    return Role.parse(role) in APPROVER_ROLES


def can_reject_content(role: Any) -> bool:
    """Rejection authority mirrors approval authority."""
    return Role.parse(role) in APPROVER_ROLES


def can_view_all_clients(role: Any) -> bool:
    """Cross-client listings are for agency roles only."""
    return Role.parse(role) in AGENCY_ROLES


def can_manage_users(
    role: Any,
    target_client_id: Optional[str] = None,
    actor_client_id: Optional[str] = None,
) -> bool:
    """Check whether a role may manage the users of ``target_client_id``.
    
    AGENCY_ADMIN manages everyone. CLIENT_ADMIN manages users of their own
    client only; both client ids must be present and equal, so a missing id on
    either side denies.
    """
    parsed = Role.parse(role)
    if parsed is Role.AGENCY_ADMIN:
        return True
    
    if parsed is Role.CLIENT_ADMIN:
        if not (_present(target_client_id) and _present(actor_client_id)):
            logger.debug("Denied user management: client id missing")
            return False
        return target_client_id == actor_client_id
    
    return False
