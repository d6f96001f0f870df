"""Capability facade.

Binds the evaluator to one actor so calling code asks ``caps.can_approve_content()``
instead of threading role, id and client id through every check. Bundles are
memoized per actor; a new actor value yields a new bundle.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Optional

from ..entities.permission import Permission
from ..entities.role import Role
from . import evaluator

if TYPE_CHECKING:
    from ...auth.entities.actor import Actor


@dataclass(frozen=True)
class Capabilities:
    """Ready-to-call boolean checks for one actor (or for nobody)."""
    
    actor: Optional["Actor"] = None
    
    @property
    def is_authenticated(self) -> bool:
        return self.actor is not None
    
    @property
    def role(self) -> Optional[Role]:
        return self.actor.role if self.actor else None
    
    def can(self, permission: Any) -> bool:
        """Check a coarse permission from the matrix."""
        if self.actor is None:
            return False
        return evaluator.has_permission(self.actor.role, permission)
    
    def can_any(self, *permissions: Any) -> bool:
        if self.actor is None:
            return False
        return evaluator.has_any_permission(self.actor.role, permissions)
    
    def can_all(self, *permissions: Any) -> bool:
        if self.actor is None or not permissions:
            return False
        return evaluator.has_all_permissions(self.actor.role, permissions)
    
    def can_edit_content(self, content_author_id: Optional[str] = None, content_status: Any = None) -> bool:
        if self.actor is None:
            return False
        return evaluator.can_edit_content(
            self.actor.role, content_author_id, self.actor.id, content_status
        )
    
    def can_delete_content(self, content_author_id: Optional[str] = None, content_status: Any = None) -> bool:
        if self.actor is None:
            return False
        return evaluator.can_delete_content(
            self.actor.role, content_author_id, self.actor.id, content_status
        )
    
    def can_approve_content(self) -> bool:
        return self.actor is not None and evaluator.can_approve_content(self.actor.role)
    
    def can_reject_content(self) -> bool:
        return self.actor is not None and evaluator.can_reject_content(self.actor.role)
    
    def can_view_all_clients(self) -> bool:
        return self.actor is not None and evaluator.can_view_all_clients(self.actor.role)
    
    def can_manage_users(self, target_client_id: Optional[str] = None) -> bool:
        if self.actor is None:
            return False
        return evaluator.can_manage_users(
            self.actor.role, target_client_id, self.actor.client_id
        )
    
    def has_role(self, *roles: Any) -> bool:
        """True if the actor's role is any of ``roles``."""
        if self.actor is None:
            return False
        return evaluator.has_role(self.actor.role, roles)
    
    def is_agency_user(self) -> bool:
        return self.actor is not None and evaluator.is_agency_role(self.actor.role)
    
    def is_client_user(self) -> bool:
        return self.actor is not None and evaluator.is_client_role(self.actor.role)
    
    def can_access_client(self, client_id: Optional[str]) -> bool:
        """Agency roles see every client; client roles only their own."""
        if self.actor is None:
            return False
        if self.can_view_all_clients():
            return True
        return (
            self.can(Permission.VIEW_OWN_CLIENT)
            and bool(client_id)
            and client_id == self.actor.client_id
        )


ANONYMOUS_CAPABILITIES = Capabilities()


@lru_cache(maxsize=256)
def _cached_capabilities(actor: "Actor") -> Capabilities:
    return Capabilities(actor=actor)


def derive_capabilities(actor: Optional["Actor"]) -> Capabilities:
    """Return the capability bundle for ``actor``; anonymous when None."""
    if actor is None:
        return ANONYMOUS_CAPABILITIES
    return _cached_capabilities(actor)
