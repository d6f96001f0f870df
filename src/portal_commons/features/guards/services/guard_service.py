"""Pure guard decision functions.

Each function maps (session or capabilities, requirement) to a
``GuardDecision``. Nothing here renders, navigates or logs above DEBUG.
"""

import logging
from typing import Any, Iterable, Optional, Protocol

from ....config.constants import RoutePaths
from ...auth.entities.actor import Actor
from ...permissions.services.capabilities import Capabilities
from ..entities.decision import GuardDecision

logger = logging.getLogger(__name__)


class SessionView(Protocol):
    """Read-only view of the session a route guard needs."""
    
    @property
    def is_resolving(self) -> bool: ...
    
    @property
    def capabilities(self) -> Capabilities: ...
    
    def get_current_actor(self) -> Optional[Actor]: ...


def _normalize_roles(roles: Any) -> tuple:
    if roles is None:
        return ()
    if isinstance(roles, str):
        return (roles,)
    return tuple(roles)


def evaluate_permission_guard(capabilities: Capabilities, permission: Any) -> GuardDecision:
    """Allow iff the actor holds ``permission``; otherwise show the fallback."""
    if capabilities.can(permission):
        return GuardDecision.allow()
    logger.debug(f"Permission guard denied {permission!r} for {capabilities.actor}")
    return GuardDecision.deny(reason=f"missing permission {getattr(permission, 'value', permission)}")


def evaluate_role_guard(capabilities: Capabilities, roles: Iterable[Any]) -> GuardDecision:
    """Allow iff the actor's role is one of ``roles``."""
    if capabilities.has_role(*_normalize_roles(roles)):
        return GuardDecision.allow()
    logger.debug(f"Role guard denied {capabilities.actor}")
    return GuardDecision.deny(reason="role not allowed")


def evaluate_private_route(
    session: SessionView,
    login_path: str = RoutePaths.LOGIN,
    onboarding_path: str = RoutePaths.ONBOARDING,
    current_path: Optional[str] = None,
) -> GuardDecision:
    """Signed-in and onboarded actors only.
    
    Loading while the session resolves, login redirect when anonymous and
    onboarding redirect when the actor has not finished onboarding. The
    onboarding page itself is reachable by a not-yet-onboarded actor.
    """
    if session.is_resolving:
        return GuardDecision.loading()
    
    actor = session.get_current_actor()
    if actor is None:
        return GuardDecision.redirect(login_path, reason="not signed in")
    
    if not actor.has_completed_onboarding and current_path != onboarding_path:
        return GuardDecision.redirect(onboarding_path, reason="onboarding incomplete")
    
    return GuardDecision.allow()


def evaluate_route_guard(
    session: SessionView,
    required_permission: Any = None,
    allowed_roles: Optional[Iterable[Any]] = None,
    redirect_to: str = RoutePaths.HOME,
) -> GuardDecision:
    """Role and permission gate for a whole route.
    
    Any actor failing the gate, anonymous or signed in, goes to
    ``redirect_to``. An empty ``allowed_roles`` admits no role, so every
    actor is redirected; pass ``None`` to skip the role check.
    """
    if session.is_resolving:
        return GuardDecision.loading()
    
    if session.get_current_actor() is None:
        return GuardDecision.redirect(redirect_to, reason="not signed in")
    
    capabilities = session.capabilities
    if allowed_roles is not None and not capabilities.has_role(*_normalize_roles(allowed_roles)):
        logger.debug(f"Route guard: role of {capabilities.actor} not allowed")
        return GuardDecision.redirect(redirect_to, reason="role not allowed")
    
    if required_permission is not None and not capabilities.can(required_permission):
        logger.debug(f"Route guard: {capabilities.actor} lacks {required_permission!r}")
        return GuardDecision.redirect(redirect_to, reason="missing permission")
    
    return GuardDecision.allow()


def evaluate_protected_route(
    session: SessionView,
    required_permission: Any = None,
    allowed_roles: Optional[Iterable[Any]] = None,
    redirect_to: str = RoutePaths.HOME,
    login_path: str = RoutePaths.LOGIN,
    onboarding_path: str = RoutePaths.ONBOARDING,
    require_onboarding: bool = True,
    current_path: Optional[str] = None,
) -> GuardDecision:
    """Private-route checks first, then role and permission checks."""
    if require_onboarding:
        decision = evaluate_private_route(session, login_path, onboarding_path, current_path)
        if not decision.is_allowed:
            return decision
    
    return evaluate_route_guard(
        session,
        required_permission=required_permission,
        allowed_roles=allowed_roles,
        redirect_to=redirect_to,
    )
