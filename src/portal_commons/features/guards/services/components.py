"""Guard components.

Thin wrappers that turn a guard decision into the branch to render. Each
call re-evaluates against the capabilities or session it is given, so an
actor change is picked up on the next render.
"""

from typing import Any, Callable, Iterable, Optional

from ....config.constants import RoutePaths
from ...permissions.services.capabilities import Capabilities
from ..entities.decision import LOADING_INDICATOR, GuardOutcome
from .guard_service import (
    SessionView,
    evaluate_permission_guard,
    evaluate_protected_route,
    evaluate_role_guard,
)

Navigate = Callable[[str], Any]


class PermissionGuard:
    """Render ``children`` only for actors holding ``permission``."""
    
    def __init__(self, permission: Any):
        self.permission = permission
    
    def render(self, capabilities: Capabilities, children: Any, fallback: Any = None) -> Any:
        decision = evaluate_permission_guard(capabilities, self.permission)
        return children if decision.is_allowed else fallback


class RoleGuard:
    """Render ``children`` only for actors with one of ``roles``."""
    
    def __init__(self, roles: Iterable[Any]):
        self.roles = tuple(roles)
    
    def render(self, capabilities: Capabilities, children: Any, fallback: Any = None) -> Any:
        decision = evaluate_role_guard(capabilities, self.roles)
        return children if decision.is_allowed else fallback


class RouteGuard:
    """Route-level guard.
    
    On redirect the navigation callable is invoked with the target path and
    nothing is rendered. While the session is resolving the loading
    indicator is rendered and no navigation happens.
    """
    
    def __init__(
        self,
        required_permission: Any = None,
        allowed_roles: Optional[Iterable[Any]] = None,
        redirect_to: str = RoutePaths.HOME,
        require_onboarding: bool = False,
        login_path: str = RoutePaths.LOGIN,
        onboarding_path: str = RoutePaths.ONBOARDING,
        loading_indicator: Any = LOADING_INDICATOR,
    ):
        self.required_permission = required_permission
        self.allowed_roles = tuple(allowed_roles) if allowed_roles is not None else None
        self.redirect_to = redirect_to
        self.require_onboarding = require_onboarding
        self.login_path = login_path
        self.onboarding_path = onboarding_path
        self.loading_indicator = loading_indicator
    
    @classmethod
    def private(cls, **kwargs) -> "RouteGuard":
        """Variant that also sends not-yet-onboarded actors to onboarding."""
        kwargs.setdefault("require_onboarding", True)
        return cls(**kwargs)
    
    def evaluate(self, session: SessionView, current_path: Optional[str] = None):
        return evaluate_protected_route(
            session,
            required_permission=self.required_permission,
            allowed_roles=self.allowed_roles,
            redirect_to=self.redirect_to,
            login_path=self.login_path,
            onboarding_path=self.onboarding_path,
            require_onboarding=self.require_onboarding,
            current_path=current_path,
        )
    
    def render(
        self,
        session: SessionView,
        children: Any,
        navigate: Navigate,
        current_path: Optional[str] = None,
    ) -> Any:
        decision = self.evaluate(session, current_path)
        
        if decision.outcome is GuardOutcome.LOADING:
            return self.loading_indicator
        if decision.outcome is GuardOutcome.REDIRECT:
            navigate(decision.redirect_to)
            return None
        if decision.outcome is GuardOutcome.DENY:
            return None
        return children
