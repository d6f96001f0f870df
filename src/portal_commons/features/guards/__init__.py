"""Guards: decide what to render or where to navigate for the current actor."""

from .dependencies import GuardDependencies, GuardRedirect, register_guard_handlers
from .entities import LOADING_INDICATOR, GuardDecision, GuardOutcome, LoadingIndicator
from .services import (
    Navigate,
    PermissionGuard,
    RoleGuard,
    RouteGuard,
    SessionView,
    evaluate_permission_guard,
    evaluate_private_route,
    evaluate_protected_route,
    evaluate_role_guard,
    evaluate_route_guard,
)

__all__ = [
    "GuardOutcome",
    "GuardDecision",
    "LoadingIndicator",
    "LOADING_INDICATOR",
    "SessionView",
    "evaluate_permission_guard",
    "evaluate_role_guard",
    "evaluate_route_guard",
    "evaluate_private_route",
    "evaluate_protected_route",
    "Navigate",
    "PermissionGuard",
    "RoleGuard",
    "RouteGuard",
    "GuardDependencies",
    "GuardRedirect",
    "register_guard_handlers",
]
