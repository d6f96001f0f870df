"""Guard decision functions and components."""

from .components import Navigate, PermissionGuard, RoleGuard, RouteGuard
from .guard_service import (
    SessionView,
    evaluate_permission_guard,
    evaluate_private_route,
    evaluate_protected_route,
    evaluate_role_guard,
    evaluate_route_guard,
)

__all__ = [
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
]
