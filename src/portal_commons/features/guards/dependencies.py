"""FastAPI guard dependencies.

Route-guard redirects become HTTP redirects; library errors become JSON error
responses with the status from ``HTTP_STATUS_MAP``.
"""

import logging
from typing import Any, Iterable, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, RedirectResponse

from ...core.exceptions import PortalCommonsError, create_error_response, get_http_status_code
from ..auth.entities.actor import Actor
from ..auth.services.session_provider import SessionProvider
from ..permissions.services.capabilities import Capabilities
from .entities.decision import GuardDecision
from .services.guard_service import (
    evaluate_permission_guard,
    evaluate_protected_route,
    evaluate_role_guard,
)

logger = logging.getLogger(__name__)


class GuardRedirect(Exception):
    """Raised by guard dependencies to send the client elsewhere."""
    
    def __init__(self, path: str, reason: Optional[str] = None):
        super().__init__(f"Redirect to {path}" + (f" ({reason})" if reason else ""))
        self.path = path
        self.reason = reason


class GuardDependencies:
    """FastAPI guard dependencies factory."""
    
    def __init__(self, provider: SessionProvider):
        """Initialize guard dependencies."""
        self.provider = provider
        self.settings = provider.settings
    
    async def get_session(self) -> SessionProvider:
        """Return the provider, finishing the initial restore first."""
        if self.provider.is_resolving:
            await self.provider.restore()
        return self.provider
    
    async def get_capabilities(self) -> Capabilities:
        """Capabilities of the current actor; anonymous when signed out."""
        session = await self.get_session()
        return session.capabilities
    
    def _raise_for(self, decision: GuardDecision) -> None:
        if decision.is_redirect:
            raise GuardRedirect(decision.redirect_to, decision.reason)
        if not decision.is_allowed:
            raise GuardRedirect(self.settings.default_redirect, decision.reason)
    
    def require_permission(self, permission: Any, redirect_to: Optional[str] = None):
        """Require a permission; otherwise redirect to ``redirect_to``."""
        target = redirect_to or self.settings.default_redirect
        
        async def dependency() -> Capabilities:
            session = await self.get_session()
            if session.get_current_actor() is None:
                raise GuardRedirect(self.settings.login_path, "not signed in")
            capabilities = session.capabilities
            decision = evaluate_permission_guard(capabilities, permission)
            if not decision.is_allowed:
                raise GuardRedirect(target, decision.reason)
            return capabilities
        
        return dependency
    
    def require_roles(self, roles: Iterable[Any], redirect_to: Optional[str] = None):
        """Require one of ``roles``; otherwise redirect to ``redirect_to``."""
        allowed = tuple(roles)
        target = redirect_to or self.settings.default_redirect
        
        async def dependency() -> Capabilities:
            session = await self.get_session()
            if session.get_current_actor() is None:
                raise GuardRedirect(self.settings.login_path, "not signed in")
            capabilities = session.capabilities
            decision = evaluate_role_guard(capabilities, allowed)
            if not decision.is_allowed:
                raise GuardRedirect(target, decision.reason)
            return capabilities
        
        return dependency
    
    def require_route(
        self,
        required_permission: Any = None,
        allowed_roles: Optional[Iterable[Any]] = None,
        redirect_to: Optional[str] = None,
        require_onboarding: bool = True,
    ):
        """Full route guard: sign-in, onboarding, roles and permission."""
        roles = tuple(allowed_roles) if allowed_roles is not None else None
        target = redirect_to or self.settings.default_redirect
        
        async def dependency(request: Request) -> Actor:
            session = await self.get_session()
            decision = evaluate_protected_route(
                session,
                required_permission=required_permission,
                allowed_roles=roles,
                redirect_to=target,
                login_path=self.settings.login_path,
                onboarding_path=self.settings.onboarding_path,
                require_onboarding=require_onboarding,
                current_path=request.url.path,
            )
            self._raise_for(decision)
            return session.get_current_actor()
        
        return dependency


def register_guard_handlers(app: FastAPI) -> None:
    """Register exception handlers for guard redirects and library errors."""
    
    @app.exception_handler(GuardRedirect)
    async def guard_redirect_handler(request: Request, exc: GuardRedirect):
        logger.debug(f"Guard redirect from {request.url.path} to {exc.path}: {exc.reason}")
        return RedirectResponse(url=exc.path, status_code=status.HTTP_303_SEE_OTHER)
    
    @app.exception_handler(PortalCommonsError)
    async def portal_error_handler(request: Request, exc: PortalCommonsError):
        status_code = get_http_status_code(exc)
        if status_code >= 500:
            logger.error(f"{exc.__class__.__name__} on {request.url.path}: {exc.message}")
        else:
            logger.warning(f"{exc.__class__.__name__} on {request.url.path}: {exc.message}")
        return JSONResponse(status_code=status_code, content=create_error_response(exc))
    
    logger.info("Configured guard exception handlers")
