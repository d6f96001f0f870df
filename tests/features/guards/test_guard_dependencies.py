"""Tests for the FastAPI guard adapter."""

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from portal_commons.core.exceptions import InvalidTransitionError, SessionStoreError
from portal_commons.features.auth.repositories import MemorySessionStore
from portal_commons.features.auth.services.session_provider import SessionProvider
from portal_commons.features.content.entities import ContentKind, SocialPostStatus
from portal_commons.features.guards import GuardDependencies, register_guard_handlers
from portal_commons.features.permissions.entities import Permission, Role


def build_app(provider: SessionProvider) -> FastAPI:
    app = FastAPI()
    register_guard_handlers(app)
    guards = GuardDependencies(provider)
    
    @app.get("/approvals")
    async def approvals(caps=Depends(guards.require_permission(Permission.APPROVE_CONTENT))):
        return {"role": caps.role.value}
    
    @app.get("/agency")
    async def agency(caps=Depends(guards.require_roles([Role.AGENCY_ADMIN, Role.AGENCY_STAFF]))):
        return {"ok": True}
    
    @app.get("/settings")
    async def settings(actor=Depends(guards.require_route(required_permission=Permission.SYSTEM_CONFIG))):
        return {"id": actor.id}
    
    @app.get("/onboarding")
    async def onboarding(actor=Depends(guards.require_route())):
        return {"id": actor.id}
    
    @app.get("/me")
    async def me(caps=Depends(guards.get_capabilities)):
        return {"authenticated": caps.is_authenticated}
    
    @app.get("/broken")
    async def broken():
        raise InvalidTransitionError(ContentKind.SOCIAL_POST, SocialPostStatus.DRAFT, SocialPostStatus.PUBLISHED)
    
    @app.get("/store-down")
    async def store_down():
        raise SessionStoreError("backend down")
    
    return app


def client_for(actor, settings) -> TestClient:
    records = {"agency_user": actor.to_record()} if actor else {}
    provider = SessionProvider(MemorySessionStore(records), settings)
    return TestClient(build_app(provider))


class TestGuardDependencies:
    """Guard dependencies redirect or pass the actor through."""
    
    def test_client_admin_reaches_approvals(self, client_admin, test_settings):
        response = client_for(client_admin, test_settings).get("/approvals")
        assert response.status_code == 200
        assert response.json() == {"role": "CLIENT_ADMIN"}
    
    def test_client_user_redirected_home(self, client_user, test_settings):
        response = client_for(client_user, test_settings).get("/approvals", follow_redirects=False)
        assert response.status_code == 303
        assert response.headers["location"] == "/"
    
    def test_anonymous_redirected_to_login(self, test_settings):
        client = client_for(None, test_settings)
        for path in ("/approvals", "/agency", "/settings"):
            response = client.get(path, follow_redirects=False)
            assert response.status_code == 303
            assert response.headers["location"] == "/login"
    
    def test_role_dependency(self, agency_staff, client_admin, test_settings):
        assert client_for(agency_staff, test_settings).get("/agency").json() == {"ok": True}
        response = client_for(client_admin, test_settings).get("/agency", follow_redirects=False)
        assert response.headers["location"] == "/"
    
    def test_route_dependency(self, agency_admin, agency_staff, test_settings):
        assert client_for(agency_admin, test_settings).get("/settings").json() == {"id": agency_admin.id}
        response = client_for(agency_staff, test_settings).get("/settings", follow_redirects=False)
        assert response.headers["location"] == "/"
    
    def test_onboarding_redirect(self, new_client_admin, test_settings):
        client = client_for(new_client_admin, test_settings)
        response = client.get("/settings", follow_redirects=False)
        assert response.headers["location"] == "/onboarding"
        assert client.get("/onboarding").json() == {"id": new_client_admin.id}
    
    def test_capabilities_dependency(self, client_user, test_settings):
        assert client_for(client_user, test_settings).get("/me").json() == {"authenticated": True}
        assert client_for(None, test_settings).get("/me").json() == {"authenticated": False}


class TestErrorHandlers:
    """Library errors become JSON error responses."""
    
    def test_invalid_transition_is_conflict(self, test_settings):
        response = client_for(None, test_settings).get("/broken")
        assert response.status_code == 409
        body = response.json()["error"]
        assert body["code"] == "INVALID_TRANSITION"
        assert body["details"]["to_status"] == "published"
        assert body["type"] == "InvalidTransitionError"
    
    def test_store_error_is_unavailable(self, test_settings):
        response = client_for(None, test_settings).get("/store-down")
        assert response.status_code == 503
        assert response.json()["error"]["code"] == "SESSION_STORE_UNAVAILABLE"
