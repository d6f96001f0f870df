"""Tests for the capability facade."""

import pytest

from portal_commons.features.permissions.entities import Permission, Role
from portal_commons.features.permissions.services.capabilities import (
    ANONYMOUS_CAPABILITIES,
    Capabilities,
    derive_capabilities,
)


class TestAnonymousCapabilities:
    """With no actor every check is False."""
    
    def test_derive_none_is_anonymous(self):
        assert derive_capabilities(None) is ANONYMOUS_CAPABILITIES
    
    def test_every_check_false(self):
        caps = ANONYMOUS_CAPABILITIES
        assert caps.is_authenticated is False
        assert caps.role is None
        assert caps.can(Permission.VIEW_ANALYTICS) is False
        assert caps.can_any(Permission.VIEW_ANALYTICS, Permission.VIEW_OWN_CLIENT) is False
        assert caps.can_all(Permission.VIEW_ANALYTICS) is False
        assert caps.can_edit_content("u1", "draft") is False
        assert caps.can_delete_content("u1", "draft") is False
        assert caps.can_approve_content() is False
        assert caps.can_reject_content() is False
        assert caps.can_view_all_clients() is False
        assert caps.can_manage_users("c1") is False
        assert caps.has_role(*Role) is False
        assert caps.is_agency_user() is False
        assert caps.is_client_user() is False
        assert caps.can_access_client("c1") is False


class TestActorCapabilities:
    """Checks close over the actor's role, id and client id."""
    
    def test_staff_edits_own_draft(self, agency_staff):
        caps = derive_capabilities(agency_staff)
        assert caps.can_edit_content(agency_staff.id, "draft") is True
        assert caps.can_edit_content(agency_staff.id, "approved") is False
        assert caps.can_edit_content("someone-else", "draft") is False
        assert caps.can_delete_content(agency_staff.id, "rejected") is True
    
    def test_client_admin(self, client_admin):
        caps = derive_capabilities(client_admin)
        assert caps.can_approve_content() is True
        assert caps.can_reject_content() is True
        assert caps.can_manage_users("c1") is True
        assert caps.can_manage_users("c2") is False
        assert caps.can_manage_users() is False
        assert caps.is_client_user() is True
        assert caps.is_agency_user() is False
    
    def test_client_user(self, client_user):
        caps = derive_capabilities(client_user)
        assert caps.can_approve_content() is False
        assert caps.can(Permission.VIEW_ANALYTICS) is True
        assert caps.can_all(Permission.VIEW_ANALYTICS, Permission.VIEW_OWN_CLIENT) is True
        assert caps.can_all() is False
        assert caps.has_role(Role.CLIENT_USER, Role.CLIENT_ADMIN) is True
        assert caps.has_role(Role.AGENCY_ADMIN) is False
    
    def test_client_scope(self, client_user, agency_staff):
        assert derive_capabilities(client_user).can_access_client("c1") is True
        assert derive_capabilities(client_user).can_access_client("c2") is False
        assert derive_capabilities(client_user).can_access_client(None) is False
        assert derive_capabilities(agency_staff).can_access_client("c2") is True
    
    def test_agency_admin(self, agency_admin):
        caps = derive_capabilities(agency_admin)
        assert caps.can_edit_content() is True
        assert caps.can_manage_users() is True
        assert caps.can_view_all_clients() is True
        assert caps.role is Role.AGENCY_ADMIN


class TestMemoization:
    """Bundles are stable per actor value."""
    
    def test_same_actor_same_bundle(self, client_admin):
        assert derive_capabilities(client_admin) is derive_capabilities(client_admin)
    
    def test_changed_actor_new_bundle(self, client_admin):
        updated = client_admin.model_copy(update={"has_completed_onboarding": False})
        first = derive_capabilities(client_admin)
        second = derive_capabilities(updated)
        assert first is not second
        assert second.actor is updated
    
    def test_bundle_is_frozen(self, client_admin):
        caps = derive_capabilities(client_admin)
        with pytest.raises(AttributeError):
            caps.actor = None
    
    def test_direct_construction(self, client_user):
        assert Capabilities(client_user).can(Permission.VIEW_OWN_CLIENT) is True
