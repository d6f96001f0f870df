"""Tests for the Actor entity and its stored record format."""

import json

import pytest
from pydantic import ValidationError

from portal_commons.core.exceptions import SessionCorruptError
from portal_commons.features.auth.entities.actor import Actor
from portal_commons.features.permissions.entities.role import Role


class TestActor:
    """Test cases for Actor."""
    
    def test_actor_is_frozen(self, client_admin):
        with pytest.raises(ValidationError):
            client_admin.role = Role.AGENCY_ADMIN
    
    def test_actor_is_hashable(self, client_admin):
        assert hash(client_admin) == hash(client_admin.model_copy())
    
    def test_client_roles_need_client_id(self):
        with pytest.raises(ValidationError):
            Actor(id="u1", name="No Client", email="n@example.com", role=Role.CLIENT_USER)
    
    def test_agency_roles_without_client_id(self, agency_staff):
        assert agency_staff.client_id is None
        assert agency_staff.is_agency_user
        assert not agency_staff.is_client_user
    
    def test_role_must_be_known(self):
        with pytest.raises(ValidationError):
            Actor(id="u1", name="X", email="x@example.com", role="OWNER")
    
    def test_display_helpers(self, client_admin):
        assert client_admin.role_display_name == "Client Admin"
        assert client_admin.display_initials == "CC"
        with_initials = client_admin.model_copy(update={"initials": "CX"})
        assert with_initials.display_initials == "CX"


class TestActorRecord:
    """Serialized form used by session stores."""
    
    def test_record_uses_camel_case(self, client_admin):
        data = json.loads(client_admin.to_record())
        assert data["clientId"] == "c1"
        assert data["hasCompletedOnboarding"] is True
        assert data["role"] == "CLIENT_ADMIN"
        assert "initials" not in data
    
    def test_record_round_trip(self, client_admin):
        assert Actor.from_record(client_admin.to_record()) == client_admin
    
    def test_front_end_record_loads(self):
        raw = json.dumps({
            "id": "7",
            "name": "Jordan Lee",
            "email": "jordan@client.example",
            "role": "CLIENT_USER",
            "clientId": "client-9",
            "initials": "JL",
            "hasCompletedOnboarding": False,
            "avatarUrl": "ignored",
        })
        actor = Actor.from_record(raw)
        assert actor.client_id == "client-9"
        assert actor.has_completed_onboarding is False
        assert actor.role is Role.CLIENT_USER
    
    @pytest.mark.parametrize("raw", [
        "not json",
        "{}",
        '{"id": "1", "name": "A", "email": "a@x", "role": "WIZARD"}',
        '{"id": "1", "name": "A", "email": "a@x", "role": "CLIENT_ADMIN"}',
        "[]",
    ])
    def test_corrupt_records(self, raw):
        with pytest.raises(SessionCorruptError):
            Actor.from_record(raw)
