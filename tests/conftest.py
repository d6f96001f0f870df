"""Pytest configuration and fixtures for portal-commons tests."""

from datetime import datetime, timezone

import pytest

from portal_commons.config.settings import PortalSettings
from portal_commons.features.auth.entities.actor import Actor
from portal_commons.features.auth.repositories.session_store import MemorySessionStore
from portal_commons.features.auth.services.session_provider import SessionProvider
from portal_commons.features.content.services.lifecycle_service import create_content_item
from portal_commons.features.content.entities.status import ContentKind
from portal_commons.features.permissions.entities.role import Role
from portal_commons.features.permissions.services.capabilities import derive_capabilities


@pytest.fixture
def fixed_time():
    """Fixed timestamp for lifecycle stamping."""
    return datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def agency_admin():
    """Agency admin actor."""
    return Actor(
        id="u-admin",
        name="Alex Admin",
        email="alex@agency.example",
        role=Role.AGENCY_ADMIN,
        has_completed_onboarding=True,
    )


@pytest.fixture
def agency_staff():
    """Agency staff actor."""
    return Actor(
        id="u-staff",
        name="Sam Staff",
        email="sam@agency.example",
        role=Role.AGENCY_STAFF,
        has_completed_onboarding=True,
    )


@pytest.fixture
def client_admin():
    """Client admin actor for client c1."""
    return Actor(
        id="u-client-admin",
        name="Casey Client",
        email="casey@client.example",
        role=Role.CLIENT_ADMIN,
        client_id="c1",
        has_completed_onboarding=True,
    )


@pytest.fixture
def client_user():
    """Read-only client user for client c1."""
    return Actor(
        id="u-client-user",
        name="Robin Reader",
        email="robin@client.example",
        role=Role.CLIENT_USER,
        client_id="c1",
        has_completed_onboarding=True,
    )


@pytest.fixture
def new_client_admin():
    """Client admin who has not finished onboarding."""
    return Actor(
        id="u-new",
        name="Nico New",
        email="nico@client.example",
        role=Role.CLIENT_ADMIN,
        client_id="c1",
    )


@pytest.fixture
def staff_capabilities(agency_staff):
    return derive_capabilities(agency_staff)


@pytest.fixture
def social_draft(agency_staff, fixed_time):
    """Draft social post authored by agency staff for client c1."""
    return create_content_item(
        ContentKind.SOCIAL_POST,
        "post-1",
        author_id=agency_staff.id,
        client_id="c1",
        title="Spring launch",
        at=fixed_time,
    )


@pytest.fixture
def test_settings(tmp_path):
    """Settings isolated from the environment."""
    return PortalSettings(
        _env_file=None,
        session_file_dir=tmp_path / "sessions",
    )


@pytest.fixture
def memory_store():
    return MemorySessionStore()


@pytest.fixture
def session_provider(memory_store, test_settings):
    """Provider over an empty in-memory store, not yet restored."""
    return SessionProvider(memory_store, test_settings)
