"""Tests for the exception hierarchy and HTTP status mapping."""

import pytest

from portal_commons.core.exceptions import (
    HTTP_STATUS_MAP,
    ConfigurationError,
    InvalidStatusError,
    InvalidTransitionError,
    LifecycleError,
    PortalCommonsError,
    SessionCorruptError,
    SessionError,
    SessionStoreError,
    UnknownActionError,
    create_error_response,
    get_http_status_code,
)
from portal_commons.features.content.entities import CampaignStatus, ContentKind


class TestHierarchy:
    """Exception class relationships."""
    
    def test_all_derive_from_base(self):
        for exc_type in HTTP_STATUS_MAP:
            assert issubclass(exc_type, PortalCommonsError)
    
    def test_lifecycle_family(self):
        assert issubclass(InvalidTransitionError, LifecycleError)
        assert issubclass(UnknownActionError, InvalidTransitionError)
        assert issubclass(InvalidStatusError, ValueError)
    
    def test_session_family(self):
        assert issubclass(SessionCorruptError, SessionError)
        assert issubclass(SessionStoreError, SessionError)
    
    def test_default_error_code(self):
        error = ConfigurationError("bad config")
        assert error.error_code == "CONFIGURATION_ERROR"
        assert error.details == {}
        assert str(error) == "bad config"
    
    @pytest.mark.parametrize("error,code", [
        (PortalCommonsError("generic"), "PORTAL_ERROR"),
        (SessionStoreError("down"), "SESSION_STORE_UNAVAILABLE"),
        (SessionCorruptError("bad record"), "SESSION_CORRUPT"),
        (UnknownActionError(ContentKind.CAMPAIGN, CampaignStatus.DRAFT, "send"), "UNKNOWN_ACTION"),
        (InvalidStatusError(ContentKind.CAMPAIGN, "pending"), "INVALID_STATUS"),
    ])
    def test_class_codes(self, error, code):
        assert error.error_code == code
    
    def test_explicit_code_and_details_copy(self):
        details = {"key": "agency_user"}
        error = SessionError("gone", error_code="SESSION_EXPIRED", details=details)
        details["key"] = "other"
        assert error.error_code == "SESSION_EXPIRED"
        assert error.details == {"key": "agency_user"}


class TestHttpMapping:
    """Status codes resolved through the MRO."""
    
    @pytest.mark.parametrize("error,status", [
        (InvalidTransitionError(ContentKind.CAMPAIGN, CampaignStatus.DRAFT, CampaignStatus.SENT), 409),
        (UnknownActionError(ContentKind.CAMPAIGN, CampaignStatus.DRAFT, "send"), 409),
        (InvalidStatusError(ContentKind.CAMPAIGN, "pending"), 422),
        (SessionCorruptError("bad record"), 500),
        (SessionStoreError("down"), 503),
        (ConfigurationError("bad"), 500),
        (PortalCommonsError("generic"), 500),
    ])
    def test_status_codes(self, error, status):
        assert get_http_status_code(error) == status
    
    def test_unmapped_subclass_uses_parent(self):
        class CustomLifecycleError(LifecycleError):
            pass
        
        assert get_http_status_code(CustomLifecycleError("x")) == 409
    
    def test_foreign_exception_defaults_to_500(self):
        assert get_http_status_code(RuntimeError("boom")) == 500


class TestErrorResponse:
    """Standardized error payloads."""
    
    def test_invalid_transition_payload(self):
        error = InvalidTransitionError(ContentKind.CAMPAIGN, CampaignStatus.DRAFT, CampaignStatus.SENT)
        assert create_error_response(error) == {
            "error": {
                "code": "INVALID_TRANSITION",
                "message": "Cannot move campaign from 'draft' to 'sent'",
                "details": {"kind": "campaign", "from_status": "draft", "to_status": "sent"},
                "type": "InvalidTransitionError",
            }
        }
    
    def test_unknown_action_payload(self):
        error = UnknownActionError(ContentKind.CAMPAIGN, CampaignStatus.DRAFT, "send")
        payload = create_error_response(error)["error"]
        assert payload["details"]["action"] == "send"
        assert payload["details"]["to_status"] is None
        assert "send" in payload["message"]
