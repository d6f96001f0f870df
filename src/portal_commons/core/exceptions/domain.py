"""Domain exceptions for portal-commons.

Authorization denials are not represented here: every permission check answers
with a boolean. Only lifecycle violations and session problems produce an
explicit error signal.
"""

from typing import Any, Optional

from .base import PortalCommonsError


# Configuration Errors
class ConfigurationError(PortalCommonsError):
    """Raised when portal configuration is invalid or incomplete."""
    
    code = "CONFIGURATION_ERROR"


# Content Lifecycle Errors
class LifecycleError(PortalCommonsError):
    """Base exception for content lifecycle errors."""
    
    code = "LIFECYCLE_ERROR"


class InvalidTransitionError(LifecycleError):
    """Raised when a status change is not declared in the kind's transition table."""
    
    code = "INVALID_TRANSITION"
    
    def __init__(
        self,
        kind: Any,
        from_status: Any,
        to_status: Any,
        message: Optional[str] = None,
    ):
        kind_value = getattr(kind, "value", kind)
        from_value = getattr(from_status, "value", from_status)
        to_value = getattr(to_status, "value", to_status)
        super().__init__(
            message or f"Cannot move {kind_value} from '{from_value}' to '{to_value}'",
            details={
                "kind": kind_value,
                "from_status": from_value,
                "to_status": to_value,
            },
        )
        self.kind = kind
        self.from_status = from_status
        self.to_status = to_status


class UnknownActionError(InvalidTransitionError):
    """Raised when a named lifecycle action is not available from the current status."""
    
    code = "UNKNOWN_ACTION"
    
    def __init__(self, kind: Any, from_status: Any, action: str):
        kind_value = getattr(kind, "value", kind)
        from_value = getattr(from_status, "value", from_status)
        super().__init__(
            kind,
            from_status,
            None,
            message=f"Action '{action}' is not available for {kind_value} in status '{from_value}'",
        )
        self.action = action
        self.details["action"] = action


# Session Errors
class SessionError(PortalCommonsError):
    """Base exception for identity/session errors."""
    
    code = "SESSION_ERROR"


class SessionCorruptError(SessionError):
    """Raised when a persisted actor record cannot be parsed."""
    
    code = "SESSION_CORRUPT"


class SessionStoreError(SessionError):
    """Raised when the session storage backend fails."""
    
    code = "SESSION_STORE_UNAVAILABLE"


class InvalidStatusError(LifecycleError, ValueError):
    """Raised when a status value does not belong to the content kind."""
    
    code = "INVALID_STATUS"
    
    def __init__(self, kind: Any, status: Any):
        kind_value = getattr(kind, "value", kind)
        status_value = getattr(status, "value", status)
        super().__init__(
            f"'{status_value}' is not a {kind_value} status",
            details={"kind": kind_value, "status": status_value},
        )
        self.kind = kind
        self.status = status
