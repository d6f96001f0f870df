"""Root error type for portal-commons.

Permission checks answer with booleans and never raise. Errors are kept for
content lifecycle violations, session storage trouble and bad configuration.
Every error class carries a stable upper-case ``code`` that the HTTP layer
returns to clients next to the human-readable message.
"""

from typing import Any, Dict, Optional


class PortalCommonsError(Exception):
    """Root of every error raised by portal-commons."""
    
    code = "PORTAL_ERROR"
    
    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.code
        self.details = dict(details) if details else {}
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.error_code,
            "message": self.message,
            "details": self.details,
            "type": type(self).__name__,
        }


def create_error_response(exception: PortalCommonsError) -> Dict[str, Any]:
    """JSON body for ``exception``, shaped ``{"error": {code, message, details, type}}``."""
    return {"error": exception.to_dict()}
