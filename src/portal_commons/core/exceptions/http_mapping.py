"""HTTP status code mapping for exceptions."""

from typing import Dict, Type

from .base import PortalCommonsError
from .domain import (
    ConfigurationError,
    InvalidStatusError,
    InvalidTransitionError,
    LifecycleError,
    SessionCorruptError,
    SessionError,
    SessionStoreError,
    UnknownActionError,
)


HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 409 Conflict
    InvalidTransitionError: 409,
    UnknownActionError: 409,
    LifecycleError: 409,
    
    # 422 Unprocessable Entity
    InvalidStatusError: 422,
    
    # 500 Internal Server Error
    SessionCorruptError: 500,
    SessionError: 500,
    ConfigurationError: 500,
    
    # 503 Service Unavailable
    SessionStoreError: 503,
    
    # Default for PortalCommonsError
    PortalCommonsError: 500,
}


def get_http_status_code(exception: Exception) -> int:
    """Resolve the HTTP status for an exception by walking its MRO."""
    for exception_type in type(exception).__mro__:
        if exception_type in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exception_type]
    return 500
