"""Exceptions module for portal-commons."""

from .base import PortalCommonsError, create_error_response
from .domain import (
    ConfigurationError,
    LifecycleError,
    InvalidTransitionError,
    UnknownActionError,
    InvalidStatusError,
    SessionError,
    SessionCorruptError,
    SessionStoreError,
)
from .http_mapping import HTTP_STATUS_MAP, get_http_status_code

__all__ = [
    "PortalCommonsError",
    "get_http_status_code",
    "create_error_response",
    "HTTP_STATUS_MAP",
    "ConfigurationError",
    "LifecycleError",
    "InvalidTransitionError",
    "UnknownActionError",
    "InvalidStatusError",
    "SessionError",
    "SessionCorruptError",
    "SessionStoreError",
]
