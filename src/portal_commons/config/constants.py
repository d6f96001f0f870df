"""Constants and enums for portal-commons."""

from enum import Enum
from typing import Final


class SessionBackend(str, Enum):
    """Storage backends for the persisted actor record."""
    
    MEMORY = "memory"
    FILE = "file"
    REDIS = "redis"


class SessionDefaults:
    """Session defaults shared with the portal front end."""
    
    STORAGE_KEY: Final[str] = "agency_user"
    # The front end resolves its stored user after a 100 ms window
    RESTORE_TIMEOUT_SECONDS: Final[float] = 0.1
    REDIS_KEY_PREFIX: Final[str] = "portal_session"


class RoutePaths:
    """Navigation targets used by route guards."""
    
    HOME: Final[str] = "/"
    LOGIN: Final[str] = "/login"
    ONBOARDING: Final[str] = "/onboarding"
