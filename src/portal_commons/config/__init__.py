"""Configuration for portal-commons: settings, constants and logging."""

from .constants import RoutePaths, SessionBackend, SessionDefaults
from .logging_config import LoggingConfig, setup_logging
from .settings import PortalSettings, get_settings

__all__ = [
    "PortalSettings",
    "get_settings",
    "SessionBackend",
    "SessionDefaults",
    "RoutePaths",
    "LoggingConfig",
    "setup_logging",
]
