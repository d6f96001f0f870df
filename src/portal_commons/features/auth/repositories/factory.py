"""Build the configured session store."""

from ....config.constants import SessionBackend
from ....config.settings import PortalSettings
from ....core.exceptions import ConfigurationError
from .session_store import FileSessionStore, MemorySessionStore, RedisSessionStore, SessionStore


def create_session_store(settings: PortalSettings) -> SessionStore:
    """Create the store selected by ``settings.session_backend``."""
    if settings.session_backend is SessionBackend.MEMORY:
        return MemorySessionStore()
    
    if settings.session_backend is SessionBackend.FILE:
        return FileSessionStore(settings.session_file_dir)
    
    if settings.session_backend is SessionBackend.REDIS:
        if not settings.redis_url:
            raise ConfigurationError(
                "PORTAL_REDIS_URL is required for the redis session backend",
                details={"session_backend": settings.session_backend.value},
            )
        return RedisSessionStore(
            redis_url=settings.redis_url,
            key_prefix=settings.redis_key_prefix,
            ttl_seconds=settings.session_ttl_seconds,
        )
    
    raise ConfigurationError(f"Unsupported session backend: {settings.session_backend}")
