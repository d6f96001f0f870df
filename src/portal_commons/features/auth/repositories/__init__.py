"""Session storage implementations."""

from .factory import create_session_store
from .session_store import FileSessionStore, MemorySessionStore, RedisSessionStore, SessionStore

__all__ = [
    "SessionStore",
    "MemorySessionStore",
    "FileSessionStore",
    "RedisSessionStore",
    "create_session_store",
]
