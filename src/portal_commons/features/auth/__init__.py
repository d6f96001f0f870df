"""Identity and session management.

Provides the ``Actor`` entity, session storage backends and the
``SessionProvider`` that owns the current actor.
"""

from .entities import Actor
from .repositories import (
    FileSessionStore,
    MemorySessionStore,
    RedisSessionStore,
    SessionStore,
    create_session_store,
)
from .services import SessionListener, SessionProvider

__all__ = [
    "Actor",
    "SessionStore",
    "MemorySessionStore",
    "FileSessionStore",
    "RedisSessionStore",
    "create_session_store",
    "SessionProvider",
    "SessionListener",
]
