"""Session services."""

from .session_provider import SessionListener, SessionProvider

__all__ = ["SessionProvider", "SessionListener"]
