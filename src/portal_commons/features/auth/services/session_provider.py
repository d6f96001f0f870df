"""Session provider: owns the current actor for one portal session.

The provider starts in a resolving state. ``restore()`` reads the stored record
within a bounded window and then leaves the resolving state for good; guards
show a loading indicator until then instead of redirecting to the login page.
"""

import asyncio
import logging
from typing import Callable, List, Optional

from ....config.settings import PortalSettings, get_settings
from ....core.exceptions import SessionCorruptError, SessionStoreError
from ...permissions.services.capabilities import Capabilities, derive_capabilities
from ..entities.actor import Actor
from ..repositories.session_store import SessionStore

logger = logging.getLogger(__name__)

SessionListener = Callable[[Optional[Actor]], None]


class SessionProvider:
    """Single-writer holder of the current actor."""
    
    def __init__(self, store: SessionStore, settings: Optional[PortalSettings] = None):
        self.store = store
        self.settings = settings or get_settings()
        self.storage_key = self.settings.session_storage_key
        self.restore_timeout = self.settings.session_restore_timeout
        
        self._actor: Optional[Actor] = None
        self._is_resolving = True
        self._version = 0
        self._listeners: List[SessionListener] = []
        self._restore_task: Optional[asyncio.Task] = None
    
    @property
    def is_resolving(self) -> bool:
        """True until the initial restore has finished."""
        return self._is_resolving
    
    @property
    def is_authenticated(self) -> bool:
        return self._actor is not None
    
    @property
    def capabilities(self) -> Capabilities:
        return derive_capabilities(self._actor)
    
    def get_current_actor(self) -> Optional[Actor]:
        return self._actor
    
    async def restore(self) -> Optional[Actor]:
        """Load the persisted actor, bounded by ``restore_timeout``.
        
        Never raises for store problems: a missing, unreadable or corrupt
        record leaves the session anonymous. Only the first call does any
        work; later calls return the current actor.
        """
        if not self._is_resolving:
            return self._actor
        
        version = self._version
        try:
            actor = await self._load_actor()
            # A sign-in or sign-out during the restore window wins over the stored record
            if version == self._version and actor is not None:
                self._actor = actor
                logger.info(f"Restored session for {actor}")
        finally:
            self._is_resolving = False
            self._notify()
        return self._actor
    
    async def _load_actor(self) -> Optional[Actor]:
        try:
            raw = await asyncio.wait_for(self.store.load(self.storage_key), self.restore_timeout)
        except asyncio.TimeoutError:
            logger.warning(f"Session restore timed out after {self.restore_timeout}s")
            return None
        except SessionStoreError as e:
            logger.error(f"Session restore failed: {e.message}")
            return None
        except Exception as e:
            logger.error(f"Session store failed during restore: {e}", exc_info=True)
            return None
        
        if not raw:
            return None
        try:
            return Actor.from_record(raw)
        except SessionCorruptError as e:
            logger.warning(f"Discarding corrupt session record '{self.storage_key}': {e.message}")
            await self._discard_record()
            return None
    
    def start_restore(self) -> asyncio.Task:
        """Schedule ``restore()`` without waiting for it."""
        if self._restore_task is None:
            self._restore_task = asyncio.get_running_loop().create_task(self.restore())
        return self._restore_task
    
    async def set_current_actor(self, actor: Optional[Actor]) -> None:
        """Replace the current actor and persist (or delete) its record.
        
        The in-memory actor is updated and listeners are notified before the
        store is written.
        
        Raises:
            SessionStoreError: if the record could not be persisted
        """
        self._actor = actor
        self._version += 1
        self._notify()
        
        if actor is None:
            await self.store.delete(self.storage_key)
            logger.info("Session cleared")
        else:
            await self.store.save(self.storage_key, actor.to_record())
            logger.info(f"Session set for {actor}")
    
    async def sign_out(self) -> None:
        await self.set_current_actor(None)
    
    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register ``listener`` for actor changes; returns an unsubscribe callable."""
        self._listeners.append(listener)
        
        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)
        
        return unsubscribe
    
    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._actor)
    
    async def _discard_record(self) -> None:
        try:
            await self.store.delete(self.storage_key)
        except SessionStoreError as e:
            logger.error(f"Failed to discard corrupt session record: {e.message}")
        except Exception as e:
            logger.error(f"Failed to discard corrupt session record: {e}", exc_info=True)
