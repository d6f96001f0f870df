"""Session storage collaborators.

Opaque key/value persistence for the serialized actor record. The provider
only ever stores one record under one key; stores do not interpret it.
"""

import asyncio
import logging
import re
from pathlib import Path
from typing import Dict, Optional, Protocol, runtime_checkable

import redis.asyncio as redis
from redis.exceptions import RedisError

from ....core.exceptions import SessionStoreError

logger = logging.getLogger(__name__)


@runtime_checkable
class SessionStore(Protocol):
    """Protocol for actor record persistence."""
    
    async def load(self, key: str) -> Optional[str]:
        """Return the stored record, or None when absent."""
        ...
    
    async def save(self, key: str, value: str) -> None:
        """Store or replace the record."""
        ...
    
    async def delete(self, key: str) -> None:
        """Remove the record if present."""
        ...


class MemorySessionStore:
    """In-process store; survives provider instances, not process restarts."""
    
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._records: Dict[str, str] = dict(initial or {})
    
    async def load(self, key: str) -> Optional[str]:
        return self._records.get(key)
    
    async def save(self, key: str, value: str) -> None:
        self._records[key] = value
    
    async def delete(self, key: str) -> None:
        self._records.pop(key, None)
    
    def __contains__(self, key: str) -> bool:
        return key in self._records


class FileSessionStore:
    """One JSON file per key under ``directory``."""
    
    _SAFE_KEY = re.compile(r"^[A-Za-z0-9_.:-]+$")
    
    def __init__(self, directory: Path):
        self.directory = Path(directory)
    
    def _path(self, key: str) -> Path:
        if not self._SAFE_KEY.match(key):
            raise SessionStoreError(f"Invalid session key: {key!r}")
        return self.directory / f"{key.replace(':', '_')}.json"
    
    def _read(self, path: Path) -> Optional[str]:
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")
    
    def _write(self, path: Path, value: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_suffix(".tmp")
        tmp_path.write_text(value, encoding="utf-8")
        tmp_path.replace(path)
    
    async def load(self, key: str) -> Optional[str]:
        path = self._path(key)
        try:
            return await asyncio.to_thread(self._read, path)
        except OSError as e:
            logger.error(f"Failed to read session file {path}: {e}")
            raise SessionStoreError(f"Session file read failed: {e}") from e
    
    async def save(self, key: str, value: str) -> None:
        path = self._path(key)
        try:
            await asyncio.to_thread(self._write, path, value)
        except OSError as e:
            logger.error(f"Failed to write session file {path}: {e}")
            raise SessionStoreError(f"Session file write failed: {e}") from e
    
    async def delete(self, key: str) -> None:
        path = self._path(key)
        try:
            await asyncio.to_thread(path.unlink, True)
        except OSError as e:
            logger.error(f"Failed to delete session file {path}: {e}")
            raise SessionStoreError(f"Session file delete failed: {e}") from e


class RedisSessionStore:
    """Redis-backed store using ``redis.asyncio``."""
    
    def __init__(
        self,
        redis_url: str = "redis://localhost:6379",
        key_prefix: str = "portal_session",
        ttl_seconds: Optional[int] = None,
        client: Optional[redis.Redis] = None,
    ):
        self.redis_url = redis_url
        self.key_prefix = key_prefix
        self.ttl_seconds = ttl_seconds
        self._redis: Optional[redis.Redis] = client
    
    async def __aenter__(self):
        """Async context manager entry."""
        await self.connect()
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.disconnect()
    
    async def connect(self) -> None:
        """Connect to Redis."""
        if self._redis is not None:
            return
        try:
            self._redis = redis.from_url(self.redis_url, decode_responses=True)
            await self._redis.ping()
            logger.info("Connected to Redis for session storage")
        except (RedisError, ValueError, OSError) as e:
            self._redis = None
            logger.error(f"Failed to connect to Redis: {e}")
            raise SessionStoreError(f"Redis connection failed: {e}") from e
    
    async def disconnect(self) -> None:
        """Disconnect from Redis."""
        if self._redis:
            await self._redis.aclose()
            self._redis = None
            logger.info("Disconnected from Redis")
    
    async def _client(self) -> redis.Redis:
        if self._redis is None:
            await self.connect()
        return self._redis
    
    def _make_key(self, key: str) -> str:
        """Add prefix to storage key."""
        return f"{self.key_prefix}:{key}"
    
    async def load(self, key: str) -> Optional[str]:
        client = await self._client()
        try:
            value = await client.get(self._make_key(key))
        except RedisError as e:
            logger.error(f"Failed to load session {key}: {e}")
            raise SessionStoreError(f"Redis read failed: {e}") from e
        if isinstance(value, bytes):
            value = value.decode("utf-8")
        return value
    
    async def save(self, key: str, value: str) -> None:
        client = await self._client()
        try:
            await client.set(self._make_key(key), value, ex=self.ttl_seconds)
        except RedisError as e:
            logger.error(f"Failed to save session {key}: {e}")
            raise SessionStoreError(f"Redis write failed: {e}") from e
    
    async def delete(self, key: str) -> None:
        client = await self._client()
        try:
            await client.delete(self._make_key(key))
        except RedisError as e:
            logger.error(f"Failed to delete session {key}: {e}")
            raise SessionStoreError(f"Redis delete failed: {e}") from e
