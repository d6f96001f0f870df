"""
Configuration management for portal-commons.

Settings are read from the environment (prefix ``PORTAL_``) and an optional
``.env`` file.
"""
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import RoutePaths, SessionBackend, SessionDefaults


class PortalSettings(BaseSettings):
    """Settings for the authorization core and its session provider."""
    
    model_config = SettingsConfigDict(
        env_prefix="PORTAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    # Session Storage Configuration
    session_backend: SessionBackend = Field(default=SessionBackend.MEMORY)
    session_storage_key: str = Field(default=SessionDefaults.STORAGE_KEY)
    session_file_dir: Path = Field(default=Path(".portal_sessions"))
    session_ttl_seconds: Optional[int] = Field(default=None)
    session_restore_timeout: float = Field(default=SessionDefaults.RESTORE_TIMEOUT_SECONDS)
    
    # Redis Configuration
    redis_url: Optional[str] = Field(default=None)
    redis_key_prefix: str = Field(default=SessionDefaults.REDIS_KEY_PREFIX)
    
    # Navigation Configuration
    login_path: str = Field(default=RoutePaths.LOGIN)
    onboarding_path: str = Field(default=RoutePaths.ONBOARDING)
    default_redirect: str = Field(default=RoutePaths.HOME)
    
    @field_validator("session_restore_timeout")
    @classmethod
    def _positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("session_restore_timeout must be positive")
        return value


@lru_cache()
def get_settings() -> PortalSettings:
    """Get cached settings instance."""
    return PortalSettings()
