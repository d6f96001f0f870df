"""Tests for settings and logging configuration."""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from portal_commons.config.constants import SessionBackend
from portal_commons.config.logging_config import LoggingConfig, get_log_level_from_verbosity
from portal_commons.config.settings import PortalSettings, get_settings


class TestPortalSettings:
    """Test cases for PortalSettings."""
    
    def test_defaults(self, monkeypatch):
        for name in ("PORTAL_SESSION_BACKEND", "PORTAL_SESSION_STORAGE_KEY", "PORTAL_SESSION_RESTORE_TIMEOUT"):
            monkeypatch.delenv(name, raising=False)
        settings = PortalSettings(_env_file=None)
        
        assert settings.session_backend is SessionBackend.MEMORY
        assert settings.session_storage_key == "agency_user"
        assert settings.session_restore_timeout == 0.1
        assert settings.session_file_dir == Path(".portal_sessions")
        assert settings.login_path == "/login"
        assert settings.onboarding_path == "/onboarding"
        assert settings.default_redirect == "/"
    
    def test_environment_prefix(self, monkeypatch):
        monkeypatch.setenv("PORTAL_SESSION_BACKEND", "redis")
        monkeypatch.setenv("PORTAL_REDIS_URL", "redis://cache:6379/0")
        monkeypatch.setenv("PORTAL_SESSION_TTL_SECONDS", "900")
        settings = PortalSettings(_env_file=None)
        
        assert settings.session_backend is SessionBackend.REDIS
        assert settings.redis_url == "redis://cache:6379/0"
        assert settings.session_ttl_seconds == 900
    
    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            PortalSettings(_env_file=None, session_restore_timeout=0)
    
    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()


class TestLoggingConfig:
    """Test cases for LoggingConfig."""
    
    @pytest.mark.parametrize("verbosity,level", [
        ("QUIET", "ERROR"),
        ("NORMAL", "WARNING"),
        ("VERBOSE", "INFO"),
        ("DEBUG", "DEBUG"),
        ("unexpected", "WARNING"),
    ])
    def test_verbosity_levels(self, verbosity, level):
        assert get_log_level_from_verbosity(verbosity) == level
    
    def test_configure_quiets_authorization_modules(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "INFO")
        monkeypatch.delenv("ENABLE_SESSION_LOGGING", raising=False)
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            LoggingConfig.configure()
            assert logging.getLogger("portal_commons.features.permissions").level == logging.WARNING
            assert logging.getLogger("redis").level == logging.ERROR
            assert root.level == logging.INFO
        finally:
            for name in LoggingConfig.AUTHORIZATION_MODULES + LoggingConfig.ERROR_ONLY_MODULES:
                module_logger = logging.getLogger(name)
                module_logger.handlers.clear()
                module_logger.setLevel(logging.NOTSET)
                module_logger.propagate = True
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
    
    def test_build_reads_format_and_session_tracing(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.setenv("LOG_VERBOSITY", "quiet")
        monkeypatch.setenv("LOG_FORMAT", "JSON")
        monkeypatch.setenv("ENABLE_SESSION_LOGGING", "true")
        config = LoggingConfig.build()
        
        assert config["root"]["level"] == "ERROR"
        assert config["formatters"]["default"]["format"].startswith("{")
        assert config["loggers"]["portal_commons.features.auth"]["level"] == "DEBUG"
        assert config["loggers"]["portal_commons.features.guards"]["level"] == "WARNING"
    
    def test_build_unknown_format_is_simple(self, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "xml")
        monkeypatch.delenv("ENABLE_SESSION_LOGGING", raising=False)
        config = LoggingConfig.build()
        
        assert config["formatters"]["default"]["format"] == "%(asctime)s - %(levelname)s - %(message)s"
        assert "portal_commons.features.auth" not in config["loggers"]
