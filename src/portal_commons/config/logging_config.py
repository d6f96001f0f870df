"""Logging setup for applications embedding portal-commons.

Library modules only call ``logging.getLogger(__name__)``; nothing is
configured on import. ``setup_logging()`` installs a console handler whose
level and format come from the environment:

``LOG_LEVEL``
    Explicit level name. Wins over ``LOG_VERBOSITY``.
``LOG_VERBOSITY``
    ``QUIET``, ``NORMAL``, ``VERBOSE`` or ``DEBUG``. Defaults to ``NORMAL``.
``LOG_FORMAT``
    ``simple``, ``detailed`` or ``json``.
``ENABLE_SESSION_LOGGING``
    ``true`` to trace session restore and sign-in at DEBUG.
"""

import logging
import logging.config
import os
from typing import Any, Dict

VERBOSITY_LEVELS = {
    "QUIET": "ERROR",
    "NORMAL": "WARNING",
    "VERBOSE": "INFO",
    "DEBUG": "DEBUG",
}

LOG_FORMATS = {
    "simple": "%(asctime)s - %(levelname)s - %(message)s",
    "detailed": "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    "json": '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}


def get_log_level_from_verbosity(verbosity: str) -> str:
    """Level name for a verbosity mode; unknown modes fall back to WARNING."""
    return VERBOSITY_LEVELS.get(verbosity.upper(), "WARNING")


class LoggingConfig:
    """Builds and applies the ``dictConfig`` for the portal."""
    
    # Permission checks and guards run on every render; WARNING unless debugging
    AUTHORIZATION_MODULES = [
        "portal_commons.features.permissions",
        "portal_commons.features.guards",
    ]
    
    SESSION_MODULE = "portal_commons.features.auth"
    
    # Client libraries underneath the session stores and the HTTP layer
    ERROR_ONLY_MODULES = [
        "httpx",
        "httpcore",
        "asyncio",
        "redis",
    ]
    
    @classmethod
    def _module_logger(cls, level: str) -> Dict[str, Any]:
        return {"level": level, "handlers": ["console"], "propagate": False}
    
    @classmethod
    def build(cls) -> Dict[str, Any]:
        """The ``dictConfig`` mapping for the current environment."""
        level = (os.getenv("LOG_LEVEL") or get_log_level_from_verbosity(os.getenv("LOG_VERBOSITY", "NORMAL"))).upper()
        log_format = os.getenv("LOG_FORMAT", "simple").lower()
        trace_sessions = os.getenv("ENABLE_SESSION_LOGGING", "false").lower() == "true"
        
        loggers = {}
        for module in cls.AUTHORIZATION_MODULES:
            loggers[module] = cls._module_logger("DEBUG" if level == "DEBUG" else "WARNING")
        for module in cls.ERROR_ONLY_MODULES:
            loggers[module] = cls._module_logger("ERROR")
        if trace_sessions:
            loggers[cls.SESSION_MODULE] = cls._module_logger("DEBUG")
        
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": LOG_FORMATS.get(log_format, LOG_FORMATS["simple"]),
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": "DEBUG" if trace_sessions else level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {"level": level, "handlers": ["console"]},
            "loggers": loggers,
        }
    
    @classmethod
    def configure(cls) -> None:
        """Apply the environment-driven configuration."""
        config = cls.build()
        logging.config.dictConfig(config)
        logging.getLogger(__name__).debug(f"Logging configured at {config['root']['level']}")


def setup_logging() -> None:
    """Configure logging from the environment. Call once at application startup."""
    LoggingConfig.configure()
