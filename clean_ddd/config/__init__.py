"""Application Configuration.

Uses pydantic-settings for type-safe configuration from environment variables.

Usage:
    from clean_ddd.config import get_settings, setup_logging
    settings = get_settings()
    setup_logging(settings)  # Call once at startup
"""

from .settings import Settings, get_settings
from .logging import bind_context, clear_context, get_logger, setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "setup_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
