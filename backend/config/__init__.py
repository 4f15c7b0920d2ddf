"""
Configuration module.

This module provides centralized configuration management with:
- Environment-specific settings
- Type-safe configuration
- Logging setup
"""

from .settings import (
    Settings,
    Environment,
    LogLevel,
    SecuritySettings,
    ErrorHandlingSettings,
    get_settings,
    create_settings
)

from .logging_config import (
    setup_logging,
    get_api_logger,
    get_error_logger,
    get_factory_logger
)

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "SecuritySettings",
    "ErrorHandlingSettings",
    "get_settings",
    "create_settings",
    "setup_logging",
    "get_api_logger",
    "get_error_logger",
    "get_factory_logger"
]
