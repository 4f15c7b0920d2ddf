"""
Configuration management.

This module provides:
- Environment-specific configuration
- Pydantic-based settings validation
- Centralized configuration access
"""

import os
from enum import Enum
from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Environment(str, Enum):
    """Application environment types."""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Available log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class SecuritySettings(BaseSettings):
    """Security configuration settings."""

    # CORS settings
    allow_origins: List[str] = Field(default=["*"], description="Allowed CORS origins")
    allow_credentials: bool = Field(default=True, description="Allow credentials")
    allow_methods: List[str] = Field(default=["*"], description="Allowed HTTP methods")
    allow_headers: List[str] = Field(default=["*"], description="Allowed headers")

    model_config = {
        "env_prefix": "SECURITY_"
    }


class ErrorHandlingSettings(BaseSettings):
    """Error boundary configuration settings."""

    fallback_enabled: bool = Field(
        default=True,
        description="Answer unclassified exceptions with a generic 500 envelope instead of re-raising"
    )
    log_traceback: bool = Field(default=True, description="Attach tracebacks to failure logs")
    trace_header: str = Field(default="X-Trace-Id", description="Response header carrying the trace ID")

    @field_validator('trace_header')
    def validate_trace_header(cls, v):
        if not v.strip():
            raise ValueError('Trace header name must not be empty')
        return v.strip()

    model_config = {
        "env_prefix": "ERROR_"
    }


class Settings(BaseSettings):
    """Main application settings."""

    # Application settings
    app_name: str = Field(default="Unified Result API", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Environment = Field(default=Environment.DEVELOPMENT, description="Application environment")
    debug: bool = Field(default=True, description="Debug mode")

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, description="Server port")

    # Logging settings
    log_level: LogLevel = Field(default=LogLevel.INFO, description="Log level")
    log_file: bool = Field(default=True, description="Enable file logging")

    # Sub-configurations
    security: SecuritySettings = Field(default_factory=SecuritySettings)
    error_handling: ErrorHandlingSettings = Field(default_factory=ErrorHandlingSettings)

    @field_validator('environment', mode='before')
    def validate_environment(cls, v):
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    @field_validator('log_level', mode='before')
    def validate_log_level(cls, v):
        if isinstance(v, str):
            return LogLevel(v.upper())
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == Environment.TESTING

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore"
    }


@lru_cache()
def get_settings() -> Settings:
    """Get application settings (cached)."""
    return Settings()


def create_settings(environment: Optional[str] = None) -> Settings:
    """Create settings for an environment, bypassing the cache."""
    if environment:
        os.environ["ENVIRONMENT"] = environment

    settings = Settings()
    if settings.is_production:
        settings.debug = False
    elif settings.is_testing:
        settings.log_file = False
    return settings
