"""Configuration module."""

from product_catalog.config.configuration import (
    ApiConfig,
    AppConfig,
    ConfigurationError,
    DatabaseConfig,
    LoggingConfig,
    get_config,
    get_environment,
    load_config,
    reset_config,
)

__all__ = [
    "ApiConfig",
    "AppConfig",
    "ConfigurationError",
    "DatabaseConfig",
    "LoggingConfig",
    "get_config",
    "get_environment",
    "load_config",
    "reset_config",
]
