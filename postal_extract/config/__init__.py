"""Configuration management module for the postal address extractor."""

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .loader import load_config, validate_config_file
from .models import (
    AppConfig,
    ExtractionConfig,
    FetchConfig,
    LogFormat,
    LogLevel,
    LoggingConfig,
    ReferenceTablesConfig,
)

__all__ = [
    # Main loader functions
    "load_config",
    "validate_config_file",
    "load_environment_config",
    # Configuration models
    "AppConfig",
    "ExtractionConfig",
    "ReferenceTablesConfig",
    "FetchConfig",
    "LoggingConfig",
    "EnvironmentConfig",
    # Enums
    "LogLevel",
    "LogFormat",
    # Exceptions
    "ConfigurationError",
]
