"""Configuration schema models using Pydantic."""

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


class ExtractionConfig(BaseModel):
    """Candidate generation and dispatch settings."""

    window_size: int = Field(
        10, ge=1, description="Number of consecutive words in each candidate window"
    )
    max_workers: Optional[int] = Field(
        None,
        ge=1,
        description="Bounded worker pool size (null = one thread per candidate)",
    )


class ReferenceTablesConfig(BaseModel):
    """Locations of the state and street-suffix tables.

    Both paths are optional; the packaged US tables are used when unset.
    """

    states_path: Optional[Path] = Field(
        None, description="YAML file listing recognized state names"
    )
    street_suffixes_path: Optional[Path] = Field(
        None, description="YAML file listing recognized street suffixes"
    )


class FetchConfig(BaseModel):
    """HTTP settings for page retrieval."""

    http_request_timeout: int = Field(
        30, ge=5, le=300, description="Request timeout for page fetches (seconds)"
    )
    user_agent: str = Field(
        "PostalAddressExtractor/1.0",
        min_length=1,
        description="User-Agent string for HTTP requests",
    )

    @field_validator("user_agent")
    @classmethod
    def strip_user_agent(cls, v: str) -> str:
        """Strip whitespace from user agent."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("user_agent cannot be empty")
        return stripped


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True}


class AppConfig(BaseModel):
    """Root configuration object for the postal address extractor."""

    extraction: ExtractionConfig = Field(
        default_factory=ExtractionConfig, description="Extraction engine settings"
    )
    reference_tables: ReferenceTablesConfig = Field(
        default_factory=ReferenceTablesConfig, description="Reference table sources"
    )
    fetch: FetchConfig = Field(default_factory=FetchConfig, description="HTTP settings")
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
