"""Configuration models.

This module provides the Pydantic models describing how a client connects
to supervisord and how it logs.
"""

from enum import StrEnum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogLevel(StrEnum):
    """Log level threshold values.

    Values are ordered from most verbose (debug) to least verbose (error).
    """

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogFormat(StrEnum):
    """Log output format values."""

    JSON = "json"
    TEXT = "text"


class LoggingConfig(BaseModel):
    """Logging configuration section.

    Attributes:
        level: Log level threshold.
        format: Log output format.
        file: Path to log file (empty logs to stderr).
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    level: LogLevel = LogLevel.WARNING
    format: LogFormat = LogFormat.TEXT
    file: str = ""


class ClientConfig(BaseModel):
    """Connection settings for a supervisord client.

    Attributes:
        url: Base URL of the daemon's HTTP server. May embed credentials.
        username: Basic-auth user name, used when the URL has no credentials.
        password: Basic-auth password.
        timeout: Socket timeout in seconds; None waits indefinitely.
        logging: Logging settings.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    url: str = "http://localhost:9001"
    username: str | None = None
    password: str | None = Field(default=None, repr=False)
    timeout: float | None = Field(default=None, gt=0)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("url")
    @classmethod
    def _strip_url(cls, value: str) -> str:
        return value.strip()
