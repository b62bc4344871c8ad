"""Logging settings for the apiref CLI.

The CLI builds one ``LoggingConfig`` from ``--log-file`` / ``--log-level`` and
hands it to ``setup_logging``; the console sink always exists, the file sink
only when a log file was requested.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _normalize_level(value: str) -> str:
    level = value.upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Invalid log level '{value}'. Must be one of: {', '.join(LOG_LEVELS)}")
    return level


class FileLoggingConfig(BaseModel):
    """Rotating log file written next to the console output."""

    enabled: bool = False
    path: str = Field(default="apiref.log", description="Log file location")
    level: str = Field(default="INFO", description="Minimum level written to the file")
    rotation: str = Field(default="10 MB", description="loguru rotation policy")
    retention: str = Field(default="1 week", description="loguru retention policy")
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        return _normalize_level(v)

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Log file path cannot be empty")
        return v


class LoggingConfig(BaseModel):
    file: FileLoggingConfig = Field(default_factory=FileLoggingConfig)
    console_level: str = Field(default="WARNING", description="Console level when not verbose")

    @field_validator("console_level")
    @classmethod
    def validate_console_level(cls, v: str) -> str:
        return _normalize_level(v)

    @classmethod
    def extract_cli_overrides(cls, args: Any) -> dict[str, Any] | None:
        """Collect ``--log-file`` / ``--log-level`` into config overrides.

        Returns None when neither option was given.
        """
        file_overrides: dict[str, Any] = {}
        if getattr(args, "log_file", None):
            file_overrides["enabled"] = True
            file_overrides["path"] = args.log_file
        if getattr(args, "log_level", None):
            file_overrides["level"] = args.log_level
        return {"file": file_overrides} if file_overrides else None

    @classmethod
    def from_args(cls, args: Any) -> "LoggingConfig":
        """Build the logging config for a CLI invocation."""
        return cls(**(cls.extract_cli_overrides(args) or {}))
