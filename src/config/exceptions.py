"""Exceptions raised while loading the watch job configuration."""

from typing import Any


class ConfigurationError(Exception):
    """Base exception for all configuration-related errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.details = details or {}


class ConfigurationFileError(ConfigurationError):
    """A YAML override file is missing, unreadable or not a mapping."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        """Initialize configuration file error.

        Args:
            message: Human-readable error message
            file_path: Path of the override file that failed to load
            details: Optional dictionary with additional error details
        """
        super().__init__(message, details)
        self.file_path = file_path


class ConfigurationValidationError(ConfigurationError):
    """Settings were read but rejected by the pydantic models."""

    def __init__(
        self,
        message: str,
        validation_errors: list[Any] | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details)
        self.validation_errors = validation_errors or []

    @property
    def field_paths(self) -> list[str]:
        """Dotted locations of the rejected settings, e.g. ``slack.timeout``."""
        return [
            ".".join(str(part) for part in error.get("loc", ()))
            for error in self.validation_errors
            if isinstance(error, dict)
        ]
