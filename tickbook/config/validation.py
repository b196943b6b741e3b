"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidationError(ValueError):
    """Raised when a merged configuration fails validation."""

    def __init__(self, errors: list[ValidationError]):
        details = "; ".join(f"{e.field}: {e.message} (got {e.value!r})" for e in errors)
        super().__init__(f"Invalid configuration: {details}")
        self.errors = errors


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_ingest_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate ingestion parameters."""
        errors = []

        # Validate delimiter
        if "delimiter" in params:
            value = params["delimiter"]
            if not isinstance(value, str) or len(value) != 1 or value in "\r\n":
                errors.append(ValidationError(
                    field="delimiter",
                    message="Must be a single non-newline character",
                    value=value
                ))

        # Validate encoding
        if "encoding" in params:
            value = params["encoding"]
            if not isinstance(value, str) or not value:
                errors.append(ValidationError(
                    field="encoding",
                    message="Must be a non-empty string",
                    value=value
                ))

        # Validate strict_side
        if "strict_side" in params:
            value = params["strict_side"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="strict_side",
                    message="Must be a boolean",
                    value=value
                ))

        # Validate timestamp_format
        if "timestamp_format" in params:
            value = params["timestamp_format"]
            if value is not None and (not isinstance(value, str) or "%" not in value):
                errors.append(ValidationError(
                    field="timestamp_format",
                    message="Must be null or a strptime format string",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in VALID_LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(VALID_LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "ingest" in config:
            errors.extend(ConfigValidator.validate_ingest_params(config["ingest"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
