"""Configuration defaults, file loading and validation."""

from .defaults import DefaultConfig, IngestParams, LoggingParams, get_default_config
from .loader import ConfigLoader
from .validation import ConfigValidationError, ConfigValidator

__all__ = [
    "ConfigLoader",
    "ConfigValidationError",
    "ConfigValidator",
    "DefaultConfig",
    "IngestParams",
    "LoggingParams",
    "get_default_config",
]
