"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from .defaults import DefaultConfig, IngestParams, LoggingParams, get_default_config
from .validation import ConfigValidationError, ConfigValidator

CONFIG_FILENAME = "tickbook.yaml"


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_file_config(self) -> dict[str, Any]:
        """Load file-level configuration overrides."""
        config_file = self.config_dir / CONFIG_FILENAME

        if not config_file.exists():
            return {}

        with open(config_file) as f:
            file_config = yaml.safe_load(f)

        return file_config or {}

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Explicit overrides (highest priority)
        2. Config file values
        3. Global defaults (lowest priority)

        Raises:
            ConfigValidationError: If the merged configuration is invalid
        """
        # Start with global defaults
        config = self._dataclass_to_dict(self.defaults)

        # Apply config file overrides
        config = self._deep_merge(config, self.load_file_config())

        # Apply explicit overrides
        if overrides:
            config = self._deep_merge(config, overrides)

        errors = ConfigValidator.validate_config(config)
        if errors:
            raise ConfigValidationError(errors)

        return config

    def load_ingest_params(self, overrides: Optional[dict[str, Any]] = None) -> IngestParams:
        """Build ingestion parameters from the merged configuration."""
        config = self.merge_config(overrides)
        return IngestParams(**self._known_fields(IngestParams, config.get("ingest", {})))

    def load_logging_params(self, overrides: Optional[dict[str, Any]] = None) -> LoggingParams:
        """Build logging parameters from the merged configuration."""
        config = self.merge_config(overrides)
        return LoggingParams(**self._known_fields(LoggingParams, config.get("logging", {})))

    def _known_fields(self, params_cls: type, section: dict[str, Any]) -> dict[str, Any]:
        """Drop keys the params dataclass does not declare."""
        return {k: v for k, v in section.items() if k in params_cls.__dataclass_fields__}

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name, _field in obj.__dataclass_fields__.items():
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
