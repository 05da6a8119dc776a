"""Configuration loader with defaults < file < override precedence."""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import DefaultConfig, EmailRules, LoggingSettings, PromptSettings, get_default_config
from .validation import ConfigValidator


@dataclass(frozen=True)
class ConfigLoader:
    """Loads configuration from an optional YAML file."""

    config_file: Optional[Path]
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_file: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        return cls(
            config_file=Path(config_file) if config_file is not None else None,
            defaults=get_default_config(),
        )

    def load_file(self) -> dict[str, Any]:
        """Read the YAML configuration file, or {} if none was given."""
        if self.config_file is None:
            return {}

        if not self.config_file.exists():
            raise ConfigurationError(
                f"Configuration file not found: {self.config_file}",
                path=str(self.config_file),
            )

        try:
            with open(self.config_file, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Cannot read configuration file {self.config_file}: {e}",
                path=str(self.config_file),
            ) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {self.config_file} must contain a mapping",
                path=str(self.config_file),
            )
        return data

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Explicit overrides (highest priority)
        2. Configuration file
        3. Defaults (lowest priority)
        """
        config = asdict(self.defaults)
        config = self._deep_merge(config, self.load_file())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load(self, overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """
        Merge, validate and build the configuration.

        Raises:
            ConfigurationError: If the file is unreadable or any value is invalid
        """
        config = self.merge_config(overrides)

        errors = ConfigValidator.validate_config(config)
        if errors:
            details = "; ".join(f"{e.field}: {e.message} (value: {e.value!r})" for e in errors)
            raise ConfigurationError(
                f"Invalid configuration: {details}",
                errors=errors,
                path=str(self.config_file) if self.config_file else None,
            )

        return DefaultConfig(
            rules=EmailRules(**config["rules"]),
            prompt=PromptSettings(**config["prompt"]),
            logging=LoggingSettings(**config["logging"]),
        )

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
