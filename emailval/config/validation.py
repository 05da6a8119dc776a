"""Configuration validation utilities."""

import string
from dataclasses import dataclass, fields
from typing import Any

from .defaults import EmailRules, LoggingSettings, PromptSettings

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

_SECTION_FIELDS = {
    "rules": {f.name for f in fields(EmailRules)},
    "prompt": {f.name for f in fields(PromptSettings)},
    "logging": {f.name for f in fields(LoggingSettings)},
}


@dataclass(frozen=True)
class ConfigFieldError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_rules(params: dict[str, Any]) -> list[ConfigFieldError]:
        """Validate email rule parameters."""
        errors = []

        for name in ("min_length", "max_length", "min_tld_length"):
            if name in params:
                value = params[name]
                if not _is_int(value) or value <= 0:
                    errors.append(ConfigFieldError(
                        field=f"rules.{name}",
                        message="Must be a positive integer",
                        value=value
                    ))

        min_length = params.get("min_length")
        max_length = params.get("max_length")
        if _is_int(min_length) and _is_int(max_length) and min_length > max_length:
            errors.append(ConfigFieldError(
                field="rules.min_length",
                message=f"Must not exceed max_length ({max_length})",
                value=min_length
            ))

        for name in ("local_symbols", "domain_symbols"):
            if name in params:
                value = params[name]
                if not isinstance(value, str):
                    errors.append(ConfigFieldError(
                        field=f"rules.{name}",
                        message="Must be a string",
                        value=value
                    ))
                elif any(char not in string.punctuation or char == "@" for char in value):
                    errors.append(ConfigFieldError(
                        field=f"rules.{name}",
                        message="Must contain only ASCII punctuation other than '@'",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_prompt(params: dict[str, Any]) -> list[ConfigFieldError]:
        """Validate prompt parameters."""
        errors = []

        if "prompt_text" in params and not isinstance(params["prompt_text"], str):
            errors.append(ConfigFieldError(
                field="prompt.prompt_text",
                message="Must be a string",
                value=params["prompt_text"]
            ))

        if "max_attempts" in params:
            value = params["max_attempts"]
            if value is not None and (not _is_int(value) or value <= 0):
                errors.append(ConfigFieldError(
                    field="prompt.max_attempts",
                    message="Must be a positive integer or null",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging(params: dict[str, Any]) -> list[ConfigFieldError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in _LOG_LEVELS:
                errors.append(ConfigFieldError(
                    field="logging.level",
                    message=f"Must be one of {', '.join(sorted(_LOG_LEVELS))}",
                    value=value
                ))

        if "format_json" in params and not isinstance(params["format_json"], bool):
            errors.append(ConfigFieldError(
                field="logging.format_json",
                message="Must be a boolean",
                value=params["format_json"]
            ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ConfigFieldError]:
        """Validate complete configuration."""
        errors = []

        for section in config:
            if section not in _SECTION_FIELDS:
                errors.append(ConfigFieldError(
                    field=str(section),
                    message="Unknown configuration section",
                    value=config[section]
                ))

        for section, validator in (
            ("rules", ConfigValidator.validate_rules),
            ("prompt", ConfigValidator.validate_prompt),
            ("logging", ConfigValidator.validate_logging),
        ):
            if section not in config:
                continue
            params = config[section]
            if not isinstance(params, dict):
                errors.append(ConfigFieldError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue
            for key in params:
                if key not in _SECTION_FIELDS[section]:
                    errors.append(ConfigFieldError(
                        field=f"{section}.{key}",
                        message="Unknown configuration key",
                        value=params[key]
                    ))
            errors.extend(validator(params))

        return errors
