"""Default configuration parameters for email validation and the prompt."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class EmailRules:
    """Structural rule parameters used by EmailValidator."""
    min_length: int = 5                 # Shortest realistic address: a@b.c
    max_length: int = 255               # Longest accepted address
    min_tld_length: int = 2             # Characters after the last domain dot
    local_symbols: str = ".-_+"         # Non-alnum characters allowed before '@'
    domain_symbols: str = ".-"          # Non-alnum characters allowed after '@'


@dataclass(frozen=True)
class PromptSettings:
    """Interactive prompt parameters."""
    prompt_text: str = "Please enter your email address: "
    max_attempts: Optional[int] = None  # None retries until input ends


@dataclass(frozen=True)
class LoggingSettings:
    """Logging parameters."""
    level: str = "WARNING"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    rules: EmailRules
    prompt: PromptSettings
    logging: LoggingSettings


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        rules=EmailRules(),
        prompt=PromptSettings(),
        logging=LoggingSettings(),
    )
