"""
Configuration defaults, loading and validation.
"""
from .defaults import DefaultConfig, EmailRules, LoggingSettings, PromptSettings, get_default_config

__all__ = ["DefaultConfig", "EmailRules", "LoggingSettings", "PromptSettings", "get_default_config"]
