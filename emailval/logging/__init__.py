"""
Logging configuration and utilities for emailval.
"""
from .config import configure_logging, get_logger, get_prompt_logger, log_validation_attempt

__all__ = ["configure_logging", "get_logger", "get_prompt_logger", "log_validation_attempt"]
