"""
System failure error classifications.

These errors stop the program and are mapped to a non-zero exit status by
the CLI.
"""

from typing import Optional

from .base import EmailValError


class ConfigurationError(EmailValError):
    """Configuration file missing, unreadable or invalid."""

    def __init__(self, message: str, errors: Optional[list] = None,
                 path: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
        self.path = path


class AttemptsExhaustedError(EmailValError):
    """The prompt reached its attempt limit without a valid address."""

    def __init__(self, message: str, attempts: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.attempts = attempts
