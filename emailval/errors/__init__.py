"""
Error classification for emailval.

Input errors come from the interactive prompt; system failures stop the
program.
"""

from .base import EmailValError
from .input_errors import (
    InputError,
    EmptyInputError,
    InputTooLongError,
    InputReadError,
)
from .system_failures import (
    ConfigurationError,
    AttemptsExhaustedError,
)

__all__ = [
    "EmailValError",
    # Input Errors
    "InputError",
    "EmptyInputError",
    "InputTooLongError",
    "InputReadError",
    # System Failures
    "ConfigurationError",
    "AttemptsExhaustedError",
]
