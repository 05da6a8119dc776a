"""
Input error classifications for the interactive prompt.

Recoverable errors are handled inside the prompt loop by asking again;
unrecoverable ones end the prompt and propagate to the caller.
"""

from typing import Optional

from .base import EmailValError


class InputError(EmailValError):
    """Base class for problems with user-supplied input."""

    recoverable = True


class EmptyInputError(InputError):
    """The user entered an empty line."""


class InputTooLongError(InputError):
    """The entered line exceeds the maximum address length."""

    def __init__(self, message: str, length: Optional[int] = None,
                 max_length: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.length = length
        self.max_length = max_length


class InputReadError(InputError):
    """The input stream ended or could not be read."""

    recoverable = False
