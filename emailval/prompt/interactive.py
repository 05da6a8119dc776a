"""
Interactive email prompt.

Reads one line at a time, screens out empty and over-long lines, and hands
everything else to EmailValidator. Rejected addresses get a fixed checklist
of the rules and another attempt; the loop ends when an address is accepted
or the input stream ends.
"""

import sys
from typing import Optional, TextIO

from ..config.defaults import PromptSettings
from ..errors import (
    AttemptsExhaustedError,
    EmptyInputError,
    InputError,
    InputReadError,
    InputTooLongError,
)
from ..logging.config import get_prompt_logger, log_validation_attempt
from ..validation import EmailValidator


def format_rule_checklist(min_length: int, max_length: int) -> str:
    """Build the checklist shown after a rejected address."""
    return (
        "✗ Invalid email address. Please check the following:\n"
        "  - Must contain exactly one '@' symbol\n"
        "  - Must have text before and after '@'\n"
        "  - Domain must contain at least one '.' (dot)\n"
        "  - Must end with valid domain extension (at least 2 characters)\n"
        "  - No spaces allowed\n"
        "  - Cannot start or end with '.' or '-'\n"
        f"  - Length must be between {min_length} and {max_length} characters\n\n"
    )


def strip_line_terminator(line: str) -> str:
    """Remove a single trailing newline (LF or CRLF)."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


class EmailPrompt:
    """Prompts for an email address until a valid one is entered."""

    def __init__(
        self,
        validator: Optional[EmailValidator] = None,
        settings: Optional[PromptSettings] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        self.validator = validator or EmailValidator()
        self.settings = settings or PromptSettings()
        self.stdin = stdin if stdin is not None else sys.stdin
        # Undecodable bytes become lone surrogates, which fail the charset rules
        if hasattr(self.stdin, "reconfigure"):
            self.stdin.reconfigure(errors="surrogateescape")
        self.stdout = stdout if stdout is not None else sys.stdout
        self.logger = get_prompt_logger(__name__)

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def _read_line(self) -> str:
        """Read one line, raising InputReadError on end of input."""
        try:
            line = self.stdin.readline()
        except OSError as e:
            self._write("Error: Failed to read input\n")
            raise InputReadError(f"Failed to read input: {e}") from e

        if line == "":
            self._write("Error: Failed to read input\n")
            raise InputReadError("Input stream ended before a valid address was entered")

        return strip_line_terminator(line)

    def _screen(self, entry: str) -> None:
        """Reject empty and over-long lines before validation."""
        max_length = self.validator.rules.max_length
        if len(entry) > max_length:
            raise InputTooLongError(
                f"Email address is too long (maximum {max_length} characters)",
                length=len(entry),
                max_length=max_length,
            )
        if not entry:
            raise EmptyInputError("Please enter a non-empty email address")

    def read_email(self) -> str:
        """
        Run the prompt loop.

        Returns:
            The accepted email address

        Raises:
            InputReadError: If the input stream ends or fails
            AttemptsExhaustedError: If max_attempts is set and used up
        """
        rules = self.validator.rules
        max_attempts = self.settings.max_attempts
        attempt = 0

        while max_attempts is None or attempt < max_attempts:
            attempt += 1
            self._write(self.settings.prompt_text)

            try:
                entry = self._read_line()
            except InputReadError as e:
                self.logger.error("Prompt input failed", attempt=attempt, error=str(e))
                raise

            try:
                self._screen(entry)
            except InputError as e:
                self._write(f"Error: {e}\n")
                log_validation_attempt(self.logger, attempt, accepted=False,
                                       rule=type(e).__name__)
                continue

            result = self.validator.check(entry)
            if result.valid:
                log_validation_attempt(self.logger, attempt, accepted=True)
                self._write(f"✓ Valid email address entered: {entry}\n")
                return entry

            log_validation_attempt(self.logger, attempt, accepted=False,
                                   rule=result.failed_rule.value)
            self._write(format_rule_checklist(rules.min_length, rules.max_length))

        self.logger.warning("Prompt attempts exhausted", attempts=attempt)
        raise AttemptsExhaustedError(
            f"No valid email address after {attempt} attempts",
            attempts=attempt,
        )
