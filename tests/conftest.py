"""Pytest configuration and shared fixtures."""

import io
from typing import Callable, Optional

import pytest

from emailval.config.defaults import EmailRules, PromptSettings
from emailval.logging.config import configure_logging
from emailval.prompt import EmailPrompt
from emailval.validation import EmailValidator


@pytest.fixture(autouse=True)
def default_logging() -> None:
    """Start every test from the default logging configuration."""
    configure_logging(level="WARNING")


@pytest.fixture
def validator() -> EmailValidator:
    """Validator with the default rules."""
    return EmailValidator()


@pytest.fixture
def long_valid_address() -> str:
    """A valid address exactly at the 255 character limit."""
    domain = "@example.com"
    return "a" * (255 - len(domain)) + domain


@pytest.fixture
def make_prompt() -> Callable[..., tuple[EmailPrompt, io.StringIO]]:
    """Factory building a prompt wired to in-memory streams."""

    def _make(
        text: str,
        rules: Optional[EmailRules] = None,
        settings: Optional[PromptSettings] = None,
    ) -> tuple[EmailPrompt, io.StringIO]:
        stdout = io.StringIO()
        prompt = EmailPrompt(
            validator=EmailValidator(rules),
            settings=settings,
            stdin=io.StringIO(text),
            stdout=stdout,
        )
        return prompt, stdout

    return _make
