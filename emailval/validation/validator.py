"""
Structural validation of email addresses.

The validator applies a fixed sequence of checks to a candidate address and
stops at the first one that fails. It is a pure computation: no I/O, no
logging and no state is kept between calls, so a single instance can be
shared freely.

Character classification is ASCII only, as in the C locale. Multibyte UTF-8
sequences are not special-cased, which means any non-ASCII character fails
the character set checks.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ..config.defaults import EmailRules
from .charsets import is_ascii_space, only_allowed


class ValidationRule(Enum):
    """Checks applied to a candidate address, in evaluation order."""
    MISSING = "missing"
    LENGTH = "length"
    WHITESPACE = "whitespace"
    AT_COUNT = "at_count"
    AT_POSITION = "at_position"
    LOCAL_DOT_EDGE = "local_dot_edge"
    LOCAL_CONSECUTIVE_DOTS = "local_consecutive_dots"
    LOCAL_CHARSET = "local_charset"
    DOMAIN_EDGE = "domain_edge"
    DOMAIN_NO_DOT = "domain_no_dot"
    TLD_LENGTH = "tld_length"
    DOMAIN_CONSECUTIVE_DOTS = "domain_consecutive_dots"
    DOMAIN_CHARSET = "domain_charset"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of checking one candidate address."""
    candidate: Optional[str]
    failed_rule: Optional[ValidationRule] = None
    local_part: Optional[str] = None
    domain_part: Optional[str] = None

    @property
    def valid(self) -> bool:
        return self.failed_rule is None

    def __bool__(self) -> bool:
        return self.valid


def _as_text(candidate: Any) -> Optional[str]:
    """Normalize supported input types to str, or None if unsupported."""
    if isinstance(candidate, str):
        return candidate
    if isinstance(candidate, (bytes, bytearray)):
        # One character per byte, so non-ASCII bytes stay distinct and fail
        return bytes(candidate).decode("latin-1")
    return None


class EmailValidator:
    """Validates email addresses against practical structural rules."""

    def __init__(self, rules: Optional[EmailRules] = None):
        """
        Initialize validator with rule parameters.

        Args:
            rules: Rule parameters; the product defaults are used if omitted
        """
        self.rules = rules or EmailRules()

    def validate(self, candidate: Any) -> bool:
        """
        Check whether candidate is a valid email address.

        Never raises: None, non-string values and malformed input all
        yield False.
        """
        return self.check(candidate).valid

    def check(self, candidate: Any) -> ValidationResult:
        """
        Run every check in order and report the first failing rule.

        Args:
            candidate: Address to check (str, bytes, or anything else)

        Returns:
            ValidationResult with failed_rule set to None when valid
        """
        text = _as_text(candidate)
        if text is None:
            return ValidationResult(candidate=None, failed_rule=ValidationRule.MISSING)

        def fail(rule: ValidationRule, local: Optional[str] = None,
                 domain: Optional[str] = None) -> ValidationResult:
            return ValidationResult(candidate=text, failed_rule=rule,
                                    local_part=local, domain_part=domain)

        rules = self.rules
        length = len(text)

        if length < rules.min_length or length > rules.max_length:
            return fail(ValidationRule.LENGTH)

        if any(is_ascii_space(char) for char in text):
            return fail(ValidationRule.WHITESPACE)

        if text.count("@") != 1:
            return fail(ValidationRule.AT_COUNT)

        at_pos = text.index("@")
        if at_pos == 0 or at_pos == length - 1:
            return fail(ValidationRule.AT_POSITION)

        local = text[:at_pos]
        domain = text[at_pos + 1:]

        # Local part
        if local[0] == "." or local[-1] == ".":
            return fail(ValidationRule.LOCAL_DOT_EDGE, local, domain)

        if ".." in local:
            return fail(ValidationRule.LOCAL_CONSECUTIVE_DOTS, local, domain)

        if not only_allowed(local, rules.local_symbols):
            return fail(ValidationRule.LOCAL_CHARSET, local, domain)

        # Domain part
        if domain[0] in ".-" or domain[-1] in ".-":
            return fail(ValidationRule.DOMAIN_EDGE, local, domain)

        last_dot = domain.rfind(".")
        if last_dot == -1:
            return fail(ValidationRule.DOMAIN_NO_DOT, local, domain)

        if len(domain) - last_dot - 1 < rules.min_tld_length:
            return fail(ValidationRule.TLD_LENGTH, local, domain)

        if ".." in domain:
            return fail(ValidationRule.DOMAIN_CONSECUTIVE_DOTS, local, domain)

        if not only_allowed(domain, rules.domain_symbols):
            return fail(ValidationRule.DOMAIN_CHARSET, local, domain)

        return ValidationResult(candidate=text, local_part=local, domain_part=domain)


_default_validator = EmailValidator()


def is_valid_email(candidate: Any) -> bool:
    """
    Validate candidate with the default rules.

    Args:
        candidate: Address to check

    Returns:
        True if the address passes every check
    """
    return _default_validator.validate(candidate)
