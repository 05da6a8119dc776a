"""
emailval - Practical email address validation

Validates candidate email addresses against a fixed set of structural
rules and provides an interactive prompt that retries until a valid
address is entered.
"""

from .validation import EmailValidator, ValidationResult, ValidationRule, is_valid_email

__version__ = "0.1.0"
__author__ = "emailval Team"

__all__ = ["EmailValidator", "ValidationResult", "ValidationRule", "is_valid_email"]
