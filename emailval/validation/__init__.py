"""
Email address validation rules and result types.
"""
from .validator import EmailValidator, ValidationResult, ValidationRule, is_valid_email

__all__ = ["EmailValidator", "ValidationResult", "ValidationRule", "is_valid_email"]
