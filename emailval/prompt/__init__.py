"""
Interactive prompt for collecting a valid email address.
"""
from .interactive import EmailPrompt, format_rule_checklist

__all__ = ["EmailPrompt", "format_rule_checklist"]
