"""
Root of the emailval exception hierarchy.
"""

from typing import Any, Dict, Optional


class EmailValError(Exception):
    """Base class for all errors raised by emailval."""

    recoverable = False

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
