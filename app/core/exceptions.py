"""
Custom exceptions for the Agenda API.
Business errors carry a message plus optional details; the app maps them to HTTP responses.
"""

from typing import Any, Dict, Optional


class BusinessLogicError(Exception):
    """Base exception for business logic errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(BusinessLogicError):
    """Raised when a requested resource is not found."""
    pass
