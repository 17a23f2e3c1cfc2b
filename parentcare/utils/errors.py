"""
ParentCare Errors
Custom exception classes for caller-facing contract violations
"""

from typing import Any, Dict, Optional


class ParentCareException(Exception):
    """Base exception for the ParentCare library"""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(ParentCareException):
    """Invalid caller input (400)"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=400, details=details)


class NotFoundError(ParentCareException):
    """Unknown catalog entry or log entry (404)"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=404, details=details)
