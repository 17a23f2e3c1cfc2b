"""
ParentCare Utilities
Configuration, logging and error types shared by every module
"""

from .config import Settings, get_settings
from .errors import NotFoundError, ParentCareException, ValidationError
from .logger import get_logger

__all__ = [
    # Config
    "get_settings",
    "Settings",
    # Logging
    "get_logger",
    # Errors
    "ParentCareException",
    "ValidationError",
    "NotFoundError",
]
