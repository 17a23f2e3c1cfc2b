"""
ParentCare Repositories
Storage interfaces consumed by the application shell
"""

from .base import (
    DEFAULT_LOG_KEY,
    ActivityLogRepository,
    InMemoryActivityLogRepository,
)

__all__ = [
    "DEFAULT_LOG_KEY",
    "ActivityLogRepository",
    "InMemoryActivityLogRepository",
]
