"""
ParentCare Models
Pydantic models shared by the provider client and the advisory use cases
"""

from .activity import ActivityCategory, ActivityLog, ActivityLogEntry
from .advisory import AdvisoryResult, EmergencyGuideResult, Source
from .provider import (
    Citation,
    GroundedTextResponse,
    ImagePayload,
    ImageResponse,
    ProviderResponse,
    ResponsePart,
    TextResponse,
)

__all__ = [
    # Activity log
    "ActivityCategory",
    "ActivityLog",
    "ActivityLogEntry",
    # Advisory results
    "AdvisoryResult",
    "EmergencyGuideResult",
    "Source",
    # Provider responses
    "Citation",
    "GroundedTextResponse",
    "ImagePayload",
    "ImageResponse",
    "ProviderResponse",
    "ResponsePart",
    "TextResponse",
]
