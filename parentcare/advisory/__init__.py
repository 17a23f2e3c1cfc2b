"""
ParentCare Advisory Layer
Use cases that compose prompts, call the provider and normalize its responses
"""

from .catalog import (
    COMMON_SYMPTOMS,
    EMERGENCY_SCENARIOS,
    SUGGESTED_TOPICS,
    EmergencyScenario,
    get_emergency_scenario,
)
from .daily_summary import DailyLogSummarizer
from .emergency import EmergencyGuideComposer
from .illness import IllnessGuidanceAdvisor
from .knowledge import GroundedAdvisor, KnowledgeAdvisor
from .normalizer import normalize_image, normalize_sources, normalize_text
from .service import AdvisoryService

__all__ = [
    # Use cases
    "AdvisoryService",
    "DailyLogSummarizer",
    "EmergencyGuideComposer",
    "GroundedAdvisor",
    "IllnessGuidanceAdvisor",
    "KnowledgeAdvisor",
    # Normalizer
    "normalize_image",
    "normalize_sources",
    "normalize_text",
    # Catalog
    "COMMON_SYMPTOMS",
    "EMERGENCY_SCENARIOS",
    "SUGGESTED_TOPICS",
    "EmergencyScenario",
    "get_emergency_scenario",
]
