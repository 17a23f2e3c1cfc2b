"""
Advisory Service
Single entry point the application shell uses for all four advisory flows
"""

from typing import Iterable, Optional

from parentcare.advisory.daily_summary import DailyLogSummarizer
from parentcare.advisory.emergency import EmergencyGuideComposer
from parentcare.advisory.illness import IllnessGuidanceAdvisor
from parentcare.advisory.knowledge import KnowledgeAdvisor
from parentcare.gemini.client import GeminiProviderClient
from parentcare.gemini.config import GeminiConfig, get_gemini_config
from parentcare.gemini.provider import AdvisoryProvider
from parentcare.models.activity import ActivityLogEntry
from parentcare.models.advisory import AdvisoryResult, EmergencyGuideResult


class AdvisoryService:
    """Bundles the use cases around one injected provider"""

    def __init__(
        self,
        provider: AdvisoryProvider,
        config: Optional[GeminiConfig] = None,
    ):
        self.provider = provider
        self.summarizer = DailyLogSummarizer(provider, config)
        self.knowledge = KnowledgeAdvisor(provider, config)
        self.illness = IllnessGuidanceAdvisor(provider, config)
        self.emergency = EmergencyGuideComposer(provider, config)

    @classmethod
    def from_env(cls) -> "AdvisoryService":
        """Build the service around a Gemini client configured from the environment"""
        config = get_gemini_config()
        return cls(GeminiProviderClient(config=config), config)

    async def summarize_logs(self, entries: Iterable[ActivityLogEntry]) -> str:
        return await self.summarizer.summarize(entries)

    async def ask_knowledge(self, query: str) -> AdvisoryResult:
        return await self.knowledge.ask(query)

    async def check_illness(self, symptoms: str) -> AdvisoryResult:
        return await self.illness.check(symptoms)

    async def emergency_guide(self, scenario: str) -> EmergencyGuideResult:
        return await self.emergency.compose(scenario)

    async def emergency_guide_for(self, scenario_id: str) -> EmergencyGuideResult:
        return await self.emergency.compose_scenario(scenario_id)
