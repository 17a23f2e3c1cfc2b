"""
Emergency Guide Composer
First aid steps for an emergency, followed by a best-effort illustration.

The text stage is required: if it fails, a fixed call-120 message is returned
and no image is requested. The image stage only runs after the text stage
succeeded, and its failures are dropped so the steps always reach the user.
"""

from typing import Optional

from parentcare.advisory.base import AdvisoryUseCase, require_text
from parentcare.advisory.catalog import get_emergency_scenario
from parentcare.advisory.normalizer import normalize_image, normalize_text
from parentcare.advisory.prompts import (
    EMERGENCY_EMPTY_MESSAGE,
    EMERGENCY_ERROR_MESSAGE,
    EMERGENCY_GUIDE_PROMPT,
    EMERGENCY_ILLUSTRATION_PROMPT,
)
from parentcare.gemini.config import AdvisoryTask
from parentcare.models.advisory import EmergencyGuideResult
from parentcare.utils.logger import get_logger
from parentcare.utils.logging_config import log_error_with_context

logger = get_logger(__name__)


class EmergencyGuideComposer(AdvisoryUseCase):
    """Two sequential provider calls: guide text, then illustration"""

    task = AdvisoryTask.EMERGENCY_GUIDE

    @staticmethod
    def build_guide_prompt(scenario: str) -> str:
        return EMERGENCY_GUIDE_PROMPT.format(scenario=scenario)

    @staticmethod
    def build_illustration_prompt(scenario: str) -> str:
        return EMERGENCY_ILLUSTRATION_PROMPT.format(scenario=scenario)

    async def compose(self, scenario: str) -> EmergencyGuideResult:
        """
        Compose the guide for a scenario label such as ``噎食/窒息``.

        Raises:
            ValidationError: If ``scenario`` is blank
        """
        scenario = require_text(scenario, "scenario")

        # Stage A: guide text
        try:
            task_config = self.task_config()
            response = await self.provider.generate_text(
                self.build_guide_prompt(scenario),
                model=task_config.model,
                temperature=task_config.temperature,
            )
            guide_text = normalize_text(response, EMERGENCY_EMPTY_MESSAGE)
        except Exception as error:
            log_error_with_context(
                logger, error, {"use_case": self.task.value, "scenario": scenario}
            )
            return EmergencyGuideResult(text=EMERGENCY_ERROR_MESSAGE)

        # Stage B: illustration
        image_url = await self._illustrate(scenario)
        return EmergencyGuideResult(text=guide_text, image_url=image_url)

    async def compose_scenario(self, scenario_id: str) -> EmergencyGuideResult:
        """
        Compose the guide for a catalog scenario id such as ``choking``.

        Raises:
            NotFoundError: If the id is not in the catalog
        """
        scenario = get_emergency_scenario(scenario_id)
        return await self.compose(scenario.title)

    async def _illustrate(self, scenario: str) -> Optional[str]:
        """Best effort: any failure yields None."""
        try:
            gemini_config = self.gemini_config
            illustration_config = self.task_config(AdvisoryTask.EMERGENCY_ILLUSTRATION)
            response = await self.provider.generate_image(
                self.build_illustration_prompt(scenario),
                aspect_ratio=gemini_config.image_aspect_ratio,
                image_size=gemini_config.image_size,
                model=illustration_config.model,
            )
            image_url = normalize_image(response)
        except Exception as error:
            logger.warning(
                f"Emergency illustration skipped for '{scenario}': "
                f"{type(error).__name__}: {error}",
                extra={"use_case": AdvisoryTask.EMERGENCY_ILLUSTRATION.value},
            )
            return None

        if image_url is None:
            logger.info(f"Provider returned no image for '{scenario}'")
        return image_url
