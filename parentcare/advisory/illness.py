"""
Illness Guidance Advisor
Home-care guidance for a toddler's symptoms, opened by a not-a-doctor disclaimer
"""

from parentcare.advisory.knowledge import GroundedAdvisor
from parentcare.advisory.prompts import (
    ILLNESS_EMPTY_MESSAGE,
    ILLNESS_ERROR_MESSAGE,
    ILLNESS_PROMPT,
    ILLNESS_SYSTEM_INSTRUCTION,
)
from parentcare.gemini.config import AdvisoryTask
from parentcare.models.advisory import AdvisoryResult


class IllnessGuidanceAdvisor(GroundedAdvisor):
    """
    Grounded symptom guidance.

    The system instruction requires the answer to open with the disclaimer.
    The returned text is not checked for it.
    """

    task = AdvisoryTask.ILLNESS_GUIDANCE
    input_field = "symptoms"
    prompt_template = ILLNESS_PROMPT
    system_instruction = ILLNESS_SYSTEM_INSTRUCTION
    empty_message = ILLNESS_EMPTY_MESSAGE
    error_message = ILLNESS_ERROR_MESSAGE

    async def check(self, symptoms: str) -> AdvisoryResult:
        """
        Get care guidance for the described symptoms.

        Raises:
            ValidationError: If ``symptoms`` is blank; callers must guard
        """
        return await self._advise(symptoms)
