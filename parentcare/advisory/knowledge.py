"""
Grounded Advisors
Search-grounded answers for parenting questions, plus the shared grounded flow
"""

from typing import Optional

from parentcare.advisory.base import AdvisoryUseCase, require_text
from parentcare.advisory.normalizer import normalize_sources, normalize_text
from parentcare.advisory.prompts import (
    KNOWLEDGE_EMPTY_MESSAGE,
    KNOWLEDGE_ERROR_MESSAGE,
    KNOWLEDGE_PROMPT,
)
from parentcare.gemini.config import AdvisoryTask
from parentcare.models.advisory import AdvisoryResult
from parentcare.utils.logger import get_logger
from parentcare.utils.logging_config import log_error_with_context

logger = get_logger(__name__)


class GroundedAdvisor(AdvisoryUseCase):
    """
    Prompt -> grounded generation -> text and sources.

    Subclasses supply the prompt template, an optional system instruction and
    the two fallback messages. Every subclass filters sources the same way.
    """

    input_field: str = "query"
    prompt_template: str
    system_instruction: Optional[str] = None
    empty_message: str
    error_message: str

    def build_prompt(self, user_input: str) -> str:
        return self.prompt_template.format(**{self.input_field: user_input})

    async def _advise(self, user_input: str) -> AdvisoryResult:
        user_input = require_text(user_input, self.input_field)
        prompt = self.build_prompt(user_input)

        try:
            task_config = self.task_config()
            response = await self.provider.generate_grounded_text(
                prompt,
                system_instruction=self.system_instruction,
                model=task_config.model,
                temperature=task_config.temperature,
            )
            result = AdvisoryResult(
                text=normalize_text(response, self.empty_message),
                sources=normalize_sources(response),
            )
        except Exception as error:
            log_error_with_context(logger, error, {"use_case": self.task.value})
            return AdvisoryResult(text=self.error_message, sources=[])

        logger.info(
            f"{self.task.value} answered with {len(result.sources)} sources",
            extra={"use_case": self.task.value, "source_count": len(result.sources)},
        )
        return result


class KnowledgeAdvisor(GroundedAdvisor):
    """Authoritative toddler-parenting answers, preferring health-authority sources"""

    task = AdvisoryTask.KNOWLEDGE
    input_field = "query"
    prompt_template = KNOWLEDGE_PROMPT
    empty_message = KNOWLEDGE_EMPTY_MESSAGE
    error_message = KNOWLEDGE_ERROR_MESSAGE

    async def ask(self, query: str) -> AdvisoryResult:
        """
        Answer a parenting question.

        Raises:
            ValidationError: If ``query`` is blank; callers must guard
        """
        return await self._advise(query)
