"""
Advisory Use Case Base
Shared wiring for the stateless advisory use cases
"""

from typing import Optional

from parentcare.gemini.config import (
    AdvisoryTask,
    GeminiConfig,
    ModelConfig,
    get_gemini_config,
    get_task_config,
)
from parentcare.gemini.provider import AdvisoryProvider
from parentcare.utils.errors import ValidationError


def require_text(value: Optional[str], field: str) -> str:
    """
    Trim caller input and reject blank values before any provider call.

    Raises:
        ValidationError: If the value is missing or whitespace only
    """
    if value is None or not value.strip():
        raise ValidationError(f"{field} must not be blank", details={"field": field})
    return value.strip()


class AdvisoryUseCase:
    """
    Base class for the advisory use cases.

    The provider is injected; use cases hold no other state, so one instance
    can serve concurrent requests.
    """

    task: AdvisoryTask

    def __init__(
        self,
        provider: AdvisoryProvider,
        config: Optional[GeminiConfig] = None,
    ):
        self.provider = provider
        self._config = config

    @property
    def gemini_config(self) -> GeminiConfig:
        return self._config or get_gemini_config()

    def task_config(self, task: Optional[AdvisoryTask] = None) -> ModelConfig:
        """Model parameters for ``task``, defaulting to the use case's own task"""
        return get_task_config(task or self.task, self.gemini_config)
