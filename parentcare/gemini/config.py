"""
Gemini Configuration Module
Model selection and generation defaults for every advisory task
"""

from dataclasses import dataclass, replace
from enum import Enum
from functools import lru_cache
from typing import Dict, Optional

from pydantic import BaseModel, Field

from parentcare.utils.config import get_settings


class GeminiModelType(str, Enum):
    """Gemini models used by the advisory layer"""

    FLASH = "gemini-2.5-flash"  # Text and search-grounded answers
    PRO_IMAGE = "gemini-3-pro-image-preview"  # Illustrations with inline image output


class AdvisoryTask(str, Enum):
    """Task types that determine which model and parameters to use"""

    DAILY_SUMMARY = "daily_summary"
    KNOWLEDGE = "knowledge"
    ILLNESS_GUIDANCE = "illness_guidance"
    EMERGENCY_GUIDE = "emergency_guide"
    EMERGENCY_ILLUSTRATION = "emergency_illustration"


@dataclass
class ModelConfig:
    """Configuration for a specific model use case"""

    model: str
    temperature: Optional[float] = None
    description: str = ""


class GeminiConfig(BaseModel):
    """
    Central Gemini configuration.
    Every value can be overridden through environment variables.
    """

    model_config = {"protected_namespaces": ()}

    # API Key Configuration
    api_key: Optional[str] = Field(default=None, description="Single API key")
    api_keys: Optional[str] = Field(
        default=None, description="Multiple API keys (format: key1|name1,key2|name2)"
    )

    # Key Rotation Settings
    rotation_enabled: bool = Field(default=True, description="Enable API key rotation")
    rotation_backoff_seconds: int = Field(
        default=60, ge=0, description="Seconds to wait before reusing an exhausted key"
    )

    # Models
    text_model: str = Field(
        default=GeminiModelType.FLASH.value,
        description="Model for plain and grounded text",
    )
    image_model: str = Field(
        default=GeminiModelType.PRO_IMAGE.value,
        description="Model for illustrations",
    )

    # Image output
    image_aspect_ratio: str = Field(default="16:9")
    image_size: str = Field(default="1K", description="Resolution tier of generated images")

    # Generation Defaults
    default_temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)

    @classmethod
    def from_env(cls) -> "GeminiConfig":
        """Load configuration from environment variables (and .env via Settings)"""
        settings = get_settings()
        return cls(
            api_key=settings.gemini_api_key,
            api_keys=settings.gemini_api_keys,
            rotation_enabled=settings.gemini_api_key_rotation_enabled,
            rotation_backoff_seconds=settings.gemini_api_key_rotation_backoff_seconds,
            text_model=settings.gemini_text_model,
            image_model=settings.gemini_image_model,
            image_aspect_ratio=settings.gemini_image_aspect_ratio,
            image_size=settings.gemini_image_size,
            default_temperature=settings.gemini_default_temperature,
        )

    def get_model_for_task(self, task: AdvisoryTask) -> str:
        """
        Get the appropriate model for a specific task type.

        Args:
            task: The advisory task to perform

        Returns:
            str: Model name to use
        """
        if task == AdvisoryTask.EMERGENCY_ILLUSTRATION:
            return self.image_model
        return self.text_model


# Task-specific parameters. Models are resolved against GeminiConfig at lookup time.
TASK_CONFIGS: Dict[AdvisoryTask, ModelConfig] = {
    AdvisoryTask.DAILY_SUMMARY: ModelConfig(
        model=GeminiModelType.FLASH.value,
        description="Summarize a toddler's daily activity log",
    ),
    AdvisoryTask.KNOWLEDGE: ModelConfig(
        model=GeminiModelType.FLASH.value,
        description="Answer parenting questions with search grounding",
    ),
    AdvisoryTask.ILLNESS_GUIDANCE: ModelConfig(
        model=GeminiModelType.FLASH.value,
        description="Home-care guidance for symptoms with search grounding",
    ),
    AdvisoryTask.EMERGENCY_GUIDE: ModelConfig(
        model=GeminiModelType.FLASH.value,
        description="Step-by-step first aid instructions",
    ),
    AdvisoryTask.EMERGENCY_ILLUSTRATION: ModelConfig(
        model=GeminiModelType.PRO_IMAGE.value,
        description="Educational first aid illustration",
    ),
}


@lru_cache()
def get_gemini_config() -> GeminiConfig:
    """
    Get cached Gemini configuration instance.
    Configuration is loaded once per process.
    """
    return GeminiConfig.from_env()


def get_task_config(
    task: AdvisoryTask, config: Optional[GeminiConfig] = None
) -> ModelConfig:
    """
    Get the configuration for a specific task type.

    Returns a copy, the shared TASK_CONFIGS table is never modified.

    Args:
        task: The task type
        config: Gemini configuration, defaults to the cached environment config

    Returns:
        ModelConfig: Configuration for the task
    """
    config = config or get_gemini_config()
    task_config = TASK_CONFIGS[task]

    temperature = task_config.temperature
    if temperature is None:
        temperature = config.default_temperature

    return replace(
        task_config,
        model=config.get_model_for_task(task),
        temperature=temperature,
    )
