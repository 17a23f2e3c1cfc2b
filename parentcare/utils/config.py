"""
ParentCare Config
Environment configuration management using Pydantic
"""

from functools import lru_cache
from typing import Optional

from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = ConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Logging
    log_level: str = "INFO"
    service_name: str = "parentcare"
    json_logs: bool = False

    # Gemini API Configuration
    gemini_api_key: Optional[str] = None
    gemini_api_keys: Optional[str] = None
    gemini_text_model: str = "gemini-2.5-flash"
    gemini_image_model: str = "gemini-3-pro-image-preview"
    gemini_image_aspect_ratio: str = "16:9"
    gemini_image_size: str = "1K"
    gemini_default_temperature: Optional[float] = None

    # Gemini API Key Rotation Configuration
    gemini_api_key_rotation_enabled: bool = True
    gemini_api_key_rotation_backoff_seconds: int = 60


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
