"""
Gemini Integration Module
Exports the provider interface, the Gemini client, configuration and error types
"""

from parentcare.gemini.client import GeminiProviderClient
from parentcare.gemini.config import (
    TASK_CONFIGS,
    AdvisoryTask,
    GeminiConfig,
    GeminiModelType,
    ModelConfig,
    get_gemini_config,
    get_task_config,
)
from parentcare.gemini.exceptions import (
    AllKeysExhaustedError,
    InvalidKeyConfigError,
    InvalidRequestError,
    NoValidKeysError,
    ProviderError,
    ProviderErrorKind,
    ProviderUnavailableError,
    RateLimitedError,
    UnknownProviderError,
)
from parentcare.gemini.key_manager import GeminiKeyManager
from parentcare.gemini.provider import AdvisoryProvider

__all__ = [
    # Provider
    "AdvisoryProvider",
    "GeminiProviderClient",
    # Config
    "GeminiConfig",
    "GeminiModelType",
    "AdvisoryTask",
    "ModelConfig",
    "TASK_CONFIGS",
    "get_gemini_config",
    "get_task_config",
    # Key Manager
    "GeminiKeyManager",
    # Exceptions
    "ProviderError",
    "ProviderErrorKind",
    "ProviderUnavailableError",
    "RateLimitedError",
    "InvalidRequestError",
    "UnknownProviderError",
    "AllKeysExhaustedError",
    "InvalidKeyConfigError",
    "NoValidKeysError",
]
