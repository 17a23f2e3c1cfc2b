"""
Gemini Provider Exceptions
Typed failures raised at the provider client boundary
"""

from enum import Enum
from typing import Optional


class ProviderErrorKind(str, Enum):
    """Failure categories reported by the provider client"""

    UNAVAILABLE = "unavailable"
    RATE_LIMITED = "rate_limited"
    INVALID_REQUEST = "invalid_request"
    UNKNOWN = "unknown"


class ProviderError(Exception):
    """Base exception for every provider call failure"""

    kind: ProviderErrorKind = ProviderErrorKind.UNKNOWN

    def __init__(
        self,
        message: str,
        key_name: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.key_name = key_name
        self.original_error = original_error
        super().__init__(self.message)


class ProviderUnavailableError(ProviderError):
    """Provider could not be reached or answered with a server error"""

    kind = ProviderErrorKind.UNAVAILABLE


class RateLimitedError(ProviderError):
    """Provider rejected the call because of quota or rate limits"""

    kind = ProviderErrorKind.RATE_LIMITED


class InvalidRequestError(ProviderError):
    """Provider rejected the request itself (bad input, blocked prompt, auth)"""

    kind = ProviderErrorKind.INVALID_REQUEST


class UnknownProviderError(ProviderError):
    """Failure that does not match any known category"""

    kind = ProviderErrorKind.UNKNOWN


class AllKeysExhaustedError(RateLimitedError):
    """Raised when every configured API key is cooling down after a quota error"""

    def __init__(self, total_keys: int):
        super().__init__(
            message=f"All {total_keys} API keys are currently exhausted. "
            "Please wait for key recovery."
        )


class InvalidKeyConfigError(InvalidRequestError):
    """Raised when API key configuration is invalid"""

    def __init__(self, reason: str):
        super().__init__(message=f"Invalid API key configuration: {reason}")


class NoValidKeysError(InvalidKeyConfigError):
    """Raised when no API key is configured"""

    def __init__(self):
        super().__init__(
            reason="no API keys configured, set GEMINI_API_KEY or GEMINI_API_KEYS"
        )
