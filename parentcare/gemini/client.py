"""
Gemini Provider Client
Adapter from the google-genai SDK to the AdvisoryProvider capabilities.
Owns transport, API keys and raw-response parsing; failures surface as ProviderError.
"""

import asyncio
import time
from typing import Any, Dict, List, Optional

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from parentcare.gemini.config import GeminiConfig, get_gemini_config
from parentcare.gemini.exceptions import (
    InvalidRequestError,
    ProviderError,
    ProviderUnavailableError,
    RateLimitedError,
    UnknownProviderError,
)
from parentcare.gemini.key_manager import GeminiKeyManager
from parentcare.gemini.provider import AdvisoryProvider
from parentcare.models.provider import (
    Citation,
    GroundedTextResponse,
    ImagePayload,
    ImageResponse,
    ResponsePart,
    TextResponse,
)
from parentcare.utils.logger import get_logger
from parentcare.utils.logging_config import log_performance

logger = get_logger(__name__)


class GeminiProviderClient(AdvisoryProvider):
    """
    Gemini implementation of the advisory provider.

    Features:
    - One round-trip per call, no retries and no caching
    - API key pool with quota-aware rotation between calls
    - Typed error classification (unavailable, rate limited, invalid, unknown)
    - Per-call latency logging
    - Only the first candidate of a response is parsed
    """

    def __init__(
        self,
        config: Optional[GeminiConfig] = None,
        key_manager: Optional[GeminiKeyManager] = None,
    ):
        """
        Initialize the provider client.

        Args:
            config: Gemini configuration, defaults to the environment config
            key_manager: Key pool, built from ``config`` when omitted
        """
        self._config = config or get_gemini_config()
        self.key_manager = key_manager or GeminiKeyManager(
            api_key=self._config.api_key,
            api_keys=self._config.api_keys,
            rotation_enabled=self._config.rotation_enabled,
            backoff_seconds=self._config.rotation_backoff_seconds,
        )
        self._clients: Dict[str, genai.Client] = {}

        logger.info(
            f"GeminiProviderClient configured: "
            f"text_model={self._config.text_model}, "
            f"image_model={self._config.image_model}"
        )

    @property
    def config(self) -> GeminiConfig:
        return self._config

    def _client_for(self, api_key: str) -> genai.Client:
        """Return the SDK client bound to ``api_key``, creating it on first use"""
        client = self._clients.get(api_key)
        if client is None:
            client = genai.Client(api_key=api_key)
            self._clients[api_key] = client
        return client

    # ------------------------------------------------------------------
    # Capabilities
    # ------------------------------------------------------------------

    async def generate_text(
        self,
        prompt: str,
        *,
        system_instruction: Optional[str] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> TextResponse:
        config_kwargs = self._generation_kwargs(system_instruction, temperature)
        response = await self._generate(
            operation="generate_text",
            model=model or self._config.text_model,
            prompt=prompt,
            config=types.GenerateContentConfig(**config_kwargs) if config_kwargs else None,
        )
        return self._to_text_response(response)

    async def generate_grounded_text(
        self,
        prompt: str,
        *,
        system_instruction: Optional[str] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> GroundedTextResponse:
        config_kwargs = self._generation_kwargs(system_instruction, temperature)
        config_kwargs["tools"] = [types.Tool(google_search=types.GoogleSearch())]
        response = await self._generate(
            operation="generate_grounded_text",
            model=model or self._config.text_model,
            prompt=prompt,
            config=types.GenerateContentConfig(**config_kwargs),
        )
        return self._to_grounded_response(response)

    async def generate_image(
        self,
        prompt: str,
        *,
        aspect_ratio: str,
        image_size: str,
        model: Optional[str] = None,
    ) -> ImageResponse:
        response = await self._generate(
            operation="generate_image",
            model=model or self._config.image_model,
            prompt=prompt,
            config=types.GenerateContentConfig(
                response_modalities=["TEXT", "IMAGE"],
                image_config=types.ImageConfig(
                    aspect_ratio=aspect_ratio,
                    image_size=image_size,
                ),
            ),
        )
        return self._to_image_response(response)

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    @staticmethod
    def _generation_kwargs(
        system_instruction: Optional[str], temperature: Optional[float]
    ) -> Dict[str, Any]:
        config_kwargs: Dict[str, Any] = {}
        if system_instruction:
            config_kwargs["system_instruction"] = system_instruction
        if temperature is not None:
            config_kwargs["temperature"] = temperature
        return config_kwargs

    async def _generate(
        self,
        operation: str,
        model: str,
        prompt: str,
        config: Optional[types.GenerateContentConfig],
    ) -> types.GenerateContentResponse:
        """
        Issue exactly one generate_content call.

        Raises:
            ProviderError: Any failure, classified by kind
        """
        api_key = await self.key_manager.get_active_key()
        key_name = self.key_manager.key_name(api_key)
        client = self._client_for(api_key)

        logger.debug(f"Gemini {operation} with model={model}, key={key_name}")

        started = time.perf_counter()
        try:
            response = await asyncio.to_thread(
                client.models.generate_content,
                model=model,
                contents=prompt,
                config=config,
            )
        except Exception as error:
            provider_error = self._classify_error(error, key_name)
            await self.key_manager.record_failure(
                api_key,
                error=str(error),
                quota_exhausted=isinstance(provider_error, RateLimitedError),
            )
            logger.warning(
                f"Gemini {operation} failed ({provider_error.kind.value}): "
                f"{type(error).__name__}: {error}"
            )
            raise provider_error from error

        await self.key_manager.record_success(api_key)
        log_performance(
            logger,
            f"gemini.{operation}",
            (time.perf_counter() - started) * 1000,
            {"model": model, "key_name": key_name},
        )

        self._raise_if_blocked(response, key_name)
        return response

    @staticmethod
    def _is_quota_error(error: Exception) -> bool:
        """Detect quota exhaustion from the error text."""
        error_str = str(error).lower()
        quota_indicators = [
            "quota",
            "rate_limit",
            "rate limit",
            "resource_exhausted",
            "too many requests",
        ]
        return any(indicator in error_str for indicator in quota_indicators)

    def _classify_error(
        self, error: Exception, key_name: Optional[str] = None
    ) -> ProviderError:
        """Map an SDK or transport exception onto the ProviderError taxonomy."""
        if isinstance(error, ProviderError):
            return error

        message = f"{type(error).__name__}: {error}"
        code = getattr(error, "code", None) if isinstance(error, genai_errors.APIError) else None

        if code == 429 or self._is_quota_error(error):
            return RateLimitedError(message, key_name=key_name, original_error=error)
        if isinstance(error, genai_errors.ServerError):
            return ProviderUnavailableError(message, key_name=key_name, original_error=error)
        if isinstance(error, genai_errors.ClientError):
            return InvalidRequestError(message, key_name=key_name, original_error=error)
        if isinstance(error, (httpx.TransportError, ConnectionError, TimeoutError)):
            return ProviderUnavailableError(message, key_name=key_name, original_error=error)
        return UnknownProviderError(message, key_name=key_name, original_error=error)

    @staticmethod
    def _raise_if_blocked(
        response: types.GenerateContentResponse, key_name: Optional[str] = None
    ) -> None:
        """A blocked prompt is a provider-reported failure, not an empty answer."""
        feedback = response.prompt_feedback
        if feedback is not None and feedback.block_reason:
            reason = getattr(feedback.block_reason, "value", feedback.block_reason)
            raise InvalidRequestError(
                f"Prompt blocked by provider: {reason}", key_name=key_name
            )

    # ------------------------------------------------------------------
    # Raw response parsing (first candidate only)
    # ------------------------------------------------------------------

    @staticmethod
    def _first_candidate(
        response: types.GenerateContentResponse,
    ) -> Optional[types.Candidate]:
        candidates = response.candidates or []
        return candidates[0] if candidates else None

    @staticmethod
    def _answer_parts(candidate: Optional[types.Candidate]) -> List[types.Part]:
        """Content parts of a candidate, without the model's thought parts."""
        if candidate is None or candidate.content is None:
            return []
        return [part for part in candidate.content.parts or [] if not part.thought]

    @classmethod
    def _candidate_text(cls, candidate: Optional[types.Candidate]) -> Optional[str]:
        texts = [part.text for part in cls._answer_parts(candidate) if part.text]
        return "".join(texts) if texts else None

    @classmethod
    def _to_text_response(cls, response: types.GenerateContentResponse) -> TextResponse:
        return TextResponse(text=cls._candidate_text(cls._first_candidate(response)))

    @classmethod
    def _to_grounded_response(
        cls, response: types.GenerateContentResponse
    ) -> GroundedTextResponse:
        candidate = cls._first_candidate(response)
        citations: List[Citation] = []

        metadata = candidate.grounding_metadata if candidate is not None else None
        for chunk in (metadata.grounding_chunks if metadata is not None else None) or []:
            web = chunk.web
            if web is None:
                citations.append(Citation())
            else:
                citations.append(Citation(uri=web.uri, title=web.title))

        return GroundedTextResponse(
            text=cls._candidate_text(candidate),
            citations=citations,
        )

    @classmethod
    def _to_image_response(cls, response: types.GenerateContentResponse) -> ImageResponse:
        parts: List[ResponsePart] = []
        for part in cls._answer_parts(cls._first_candidate(response)):
            inline_data = None
            if part.inline_data is not None and part.inline_data.data:
                inline_data = ImagePayload(
                    data=part.inline_data.data,
                    mime_type=part.inline_data.mime_type,
                )
            parts.append(ResponsePart(text=part.text, inline_data=inline_data))
        return ImageResponse(parts=parts)

    # ------------------------------------------------------------------
    # Key pool status
    # ------------------------------------------------------------------

    def get_key_metrics(self) -> Dict[str, Any]:
        """Get current usage metrics for all API keys."""
        return self.key_manager.get_metrics()

    def get_status_summary(self) -> str:
        """Get a human-readable status summary of all keys."""
        return self.key_manager.get_status_summary()

    def log_status(self) -> None:
        """Log the current status of all keys"""
        logger.info(f"\n{self.get_status_summary()}")
