"""
Advisory Provider Interface
Capabilities the advisory use cases expect from a generative-AI provider
"""

from abc import ABC, abstractmethod
from typing import Optional

from parentcare.models.provider import GroundedTextResponse, ImageResponse, TextResponse


class AdvisoryProvider(ABC):
    """
    Three capabilities, one network round-trip each.

    Implementations raise ``ProviderError`` subclasses on failure and never
    return an empty response in place of a provider-reported error.
    """

    @abstractmethod
    async def generate_text(
        self,
        prompt: str,
        *,
        system_instruction: Optional[str] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> TextResponse:
        """Generate plain text."""

    @abstractmethod
    async def generate_grounded_text(
        self,
        prompt: str,
        *,
        system_instruction: Optional[str] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> GroundedTextResponse:
        """Generate text with search grounding enabled."""

    @abstractmethod
    async def generate_image(
        self,
        prompt: str,
        *,
        aspect_ratio: str,
        image_size: str,
        model: Optional[str] = None,
    ) -> ImageResponse:
        """Generate content with inline image output."""
