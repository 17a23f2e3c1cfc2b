from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

import pytest

from parentcare.gemini.config import GeminiConfig, get_gemini_config
from parentcare.gemini.provider import AdvisoryProvider
from parentcare.models.activity import ActivityCategory, ActivityLogEntry
from parentcare.models.provider import (
    Citation,
    GroundedTextResponse,
    ImagePayload,
    ImageResponse,
    ResponsePart,
    TextResponse,
)
from parentcare.utils.config import get_settings


class StubProvider(AdvisoryProvider):
    """Records every call and answers with canned responses or errors."""

    def __init__(
        self,
        text: Optional[TextResponse] = None,
        grounded: Optional[GroundedTextResponse] = None,
        image: Optional[ImageResponse] = None,
        text_error: Optional[Exception] = None,
        grounded_error: Optional[Exception] = None,
        image_error: Optional[Exception] = None,
    ) -> None:
        self.text = text or TextResponse(text="stub text")
        self.grounded = grounded or GroundedTextResponse(text="stub grounded")
        self.image = image or ImageResponse()
        self.text_error = text_error
        self.grounded_error = grounded_error
        self.image_error = image_error
        self.calls: list[tuple[str, str, dict[str, Any]]] = []

    def calls_for(self, capability: str) -> list[tuple[str, str, dict[str, Any]]]:
        return [call for call in self.calls if call[0] == capability]

    async def generate_text(self, prompt, *, system_instruction=None, model=None, temperature=None):
        self.calls.append(
            ("text", prompt, {"system_instruction": system_instruction, "model": model, "temperature": temperature})
        )
        if self.text_error:
            raise self.text_error
        return self.text

    async def generate_grounded_text(self, prompt, *, system_instruction=None, model=None, temperature=None):
        self.calls.append(
            ("grounded", prompt, {"system_instruction": system_instruction, "model": model, "temperature": temperature})
        )
        if self.grounded_error:
            raise self.grounded_error
        return self.grounded

    async def generate_image(self, prompt, *, aspect_ratio, image_size, model=None):
        self.calls.append(
            ("image", prompt, {"aspect_ratio": aspect_ratio, "image_size": image_size, "model": model})
        )
        if self.image_error:
            raise self.image_error
        return self.image


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    # Keep host GEMINI_* variables out of the tests
    for name in (
        "GEMINI_API_KEY",
        "GEMINI_API_KEYS",
        "GEMINI_TEXT_MODEL",
        "GEMINI_IMAGE_MODEL",
        "GEMINI_IMAGE_ASPECT_RATIO",
        "GEMINI_IMAGE_SIZE",
        "GEMINI_DEFAULT_TEMPERATURE",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    get_gemini_config.cache_clear()
    yield
    get_settings.cache_clear()
    get_gemini_config.cache_clear()


@pytest.fixture
def make_provider():
    return StubProvider


@pytest.fixture
def gemini_config() -> GeminiConfig:
    return GeminiConfig(api_key="test-key")


@pytest.fixture
def sample_citations() -> list[Citation]:
    return [
        Citation(uri="https://www.aap.org/fever", title="Fever and Your Child - AAP"),
        Citation(uri=None, title="Missing URI"),
        Citation(uri="https://dxy.com/article/1", title=None),
        Citation(uri="https://www.cdc.gov/growth", title="Child Development - CDC"),
    ]


@pytest.fixture
def sample_entries() -> list[ActivityLogEntry]:
    return [
        ActivityLogEntry(
            id="3",
            timestamp=datetime(2025, 3, 2, 12, 15, tzinfo=timezone.utc),
            category=ActivityCategory.POOP,
            detail="黄色软便",
        ),
        ActivityLogEntry(
            id="2",
            timestamp=datetime(2025, 3, 2, 10, 0, tzinfo=timezone.utc),
            category=ActivityCategory.WATER,
            detail="200ml",
            note="主动要水喝",
        ),
        ActivityLogEntry(
            id="1",
            timestamp=datetime(2025, 3, 2, 7, 30, tzinfo=timezone.utc),
            category=ActivityCategory.FOOD,
            detail="西兰花和米饭",
        ),
    ]


@pytest.fixture
def png_image_response() -> ImageResponse:
    return ImageResponse(
        parts=[
            ResponsePart(text="Here is the illustration."),
            ResponsePart(inline_data=ImagePayload(data=b"\x89PNG first", mime_type="image/png")),
            ResponsePart(inline_data=ImagePayload(data=b"second", mime_type="image/jpeg")),
        ]
    )
