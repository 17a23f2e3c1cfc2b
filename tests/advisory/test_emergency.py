import asyncio
import base64

import pytest
from parentcare.advisory.emergency import EmergencyGuideComposer
from parentcare.advisory.prompts import EMERGENCY_EMPTY_MESSAGE, EMERGENCY_ERROR_MESSAGE
from parentcare.gemini.config import AdvisoryTask, GeminiConfig
from parentcare.gemini.exceptions import (
    InvalidRequestError,
    ProviderUnavailableError,
    RateLimitedError,
)
from parentcare.models.provider import ImageResponse, ResponsePart, TextResponse
from parentcare.utils.errors import NotFoundError, ValidationError


def _run(coroutine):
    return asyncio.run(coroutine)


def test_text_failure_returns_fallback_without_requesting_image(make_provider, gemini_config) -> None:
    provider = make_provider(text_error=ProviderUnavailableError("timeout"))
    composer = EmergencyGuideComposer(provider, gemini_config)

    result = _run(composer.compose("噎食/窒息"))

    assert result.text == EMERGENCY_ERROR_MESSAGE
    assert result.image_url is None
    assert not result.has_image
    assert provider.calls_for("image") == []


def test_image_failure_keeps_guide_text(make_provider, gemini_config) -> None:
    guide = "1. 让孩子前倾\n2. 拍背5次"
    provider = make_provider(
        text=TextResponse(text=guide),
        image_error=RateLimitedError("image quota exceeded"),
    )
    composer = EmergencyGuideComposer(provider, gemini_config)

    result = _run(composer.compose("噎食/窒息"))

    assert result.text == guide
    assert result.image_url is None
    assert len(provider.calls_for("image")) == 1


def test_successful_guide_includes_data_uri(make_provider, gemini_config, png_image_response) -> None:
    provider = make_provider(text=TextResponse(text="冷水冲洗伤处"), image=png_image_response)
    composer = EmergencyGuideComposer(provider, gemini_config)

    result = _run(composer.compose("烧伤/烫伤"))

    encoded = base64.b64encode(b"\x89PNG first").decode("ascii")
    assert result.text == "冷水冲洗伤处"
    assert result.image_url == f"data:image/png;base64,{encoded}"
    assert result.has_image
    assert [call[0] for call in provider.calls] == ["text", "image"]


def test_image_request_parameters(make_provider, gemini_config) -> None:
    provider = make_provider()
    _run(EmergencyGuideComposer(provider, gemini_config).compose("心肺复苏"))

    (text_call,) = provider.calls_for("text")
    (image_call,) = provider.calls_for("image")

    assert "【心肺复苏】" in text_call[1]
    assert text_call[2]["system_instruction"] is None
    assert text_call[2]["model"] == gemini_config.text_model

    assert "心肺复苏" in image_call[1]
    assert "No text in image" in image_call[1]
    assert image_call[2] == {
        "aspect_ratio": "16:9",
        "image_size": "1K",
        "model": gemini_config.image_model,
    }


def test_image_settings_come_from_config(make_provider) -> None:
    config = GeminiConfig(api_key="k", image_aspect_ratio="4:3", image_size="2K", image_model="image-model")
    provider = make_provider()

    _run(EmergencyGuideComposer(provider, config).compose("头部受伤"))

    (image_call,) = provider.calls_for("image")
    assert image_call[2] == {"aspect_ratio": "4:3", "image_size": "2K", "model": "image-model"}


def test_image_response_without_image_yields_none(make_provider, gemini_config) -> None:
    provider = make_provider(
        text=TextResponse(text="保持侧卧"),
        image=ImageResponse(parts=[ResponsePart(text="I cannot draw that.")]),
    )
    result = _run(EmergencyGuideComposer(provider, gemini_config).compose("惊厥/抽搐"))

    assert result.text == "保持侧卧"
    assert result.image_url is None


def test_empty_guide_text_uses_default_and_still_illustrates(make_provider, gemini_config) -> None:
    provider = make_provider(text=TextResponse(text=None))
    result = _run(EmergencyGuideComposer(provider, gemini_config).compose("误食/中毒"))

    assert result.text == EMERGENCY_EMPTY_MESSAGE
    assert len(provider.calls_for("image")) == 1


def test_blocked_guide_text_is_a_failure(make_provider, gemini_config) -> None:
    provider = make_provider(text_error=InvalidRequestError("Prompt blocked by provider: SAFETY"))
    result = _run(EmergencyGuideComposer(provider, gemini_config).compose("误食/中毒"))

    assert result.text == EMERGENCY_ERROR_MESSAGE
    assert provider.calls_for("image") == []


def test_compose_scenario_uses_catalog_title(make_provider, gemini_config) -> None:
    provider = make_provider()
    _run(EmergencyGuideComposer(provider, gemini_config).compose_scenario("choking"))

    assert "【噎食/窒息】" in provider.calls_for("text")[0][1]


def test_compose_scenario_unknown_id(make_provider, gemini_config) -> None:
    provider = make_provider()
    with pytest.raises(NotFoundError):
        _run(EmergencyGuideComposer(provider, gemini_config).compose_scenario("drowning"))
    assert provider.calls == []


def test_blank_scenario_is_rejected(make_provider, gemini_config) -> None:
    provider = make_provider()
    with pytest.raises(ValidationError):
        _run(EmergencyGuideComposer(provider, gemini_config).compose("  "))
    assert provider.calls == []


class _NoIllustrationModelConfig(GeminiConfig):
    def get_model_for_task(self, task: AdvisoryTask) -> str:
        if task == AdvisoryTask.EMERGENCY_ILLUSTRATION:
            raise RuntimeError("illustration model not configured")
        return super().get_model_for_task(task)


def test_invalid_environment_config_returns_call_120_message(make_provider, monkeypatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "env-key")
    monkeypatch.setenv("GEMINI_DEFAULT_TEMPERATURE", "3")
    provider = make_provider()

    result = _run(EmergencyGuideComposer(provider).compose("噎食/窒息"))

    assert result.text == EMERGENCY_ERROR_MESSAGE
    assert result.image_url is None
    assert provider.calls == []


def test_illustration_config_failure_keeps_guide_text(make_provider) -> None:
    provider = make_provider(text=TextResponse(text="拍背5次"))
    config = _NoIllustrationModelConfig(api_key="k")

    result = _run(EmergencyGuideComposer(provider, config).compose("噎食/窒息"))

    assert result.text == "拍背5次"
    assert result.image_url is None
    assert [call[0] for call in provider.calls] == ["text"]
