import asyncio

import pytest
from parentcare.advisory.catalog import (
    COMMON_SYMPTOMS,
    EMERGENCY_SCENARIOS,
    SUGGESTED_TOPICS,
    get_emergency_scenario,
)
from parentcare.advisory.prompts import SUMMARY_NO_LOGS_MESSAGE
from parentcare.advisory.service import AdvisoryService
from parentcare.gemini.client import GeminiProviderClient
from parentcare.models.activity import ActivityCategory, ActivityLog
from parentcare.models.provider import GroundedTextResponse, TextResponse
from parentcare.utils.errors import NotFoundError


def _run(coroutine):
    return asyncio.run(coroutine)


def test_service_routes_each_flow_through_one_provider(make_provider, gemini_config) -> None:
    provider = make_provider(
        text=TextResponse(text="summary or guide"),
        grounded=GroundedTextResponse(text="grounded answer"),
    )
    service = AdvisoryService(provider, gemini_config)
    log = ActivityLog()
    log.add(ActivityCategory.MILK, "200ml")

    assert _run(service.summarize_logs(log)) == "summary or guide"
    assert _run(service.ask_knowledge("如何应对宝宝发脾气")).text == "grounded answer"
    assert _run(service.check_illness("呕吐腹泻")).text == "grounded answer"
    assert _run(service.emergency_guide("烧伤/烫伤")).text == "summary or guide"
    assert _run(service.emergency_guide_for("cpr")).text == "summary or guide"

    assert [call[0] for call in provider.calls] == [
        "text",
        "grounded",
        "grounded",
        "text",
        "image",
        "text",
        "image",
    ]


def test_service_summary_of_empty_log(make_provider, gemini_config) -> None:
    provider = make_provider()
    service = AdvisoryService(provider, gemini_config)

    assert _run(service.summarize_logs(ActivityLog())) == SUMMARY_NO_LOGS_MESSAGE
    assert provider.calls == []


def test_service_from_env_builds_gemini_client(monkeypatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "env-key")

    service = AdvisoryService.from_env()

    assert isinstance(service.provider, GeminiProviderClient)
    assert service.provider.key_manager.keys[0].value == "env-key"
    assert service.emergency.gemini_config.image_aspect_ratio == "16:9"


def test_emergency_catalog_entries() -> None:
    assert [scenario.id for scenario in EMERGENCY_SCENARIOS] == [
        "choking",
        "burns",
        "cpr",
        "poison",
        "head",
        "seizure",
    ]
    assert get_emergency_scenario("seizure").title == "惊厥/抽搐"
    assert get_emergency_scenario("head").subtitle == "Head Injury"


def test_emergency_catalog_unknown_id_lists_available() -> None:
    with pytest.raises(NotFoundError) as exc_info:
        get_emergency_scenario("unknown")

    assert exc_info.value.status_code == 404
    assert "choking" in exc_info.value.details["available"]


def test_quick_pick_catalogs_are_not_blank() -> None:
    assert SUGGESTED_TOPICS and all(topic.strip() for topic in SUGGESTED_TOPICS)
    assert COMMON_SYMPTOMS and all(symptom.strip() for symptom in COMMON_SYMPTOMS)
