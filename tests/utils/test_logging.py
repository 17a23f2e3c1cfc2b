import json
import logging

from parentcare.utils.errors import NotFoundError, ParentCareException, ValidationError
from parentcare.utils.logging_config import (
    build_formatter,
    log_error_with_context,
    log_performance,
    setup_logging,
)


def _record(name: str = "parentcare.gemini.client", **attributes) -> logging.LogRecord:
    record = logging.LogRecord(name, logging.INFO, __file__, 10, "took %sms", (12,), None)
    for key, value in attributes.items():
        setattr(record, key, value)
    return record


def test_json_formatter_adds_service_and_context() -> None:
    formatter = build_formatter(json_logs=True)

    payload = json.loads(formatter.format(_record(use_case="knowledge", model="gemini-2.5-flash")))

    assert payload["message"] == "took 12ms"
    assert payload["level"] == "INFO"
    assert payload["service"] == "parentcare"
    assert payload["logger"] == "parentcare.gemini.client"
    assert payload["use_case"] == "knowledge"
    assert payload["model"] == "gemini-2.5-flash"
    assert "timestamp" in payload
    assert "key_name" not in payload


def test_json_formatter_uses_configured_service_name() -> None:
    formatter = build_formatter(json_logs=True, service_name="parentcare-shell")
    assert json.loads(formatter.format(_record()))["service"] == "parentcare-shell"


def test_plain_formatter_for_development() -> None:
    line = build_formatter(json_logs=False).format(_record())
    assert " - parentcare.gemini.client - INFO - took 12ms" in line


def test_setup_logging_replaces_handlers() -> None:
    logger = setup_logging("parentcare-setup-test", log_level="debug", json_logs=True)
    logger = setup_logging("parentcare-setup-test", log_level="warning", json_logs=False)

    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING
    assert logger.propagate is False


def test_log_error_with_context_keeps_traceback(caplog) -> None:
    logger = logging.getLogger("parentcare.tests.errors")

    with caplog.at_level(logging.ERROR, logger="parentcare.tests.errors"):
        try:
            raise ValueError("bad payload")
        except ValueError as error:
            log_error_with_context(logger, error, {"use_case": "illness_guidance"})

    (record,) = caplog.records
    assert record.use_case == "illness_guidance"
    assert record.error_type == "ValueError"
    assert record.exc_info is not None
    assert "illness_guidance failed" in record.getMessage()


def test_log_performance_records_duration(caplog) -> None:
    logger = logging.getLogger("parentcare.tests.performance")

    with caplog.at_level(logging.INFO, logger="parentcare.tests.performance"):
        log_performance(logger, "gemini.generate_text", 123.456, {"model": "m"})

    (record,) = caplog.records
    assert record.operation == "gemini.generate_text"
    assert record.duration_ms == 123.5
    assert record.model == "m"


def test_error_types_carry_status_codes() -> None:
    assert ValidationError("blank").status_code == 400
    assert NotFoundError("missing", details={"id": "x"}).details == {"id": "x"}
    assert isinstance(NotFoundError("missing"), ParentCareException)
    assert ParentCareException("boom").details == {}
