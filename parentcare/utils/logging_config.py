"""
ParentCare Logging Configuration
JSON log records for deployed shells, plain text lines for local development
"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pythonjsonlogger import jsonlogger

# Record attributes copied into the JSON payload when a call site sets them
CONTEXT_FIELDS = ("use_case", "operation", "model", "key_name")


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Adds timestamp, level, service and advisory context to each record"""

    def __init__(self, *args: Any, service_name: Optional[str] = None, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.service_name = service_name

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = self.service_name or record.name.split(".")[0]

        for name in CONTEXT_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                log_record[name] = value


def build_formatter(json_logs: bool, service_name: Optional[str] = None) -> logging.Formatter:
    if json_logs:
        return CustomJsonFormatter(
            service_name=service_name,
            fmt="%(timestamp)s %(level)s %(name)s %(message)s",
            rename_fields={"name": "logger", "lineno": "line"},
        )
    return logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def setup_logging(
    service_name: str = "parentcare", log_level: str = "INFO", json_logs: bool = True
) -> logging.Logger:
    """
    Configure the package root logger once, for applications embedding the library

    Args:
        service_name: Root logger name
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        json_logs: JSON records (deployments) or plain lines (development)

    Returns:
        The configured root logger
    """
    level = getattr(logging, log_level.upper())

    logger = logging.getLogger(service_name)
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(build_formatter(json_logs, service_name))
    logger.addHandler(handler)
    logger.propagate = False

    return logger


# ============================================================================
# STRUCTURED LOGGING HELPERS
# ============================================================================


def log_error_with_context(
    logger: logging.Logger, error: Exception, context: Optional[Dict[str, Any]] = None
) -> None:
    """
    Log a handled failure with its traceback

    Args:
        logger: Logger of the failing module
        error: The exception that was caught
        context: Extra fields such as ``use_case`` or ``scenario``
    """
    extra: Dict[str, Any] = {
        "error_type": type(error).__name__,
        "error_message": str(error),
    }
    extra.update(context or {})

    logger.error(
        f"{extra.get('use_case', 'advisory')} failed: {type(error).__name__}: {error}",
        exc_info=True,
        extra=extra,
    )


def log_performance(
    logger: logging.Logger,
    operation: str,
    duration_ms: float,
    metadata: Optional[Dict[str, Any]] = None,
) -> None:
    """Log how long one provider round-trip took"""
    extra: Dict[str, Any] = {"operation": operation, "duration_ms": round(duration_ms, 1)}
    extra.update(metadata or {})

    logger.info(f"{operation} took {duration_ms:.1f}ms", extra=extra)
