"""Logging configuration and event emission."""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

from pydantic import BaseModel
from pythonjsonlogger import jsonlogger


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        if not log_record.get("timestamp"):
            # Use ISO8601 format
            log_record["timestamp"] = self.formatTime(record, self.datefmt)
        if log_record.get("level"):
            log_record["level"] = log_record["level"].upper()
        else:
            log_record["level"] = record.levelname


def setup_logging(level: str = "INFO", service_name: str = "pricewatch") -> None:
    """Configure root logger with JSON formatting."""

    log_level = getattr(logging, level.upper(), logging.INFO)
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Clear existing handlers
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    # LOG_FORMAT=text keeps human readable output for local runs
    if os.environ.get("LOG_FORMAT", "json").lower() == "json":
        log_handler = logging.StreamHandler(sys.stderr)
        formatter = CustomJsonFormatter(  # type: ignore[no-untyped-call]
            "%(timestamp)s %(level)s %(name)s %(message)s",
            json_ensure_ascii=False,
            static_fields={"service": service_name},
        )
        log_handler.setFormatter(formatter)
        root_logger.addHandler(log_handler)
    else:
        from rich.logging import RichHandler

        rich_handler = RichHandler(
            rich_tracebacks=True,
            markup=False,
            show_time=True,
            show_path=False,
        )
        root_logger.addHandler(rich_handler)


def log_event(event: BaseModel, *, level: int = logging.INFO) -> None:
    """Log a structured domain event."""
    logger = logging.getLogger("pricewatch.event")

    payload = event.model_dump(mode="json", exclude_none=True)
    extra = {"event_type": event.__class__.__name__, "event_data": payload}

    logger.log(level, f"Event: {event.__class__.__name__}", extra=extra)


__all__ = ["CustomJsonFormatter", "log_event", "setup_logging"]
