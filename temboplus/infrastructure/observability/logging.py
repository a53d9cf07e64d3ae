"""Structured JSON logging for gateway calls"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pythonjsonlogger.json import JsonFormatter

from temboplus.config import settings

logger = logging.getLogger("temboplus")


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    root = logging.getLogger()
    root.setLevel(level)

    # Remove existing handlers
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
    handler.setFormatter(formatter)
    root.addHandler(handler)


def log_gateway_call(
    operation: str,
    method: str,
    path: str,
    request_id: str,
    outcome: str,
    duration_ms: float,
    http_status: Optional[int] = None,
    transaction_ref: Optional[str] = None,
) -> None:
    """Log one gateway round trip. Credentials are never part of the record."""
    level = logging.INFO if outcome == "success" else logging.WARNING
    logger.log(
        level,
        "Gateway call completed",
        extra={
            "operation": operation,
            "method": method,
            "path": path,
            "request_id": request_id,
            "transaction_ref": transaction_ref,
            "http_status": http_status,
            "outcome": outcome,
            "duration_ms": duration_ms,
        },
    )
