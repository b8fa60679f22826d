"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

from credit_calculator.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_offers(request_id: str, offer_count: int, best_rate: str, duration_ms: float) -> None:
    """Log structured offer generation outcome"""
    logging.info(
        "Offers generated",
        extra={
            "request_id": request_id,
            "step": "offers_complete",
            "offer_count": offer_count,
            "best_rate": best_rate,
            "duration_ms": duration_ms,
        },
    )


def log_credit(request_id: str, rate: str, psk: str, term: int, duration_ms: float) -> None:
    """Log structured credit calculation outcome"""
    logging.info(
        "Credit calculated",
        extra={
            "request_id": request_id,
            "step": "credit_complete",
            "rate": rate,
            "psk": psk,
            "term": term,
            "duration_ms": duration_ms,
        },
    )


def log_rejection(request_id: str, operation: str, rule: str, reason: str) -> None:
    """Log a request rejected by a lending rule"""
    logging.warning(
        "Request rejected",
        extra={
            "request_id": request_id,
            "operation": operation,
            "rule": rule,
            "reason": reason,
        },
    )
