"""Structured JSON logging for transaction observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def __init__(self, *args: Any, service_name: str = "vending-machine", **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.service_name = service_name

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = self.service_name


def setup_logging(level: str = "WARNING", service_name: str = "vending-machine") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level.upper())

    # Remove existing handlers
    logger.handlers.clear()

    # stdout carries the change instructions, logs go to stderr
    handler = logging.StreamHandler(sys.stderr)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s",
        service_name=service_name,
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_transaction(
    currency: str,
    cost: int,
    payment: int,
    outcome: str,
    coin_count: int,
    duration_ms: float,
) -> None:
    """Log structured transaction outcome for analysis"""
    logging.info(
        "Transaction completed",
        extra={
            "currency": currency,
            "cost": cost,
            "payment": payment,
            "change": payment - cost,
            "step": "transaction_complete",
            "outcome": outcome,
            "coin_count": coin_count,
            "duration_ms": duration_ms,
        },
    )
