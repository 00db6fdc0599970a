"""
Log output for the HTTP service.

The ledger modules only log through logging.getLogger(__name__)
and attach context with `extra=`. This module decides how those
records leave the process: one JSON object per line on stdout,
stamped with the service name and environment.
"""

import logging
import sys
from datetime import datetime, timezone

from pythonjsonlogger.json import JsonFormatter

SERVICE_NAME = "bank-ledger"


class LedgerJsonFormatter(JsonFormatter):

    def __init__(self, *args, environment: str = "development", **kwargs):
        super().__init__(*args, **kwargs)
        self.environment = environment

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.fromtimestamp(
            record.created, tz=timezone.utc
        ).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = SERVICE_NAME
        log_record["environment"] = self.environment


def setup_logging(level: str = "INFO", environment: str = "development") -> None:
    """Replace the root handlers with a single JSON handler on stdout."""
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        LedgerJsonFormatter(
            "%(name)s %(message)s",
            environment=environment,
        )
    )
    root.addHandler(handler)
