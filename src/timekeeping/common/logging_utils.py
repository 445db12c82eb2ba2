from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

# Context keys passed through `extra=` by the services, sync worker and app factory.
CONTEXT_FIELDS = (
    "employee_id",
    "record_id",
    "event_id",
    "event_type",
    "action",
    "count",
    "path",
    "settings",
    "persistence",
    "tables",
    "schema_path",
)


class JsonFormatter(logging.Formatter):
    """One JSON object per line with the clock context keys that were set."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "thread": record.threadName,
            "message": record.getMessage(),
        }

        for key in CONTEXT_FIELDS:
            value = getattr(record, key, None)
            if value is not None:
                payload[key] = value

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str, ensure_ascii=False)


def configure_logging(level: str | int = logging.INFO) -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    # mysql-connector is chatty at DEBUG.
    logging.getLogger("mysql.connector").setLevel(logging.WARNING)
