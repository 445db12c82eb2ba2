from __future__ import annotations

import json
import logging
import sys

from timekeeping.common.logging_utils import JsonFormatter


def _record(msg: str, *, exc_info=None, **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="timekeeping.attendance.sync",
        level=logging.ERROR,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_clock_context_keys_are_included():
    line = JsonFormatter().format(_record("Clock record sync failed", action="upsert", record_id="clock-emp-1-2025-09-22"))

    payload = json.loads(line)
    assert payload["message"] == "Clock record sync failed"
    assert payload["level"] == "ERROR"
    assert payload["action"] == "upsert"
    assert payload["record_id"] == "clock-emp-1-2025-09-22"
    assert "employee_id" not in payload


def test_unknown_attributes_are_not_dumped():
    payload = json.loads(JsonFormatter().format(_record("x", password="hunter2")))

    assert "password" not in payload
    assert "args" not in payload


def test_exception_is_rendered():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        payload = json.loads(JsonFormatter().format(_record("failed", exc_info=sys.exc_info())))

    assert "RuntimeError: boom" in payload["exception"]
