from __future__ import annotations

from typing import Any

from ..common.datetime_utils import parse_iso_datetime
from ..core.enums import ClockEventType, DeviceType
from ..core.exceptions import ValidationError
from .model import ClockEvent, ComputedDailyRecord, EmployeeStatus


def parse_event_type(value: Any) -> ClockEventType:
    try:
        return ClockEventType(value)
    except ValueError as e:
        raise ValidationError(f"Unknown clock event type: {value!r}") from e


def parse_device(value: Any) -> DeviceType:
    try:
        return DeviceType(value)
    except ValueError as e:
        raise ValidationError(f"Unknown device: {value!r}") from e


def event_to_dict(event: ClockEvent) -> dict[str, Any]:
    return {
        "id": event.id,
        "type": event.type.value,
        "timestamp": event.timestamp.isoformat(),
        "device": event.device.value,
        "location": event.location,
    }


def event_from_dict(data: dict[str, Any]) -> ClockEvent:
    try:
        timestamp = parse_iso_datetime(str(data["timestamp"]))
        event_id = str(data["id"])
    except (KeyError, ValueError) as e:
        raise ValidationError(f"Invalid clock event: {data!r}") from e
    return ClockEvent(
        id=event_id,
        type=parse_event_type(data.get("type")),
        timestamp=timestamp,
        device=parse_device(data.get("device")),
        location=str(data.get("location") or ""),
    )


def computed_to_dict(record: ComputedDailyRecord) -> dict[str, Any]:
    return {
        "id": record.id,
        "employee_id": record.employee_id,
        "date": record.date.isoformat(),
        "events": [event_to_dict(e) for e in record.events],
        "worked_minutes": record.worked_minutes,
        "break_minutes": record.break_minutes,
        "recorded_break_minutes": record.recorded_break_minutes,
        "scheduled_break_minutes": record.scheduled_break_minutes,
        "pending_break_minutes": record.pending_break_minutes,
        "ignored_break_minutes": record.ignored_break_minutes,
        "automatic_break_detected": record.automatic_break_detected,
    }


def status_to_dict(status: EmployeeStatus) -> dict[str, Any]:
    return {
        "state": status.state.value,
        "last_event_type": status.last_event_type.value if status.last_event_type else None,
        "last_event_time": status.last_event_time.isoformat() if status.last_event_time else None,
        "live_minutes": status.live_minutes,
    }
