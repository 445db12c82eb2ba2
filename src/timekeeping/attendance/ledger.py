"""Event ledger: append-only clock events grouped per employee per day.

All functions are pure: they take the current collection and return a new one.
The caller (see `TimeTrackingService`) serializes writes and handles persistence.
"""
from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from .model import ClockEvent, DailyAttendanceRecord

Records = tuple[DailyAttendanceRecord, ...]


def record_id_for(employee_id: str, work_date: date) -> str:
    return f"clock-{employee_id}-{work_date.isoformat()}"


def find_record(
    records: Sequence[DailyAttendanceRecord], employee_id: str, work_date: date
) -> Optional[DailyAttendanceRecord]:
    for record in records:
        if record.employee_id == employee_id and record.date == work_date:
            return record
    return None


def get_record(records: Sequence[DailyAttendanceRecord], record_id: str) -> Optional[DailyAttendanceRecord]:
    for record in records:
        if record.id == record_id:
            return record
    return None


def append_event(
    records: Sequence[DailyAttendanceRecord],
    employee_id: str,
    event: ClockEvent,
    *,
    today: date | None = None,
) -> tuple[Records, DailyAttendanceRecord]:
    """Append `event` to the employee's record for `today`, creating it if absent.

    `today` defaults to the calendar date of the event timestamp. No sequencing
    checks happen here; malformed sequences are tolerated by the computation.
    Returns the new collection and the created-or-updated record.
    """
    work_date = today or event.timestamp.date()
    existing = find_record(records, employee_id, work_date)

    if existing is None:
        created = DailyAttendanceRecord(
            id=record_id_for(employee_id, work_date),
            employee_id=employee_id,
            date=work_date,
            events=(event,),
        )
        return (*records, created), created

    updated = DailyAttendanceRecord(
        id=existing.id,
        employee_id=existing.employee_id,
        date=existing.date,
        events=(*existing.events, event),
    )
    return tuple(updated if r is existing else r for r in records), updated


def remove_event(
    records: Sequence[DailyAttendanceRecord], record_id: str, event_id: str
) -> tuple[Records, Optional[DailyAttendanceRecord]]:
    """Remove one event. A record left without events is dropped (returned as None)."""
    out: list[DailyAttendanceRecord] = []
    remaining: Optional[DailyAttendanceRecord] = None

    for record in records:
        if record.id != record_id:
            out.append(record)
            continue

        events = tuple(e for e in record.events if e.id != event_id)
        if not events:
            continue
        remaining = DailyAttendanceRecord(
            id=record.id,
            employee_id=record.employee_id,
            date=record.date,
            events=events,
        )
        out.append(remaining)

    return tuple(out), remaining


def remove_record(records: Sequence[DailyAttendanceRecord], record_id: str) -> Records:
    return tuple(r for r in records if r.id != record_id)
