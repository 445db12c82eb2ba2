from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from typing import Optional

from ..common.datetime_utils import minutes_between, now_local
from ..core.enums import ClockEventType, EmployeeStatusState
from .model import ComputedDailyRecord, EmployeeStatus

_OPEN_SEGMENT_TYPES = (ClockEventType.CLOCK_IN, ClockEventType.BREAK_END)


def open_segment_start(record: ComputedDailyRecord) -> Optional[datetime]:
    """Start of the running work segment, if the last event opened one."""
    last = record.last_event
    if last is None or last.type not in _OPEN_SEGMENT_TYPES:
        return None
    return last.timestamp


def compute_live_adjusted_minutes(
    record: ComputedDailyRecord,
    *,
    now: datetime | None = None,
    tz: tzinfo | None = None,
) -> int:
    """Worked minutes including the still-open segment, for display only.

    Only a record dated today is extended; closed or past days return
    `worked_minutes` unchanged.
    """
    now = now or now_local(tz)
    start = open_segment_start(record)
    if start is None or record.date != now.date():
        return record.worked_minutes

    if start.tzinfo is None:
        start = start.replace(tzinfo=timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return record.worked_minutes + minutes_between(start, now)


def employee_status(
    record: Optional[ComputedDailyRecord],
    *,
    now: datetime | None = None,
    tz: tzinfo | None = None,
) -> EmployeeStatus:
    if record is None or not record.events:
        return EmployeeStatus(state=EmployeeStatusState.IDLE)

    last = record.events[-1]
    if last.type in _OPEN_SEGMENT_TYPES:
        state = EmployeeStatusState.WORKING
    elif last.type == ClockEventType.BREAK_START:
        state = EmployeeStatusState.BREAK
    else:
        state = EmployeeStatusState.OFF

    return EmployeeStatus(
        state=state,
        last_event_type=last.type,
        last_event_time=last.timestamp,
        live_minutes=compute_live_adjusted_minutes(record, now=now, tz=tz),
    )
