"""Daily work-time computation.

A pure projection from one day's raw clock events to worked/break totals.
Totals are re-derived on every read and never stored.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, Optional

from ..common.datetime_utils import minutes_between
from ..core.enums import ClockEventType
from .factory import BreakStrategyFactory
from .model import ClockEvent, ComputedDailyRecord, DailyAttendanceRecord
from .policy import DEFAULT_BREAK_POLICY, BreakPolicy

_DEFAULT_FACTORY = BreakStrategyFactory()


def _aware(ts: datetime) -> datetime:
    # Naive timestamps are read as UTC so mixed input still sorts and subtracts.
    return ts if ts.tzinfo is not None else ts.replace(tzinfo=timezone.utc)


def sort_events(events: Iterable[ClockEvent]) -> tuple[ClockEvent, ...]:
    return tuple(sorted(events, key=lambda e: _aware(e.timestamp)))


def _walk(events: Iterable[ClockEvent]) -> tuple[int, int]:
    """Fold sorted events into (worked, recorded break) minutes.

    `open_start` is the start of the running work segment, `break_start` the
    start of the running break. Events whose predecessor is missing add nothing.
    """
    worked = 0
    recorded_break = 0
    open_start: Optional[datetime] = None
    break_start: Optional[datetime] = None

    for event in events:
        ts = _aware(event.timestamp)

        if event.type == ClockEventType.CLOCK_IN:
            open_start = ts
        elif event.type == ClockEventType.BREAK_START:
            if open_start is not None:
                worked += minutes_between(open_start, ts)
            open_start = None
            break_start = ts
        elif event.type == ClockEventType.BREAK_END:
            if break_start is not None:
                recorded_break += minutes_between(break_start, ts)
                break_start = None
                open_start = ts
        elif event.type == ClockEventType.CLOCK_OUT:
            if open_start is not None:
                worked += minutes_between(open_start, ts)
                open_start = None

    return worked, recorded_break


def compute_daily_record(
    record: DailyAttendanceRecord,
    *,
    policy: BreakPolicy = DEFAULT_BREAK_POLICY,
    factory: BreakStrategyFactory | None = None,
) -> ComputedDailyRecord:
    events = sort_events(record.events)
    worked, recorded_break = _walk(events)

    is_scheduled = policy.is_scheduled_break_day(record.date)
    scheduled = policy.scheduled_minutes_for(record.date)

    strategy = (factory or _DEFAULT_FACTORY).for_day(
        is_scheduled_break_day=is_scheduled,
        recorded_break_minutes=recorded_break,
        scheduled_break_minutes=scheduled,
    )
    decision = strategy.reconcile(
        worked_minutes=worked,
        recorded_break_minutes=recorded_break,
        scheduled_break_minutes=scheduled,
    )

    return ComputedDailyRecord(
        id=record.id,
        employee_id=record.employee_id,
        date=record.date,
        events=events,
        worked_minutes=decision.worked_minutes,
        break_minutes=decision.break_minutes,
        recorded_break_minutes=recorded_break,
        scheduled_break_minutes=scheduled,
        pending_break_minutes=max(0, scheduled - recorded_break),
        ignored_break_minutes=decision.ignored_break_minutes,
        automatic_break_detected=decision.automatic_break_detected,
    )


def compute_daily_records(
    records: Iterable[DailyAttendanceRecord],
    *,
    policy: BreakPolicy = DEFAULT_BREAK_POLICY,
) -> list[ComputedDailyRecord]:
    return [compute_daily_record(r, policy=policy) for r in records]
