from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import ClockEventType, DeviceType, EmployeeStatusState


@dataclass(frozen=True)
class ClockEvent:
    """Domain entity: one clock action. Immutable once created."""

    id: str
    type: ClockEventType
    timestamp: datetime
    device: DeviceType
    location: str


@dataclass(frozen=True)
class DailyAttendanceRecord:
    """One employee's ledger entry for one day.

    `events` keep insertion order and are not guaranteed to be sorted by time.
    """

    id: str
    employee_id: str
    date: date
    events: tuple[ClockEvent, ...] = ()


@dataclass(frozen=True)
class ComputedDailyRecord:
    """Read model derived from a `DailyAttendanceRecord` (never stored).

    `events` are sorted ascending by timestamp.
    """

    id: str
    employee_id: str
    date: date
    events: tuple[ClockEvent, ...]
    worked_minutes: int
    break_minutes: int
    recorded_break_minutes: int
    scheduled_break_minutes: int
    pending_break_minutes: int
    ignored_break_minutes: int
    automatic_break_detected: bool

    @property
    def last_event(self) -> Optional[ClockEvent]:
        return self.events[-1] if self.events else None


@dataclass(frozen=True)
class EmployeeStatus:
    state: EmployeeStatusState
    last_event_type: Optional[ClockEventType] = None
    last_event_time: Optional[datetime] = None
    live_minutes: int = 0
