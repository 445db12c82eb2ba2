from __future__ import annotations

import logging
import threading
import uuid
from datetime import datetime, tzinfo
from typing import Callable, Optional

from ..common.datetime_utils import get_timezone, now_local, to_local
from ..core.constants import DEFAULT_DEVICE, DEFAULT_LOCATION
from ..core.enums import ClockEventType, DeviceType
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.service import EmployeeDirectory
from .computation import compute_daily_record, compute_daily_records
from .ledger import Records, append_event, find_record, get_record, remove_event, remove_record
from .live import compute_live_adjusted_minutes, employee_status
from .model import ClockEvent, ComputedDailyRecord, DailyAttendanceRecord, EmployeeStatus
from .policy import DEFAULT_BREAK_POLICY, BreakPolicy
from .repository import AttendanceRecordRepository
from .sync import RecordSync

logger = logging.getLogger(__name__)


def _new_event_id() -> str:
    return uuid.uuid4().hex


class TimeTrackingService:
    """Use case: clock actions against the in-memory ledger.

    The in-memory collection is authoritative. Writes are serialized with a
    lock; every mutation is then handed to `RecordSync` without waiting.
    """

    def __init__(
        self,
        repository: Optional[AttendanceRecordRepository] = None,
        *,
        sync: Optional[RecordSync] = None,
        employees: Optional[EmployeeDirectory] = None,
        policy: BreakPolicy = DEFAULT_BREAK_POLICY,
        tz: tzinfo | None = None,
        id_factory: Callable[[], str] = _new_event_id,
    ):
        self._repository = repository
        self._sync = sync or RecordSync(repository)
        self._employees = employees
        self._policy = policy
        self._tz = tz or get_timezone()
        self._new_id = id_factory
        self._records: Records = ()
        self._lock = threading.Lock()

    @property
    def policy(self) -> BreakPolicy:
        return self._policy

    @property
    def tz(self) -> tzinfo:
        return self._tz

    @property
    def records(self) -> Records:
        return self._records

    def load(self) -> int:
        """Replace the in-memory ledger with what the repository holds."""
        if self._repository is None:
            return 0
        loaded = tuple(self._repository.list_all())
        with self._lock:
            self._records = loaded
        logger.info("Clock records loaded", extra={"count": len(loaded)})
        return len(loaded)

    def _now(self, now: datetime | None) -> datetime:
        return to_local(now, self._tz) if now else now_local(self._tz)

    def record_event(
        self,
        employee_id: str,
        event_type: ClockEventType,
        *,
        device: DeviceType = DEFAULT_DEVICE,
        location: str = DEFAULT_LOCATION,
        now: datetime | None = None,
    ) -> ComputedDailyRecord:
        employee_id = (employee_id or "").strip()
        if not employee_id:
            raise ValidationError("employee_id is required")
        if self._employees is not None and not self._employees.exists(employee_id):
            raise ValidationError(f"Unknown employee: {employee_id}")

        now = self._now(now)
        event = ClockEvent(
            id=self._new_id(),
            type=ClockEventType(event_type),
            timestamp=now,
            device=DeviceType(device),
            location=location or DEFAULT_LOCATION,
        )

        with self._lock:
            self._records, record = append_event(self._records, employee_id, event, today=now.date())

        logger.info(
            "Clock event appended",
            extra={"employee_id": employee_id, "record_id": record.id, "event_type": event.type.value},
        )
        self._sync.save(record)
        return compute_daily_record(record, policy=self._policy)

    def clock_in(self, employee_id: str, **kwargs) -> ComputedDailyRecord:
        return self.record_event(employee_id, ClockEventType.CLOCK_IN, **kwargs)

    def clock_out(self, employee_id: str, **kwargs) -> ComputedDailyRecord:
        return self.record_event(employee_id, ClockEventType.CLOCK_OUT, **kwargs)

    def start_break(self, employee_id: str, **kwargs) -> ComputedDailyRecord:
        return self.record_event(employee_id, ClockEventType.BREAK_START, **kwargs)

    def end_break(self, employee_id: str, **kwargs) -> ComputedDailyRecord:
        return self.record_event(employee_id, ClockEventType.BREAK_END, **kwargs)

    def delete_event(self, record_id: str, event_id: str) -> Optional[ComputedDailyRecord]:
        """Remove one event; returns None when that emptied (and removed) the record."""
        with self._lock:
            existing = get_record(self._records, record_id)
            if existing is None:
                raise NotFoundError(f"Clock record not found: {record_id}")
            if not any(e.id == event_id for e in existing.events):
                raise NotFoundError(f"Clock event not found: {event_id}")
            self._records, remaining = remove_event(self._records, record_id, event_id)

        logger.info("Clock event deleted", extra={"record_id": record_id, "event_id": event_id})
        if remaining is None:
            self._sync.delete(record_id)
            return None
        self._sync.save(remaining)
        return compute_daily_record(remaining, policy=self._policy)

    def delete_record(self, record_id: str) -> None:
        with self._lock:
            if get_record(self._records, record_id) is None:
                raise NotFoundError(f"Clock record not found: {record_id}")
            self._records = remove_record(self._records, record_id)

        logger.info("Clock record deleted", extra={"record_id": record_id})
        self._sync.delete(record_id)

    def computed_records(self, employee_id: str | None = None) -> list[ComputedDailyRecord]:
        """Computed days, newest first."""
        records = [r for r in self._records if employee_id is None or r.employee_id == employee_id]
        computed = compute_daily_records(records, policy=self._policy)
        computed.sort(key=lambda r: (r.date, r.employee_id), reverse=True)
        return computed

    def _today(self, employee_id: str, now: datetime) -> Optional[DailyAttendanceRecord]:
        return find_record(self._records, employee_id, now.date())

    def today_record(self, employee_id: str, *, now: datetime | None = None) -> Optional[ComputedDailyRecord]:
        record = self._today(employee_id, self._now(now))
        return compute_daily_record(record, policy=self._policy) if record else None

    def live_minutes(self, employee_id: str, *, now: datetime | None = None) -> int:
        now = self._now(now)
        record = self.today_record(employee_id, now=now)
        return compute_live_adjusted_minutes(record, now=now) if record else 0

    def status(self, employee_id: str, *, now: datetime | None = None) -> EmployeeStatus:
        now = self._now(now)
        return employee_status(self.today_record(employee_id, now=now), now=now)
