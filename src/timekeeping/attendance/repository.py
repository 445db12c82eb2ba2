from __future__ import annotations

from typing import Protocol, Sequence

from .model import DailyAttendanceRecord


class AttendanceRecordRepository(Protocol):
    """Persistence collaborator: a key-value collection of daily records keyed by record id."""

    def list_all(self) -> Sequence[DailyAttendanceRecord]:
        raise NotImplementedError

    def upsert(self, record: DailyAttendanceRecord) -> None:
        """Create the record, or replace its events if the id already exists."""

        raise NotImplementedError

    def delete_by_id(self, record_id: str) -> bool:
        raise NotImplementedError
