from __future__ import annotations

import json
import logging
from typing import Any, Sequence

from ..core.exceptions import ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, load_json_column
from .model import DailyAttendanceRecord
from .repository import AttendanceRecordRepository
from .serializers import event_from_dict, event_to_dict

logger = logging.getLogger(__name__)


class MySQLAttendanceRecordRepository(AttendanceRecordRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _to_record(self, row: dict[str, Any]) -> DailyAttendanceRecord | None:
        raw_events = load_json_column(row.get("events")) or []
        try:
            events = tuple(event_from_dict(e) for e in raw_events)
        except ValidationError:
            logger.warning("Skipping clock record with unreadable events", extra={"record_id": row["id"]})
            return None
        return DailyAttendanceRecord(
            id=str(row["id"]),
            employee_id=str(row["employee_id"]),
            date=row["work_date"],
            events=events,
        )

    def list_all(self) -> Sequence[DailyAttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, employee_id, work_date, events
                FROM clock_records
                ORDER BY work_date DESC, employee_id
                """
            )
            records = (self._to_record(r) for r in fetchall(cur))
            return [r for r in records if r is not None]

    def upsert(self, record: DailyAttendanceRecord) -> None:
        payload = json.dumps([event_to_dict(e) for e in record.events])
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO clock_records(id, employee_id, work_date, events)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE events=VALUES(events)
                """,
                (record.id, record.employee_id, record.date, payload),
            )

    def delete_by_id(self, record_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM clock_records WHERE id=%s", (record_id,))
            return cur.rowcount > 0
