from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Optional

from .model import DailyAttendanceRecord
from .repository import AttendanceRecordRepository

logger = logging.getLogger(__name__)


class RecordSync:
    """Fire-and-forget replication of ledger mutations to the repository.

    Jobs run on one background worker so writes for the same record land in
    mutation order. Failures are logged and never reach the caller; the
    in-memory ledger stays authoritative either way.
    """

    def __init__(
        self,
        repository: Optional[AttendanceRecordRepository],
        *,
        inline: bool = False,
    ):
        self._repository = repository
        self._inline = inline
        self._executor: Optional[ThreadPoolExecutor] = None
        self._last: Optional[Future] = None

    @property
    def enabled(self) -> bool:
        return self._repository is not None

    def save(self, record: DailyAttendanceRecord) -> None:
        if self._repository is None:
            return
        repo = self._repository
        self._dispatch("upsert", record.id, lambda: repo.upsert(record))

    def delete(self, record_id: str) -> None:
        if self._repository is None:
            return
        repo = self._repository
        self._dispatch("delete", record_id, lambda: repo.delete_by_id(record_id))

    def _dispatch(self, action: str, record_id: str, job: Callable[[], object]) -> None:
        def _run() -> None:
            try:
                job()
                logger.debug("Clock record synced", extra={"action": action, "record_id": record_id})
            except Exception:
                logger.error(
                    "Clock record sync failed",
                    extra={"action": action, "record_id": record_id},
                    exc_info=True,
                )

        if self._inline:
            _run()
            return

        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="clock-sync")
        self._last = self._executor.submit(_run)

    def flush(self, timeout: float | None = None) -> None:
        """Wait until every job dispatched so far has finished."""
        if self._last is not None:
            self._last.result(timeout=timeout)

    def shutdown(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
