from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable

from ..core.constants import SCHEDULED_BREAK_MINUTES, SCHEDULED_BREAK_WEEKDAYS


@dataclass(frozen=True)
class BreakPolicy:
    """Fixed weekly break schedule.

    `weekdays` uses `date.weekday()` numbering (Monday=0).
    """

    weekdays: frozenset[int] = frozenset(SCHEDULED_BREAK_WEEKDAYS)
    minutes: int = SCHEDULED_BREAK_MINUTES

    @classmethod
    def from_settings(cls, *, weekdays: Iterable[int] | None = None, minutes: int | None = None) -> "BreakPolicy":
        return cls(
            weekdays=frozenset(int(d) for d in (SCHEDULED_BREAK_WEEKDAYS if weekdays is None else weekdays)),
            minutes=max(0, int(SCHEDULED_BREAK_MINUTES if minutes is None else minutes)),
        )

    def is_scheduled_break_day(self, work_date: date) -> bool:
        return work_date.weekday() in self.weekdays

    def scheduled_minutes_for(self, work_date: date) -> int:
        return self.minutes if self.is_scheduled_break_day(work_date) else 0


DEFAULT_BREAK_POLICY = BreakPolicy()
