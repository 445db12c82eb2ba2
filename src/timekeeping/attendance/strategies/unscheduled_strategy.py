from __future__ import annotations

from .base import BreakDecision, BreakReconciliationStrategy


class UnscheduledDayStrategy(BreakReconciliationStrategy):
    """Day without a break quota: recorded break time is folded back into work."""

    def reconcile(self, *, worked_minutes: int, recorded_break_minutes: int, scheduled_break_minutes: int) -> BreakDecision:
        if recorded_break_minutes <= 0:
            return BreakDecision(worked_minutes=worked_minutes, break_minutes=0)
        return BreakDecision(
            worked_minutes=worked_minutes + recorded_break_minutes,
            break_minutes=0,
            ignored_break_minutes=recorded_break_minutes,
        )
