from __future__ import annotations

from .base import BreakDecision, BreakReconciliationStrategy


class ExactBreakStrategy(BreakReconciliationStrategy):
    """Recorded break matches the quota."""

    def reconcile(self, *, worked_minutes: int, recorded_break_minutes: int, scheduled_break_minutes: int) -> BreakDecision:
        return BreakDecision(worked_minutes=worked_minutes, break_minutes=scheduled_break_minutes)
