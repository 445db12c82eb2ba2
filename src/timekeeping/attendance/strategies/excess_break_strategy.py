from __future__ import annotations

from .base import BreakDecision, BreakReconciliationStrategy


class ExcessBreakStrategy(BreakReconciliationStrategy):
    """Recorded break above quota: the excess is credited back as worked time."""

    def reconcile(self, *, worked_minutes: int, recorded_break_minutes: int, scheduled_break_minutes: int) -> BreakDecision:
        return BreakDecision(
            worked_minutes=worked_minutes + (recorded_break_minutes - scheduled_break_minutes),
            break_minutes=scheduled_break_minutes,
        )
