from __future__ import annotations

from .base import BreakDecision, BreakReconciliationStrategy


class ShortBreakStrategy(BreakReconciliationStrategy):
    """Recorded break below quota: the shortfall is deducted as an unrecorded break."""

    def reconcile(self, *, worked_minutes: int, recorded_break_minutes: int, scheduled_break_minutes: int) -> BreakDecision:
        missing = scheduled_break_minutes - recorded_break_minutes
        return BreakDecision(
            worked_minutes=max(0, worked_minutes - missing),
            break_minutes=scheduled_break_minutes,
            automatic_break_detected=True,
        )
