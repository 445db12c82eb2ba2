from __future__ import annotations

from dataclasses import dataclass

from .strategies.base import BreakReconciliationStrategy
from .strategies.exact_break_strategy import ExactBreakStrategy
from .strategies.excess_break_strategy import ExcessBreakStrategy
from .strategies.short_break_strategy import ShortBreakStrategy
from .strategies.unscheduled_strategy import UnscheduledDayStrategy


@dataclass
class BreakStrategyFactory:
    """Factory Pattern: choose the reconciliation strategy for one day."""

    def for_day(
        self,
        *,
        is_scheduled_break_day: bool,
        recorded_break_minutes: int,
        scheduled_break_minutes: int,
    ) -> BreakReconciliationStrategy:
        if not is_scheduled_break_day:
            return UnscheduledDayStrategy()
        if recorded_break_minutes < scheduled_break_minutes:
            return ShortBreakStrategy()
        if recorded_break_minutes > scheduled_break_minutes:
            return ExcessBreakStrategy()
        return ExactBreakStrategy()
