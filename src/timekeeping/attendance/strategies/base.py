from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class BreakDecision:
    worked_minutes: int
    break_minutes: int
    ignored_break_minutes: int = 0
    automatic_break_detected: bool = False


class BreakReconciliationStrategy(ABC):
    """Strategy Pattern: encapsulate how recorded break time is reconciled with the schedule."""

    @abstractmethod
    def reconcile(self, *, worked_minutes: int, recorded_break_minutes: int, scheduled_break_minutes: int) -> BreakDecision:
        raise NotImplementedError
