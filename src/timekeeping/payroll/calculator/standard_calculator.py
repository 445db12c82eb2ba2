from __future__ import annotations

from dataclasses import dataclass

from ...core.constants import STANDARD_DAY_MINUTES
from ..model import RegularOvertimeSplit
from .base import OvertimeCalculator


@dataclass(frozen=True)
class StandardDayOvertimeCalculator(OvertimeCalculator):
    """Standard rule: anything above `recorded_days * standard_day_minutes` is overtime.

    With no recorded day there is no baseline, so everything is regular.
    """

    standard_day_minutes: int = STANDARD_DAY_MINUTES

    def split(self, total_minutes: int, recorded_days: int) -> RegularOvertimeSplit:
        if recorded_days <= 0:
            return RegularOvertimeSplit(regular_minutes=total_minutes, overtime_minutes=0)
        baseline = recorded_days * self.standard_day_minutes
        overtime = max(0, total_minutes - baseline)
        return RegularOvertimeSplit(regular_minutes=total_minutes - overtime, overtime_minutes=overtime)
