from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class PeriodTotal:
    """One aggregation period (day/week/month) with its total minutes."""

    key: str
    label: str
    minutes: int = 0


@dataclass
class EmployeeAggregation:
    employee_id: str
    employee_name: str
    total_minutes: int = 0
    daily: list[PeriodTotal] = field(default_factory=list)
    weekly: list[PeriodTotal] = field(default_factory=list)
    monthly: list[PeriodTotal] = field(default_factory=list)


@dataclass(frozen=True)
class RegularOvertimeSplit:
    regular_minutes: int
    overtime_minutes: int


@dataclass(frozen=True)
class EmployeeSummary:
    """Read model for one employee's time-account view."""

    today_minutes: int
    today: RegularOvertimeSplit
    break_minutes: int
    month_minutes: int
    month: RegularOvertimeSplit
    year_minutes: int
    year: RegularOvertimeSplit
    recent_daily: list[PeriodTotal]
