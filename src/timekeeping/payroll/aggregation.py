"""Roll computed days up into per-employee daily/weekly/monthly totals."""
from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Mapping

from ..attendance.model import ComputedDailyRecord
from ..core.constants import DEFAULT_EMPLOYEE_NAME, MONTH_NAMES, STANDARD_DAY_MINUTES, WEEKDAY_NAMES
from ..core.enums import PeriodLevel
from .calculator.standard_calculator import StandardDayOvertimeCalculator
from .model import EmployeeAggregation, PeriodTotal, RegularOvertimeSplit

_LEVEL_LABELS = {
    PeriodLevel.DAILY: "Tag",
    PeriodLevel.WEEKLY: "Woche",
    PeriodLevel.MONTHLY: "Monat",
}


def day_key(d: date) -> str:
    return d.isoformat()


def day_label(d: date) -> str:
    return f"{WEEKDAY_NAMES[d.weekday()]}, {d.strftime('%d.%m.%Y')}"


def week_key(d: date) -> str:
    iso_year, iso_week, _ = d.isocalendar()
    return f"{iso_year}-W{iso_week:02d}"


def week_label(d: date) -> str:
    start = d - timedelta(days=d.weekday())
    end = start + timedelta(days=6)
    return f"KW {d.isocalendar()[1]:02d} ({start.strftime('%d.%m.')} - {end.strftime('%d.%m.%Y')})"


def month_key(d: date) -> str:
    return f"{d.year:04d}-{d.month:02d}"


def month_label(d: date) -> str:
    return f"{MONTH_NAMES[d.month - 1]} {d.year}"


def _add(bucket: list[PeriodTotal], key: str, label: str, minutes: int) -> None:
    for item in bucket:
        if item.key == key:
            item.minutes += minutes
            return
    bucket.append(PeriodTotal(key=key, label=label, minutes=minutes))


def aggregate_work_minutes(
    records: Iterable[ComputedDailyRecord],
    employee_name_lookup: Mapping[str, str],
) -> list[EmployeeAggregation]:
    """Group computed days per employee.

    Values are the stored `worked_minutes` (never live-adjusted), so repeated
    calls over the same ledger always give the same totals.
    """
    by_employee: dict[str, EmployeeAggregation] = {}

    for record in records:
        agg = by_employee.get(record.employee_id)
        if agg is None:
            agg = EmployeeAggregation(
                employee_id=record.employee_id,
                employee_name=employee_name_lookup.get(record.employee_id) or DEFAULT_EMPLOYEE_NAME,
            )
            by_employee[record.employee_id] = agg

        minutes = record.worked_minutes
        agg.total_minutes += minutes
        _add(agg.daily, day_key(record.date), day_label(record.date), minutes)
        _add(agg.weekly, week_key(record.date), week_label(record.date), minutes)
        _add(agg.monthly, month_key(record.date), month_label(record.date), minutes)

    results = list(by_employee.values())
    for agg in results:
        agg.daily.sort(key=lambda p: p.key)
        agg.weekly.sort(key=lambda p: p.key)
        agg.monthly.sort(key=lambda p: p.key)

    results.sort(key=lambda a: (a.employee_name.casefold(), a.employee_id))
    return results


def split_regular_and_overtime(
    total_minutes: int,
    recorded_days: int,
    *,
    standard_day_minutes: int = STANDARD_DAY_MINUTES,
) -> RegularOvertimeSplit:
    return StandardDayOvertimeCalculator(standard_day_minutes).split(total_minutes, recorded_days)


def monthly_minutes(aggregation: EmployeeAggregation, key: str) -> int:
    return next((p.minutes for p in aggregation.monthly if p.key == key), 0)


def yearly_minutes(aggregation: EmployeeAggregation, year: int | str) -> int:
    """Sum of the monthly buckets of one year (there is no stored yearly bucket)."""
    prefix = f"{int(year):04d}-"
    return sum(p.minutes for p in aggregation.monthly if p.key.startswith(prefix))


def format_minutes_as_hours(minutes: int) -> str:
    return f"{minutes / 60:.2f}"


def build_export_rows(aggregations: Iterable[EmployeeAggregation], level: PeriodLevel) -> list[dict]:
    level = PeriodLevel(level)
    rows: list[dict] = []
    for agg in aggregations:
        for period in getattr(agg, level.value):
            rows.append(
                {
                    "employee": agg.employee_name,
                    "level": _LEVEL_LABELS[level],
                    "period": period.label,
                    "hours": format_minutes_as_hours(period.minutes),
                    "minutes": period.minutes,
                }
            )
    return rows
