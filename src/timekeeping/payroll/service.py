from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..attendance.live import compute_live_adjusted_minutes
from ..attendance.model import ComputedDailyRecord
from ..attendance.service import TimeTrackingService
from ..common.datetime_utils import now_local, to_local
from ..core.constants import RECENT_DAYS
from ..core.enums import PeriodLevel
from ..employees.service import EmployeeDirectory
from .aggregation import aggregate_work_minutes, build_export_rows, month_key, monthly_minutes, yearly_minutes
from .calculator.base import OvertimeCalculator
from .calculator.standard_calculator import StandardDayOvertimeCalculator
from .exports import build_export_xlsx_bytes
from .model import EmployeeAggregation, EmployeeSummary


def summarize_employee(
    aggregation: Optional[EmployeeAggregation],
    records: Sequence[ComputedDailyRecord],
    todays_record: Optional[ComputedDailyRecord],
    *,
    today: date,
    now: datetime,
    calculator: OvertimeCalculator,
) -> EmployeeSummary:
    """Today/month/year totals with their regular/overtime split.

    Only today's figure is live-adjusted; month and year come from the
    aggregation buckets. Recorded day counts come from `records`.
    """
    today_minutes = compute_live_adjusted_minutes(todays_record, now=now) if todays_record else 0

    this_month = month_key(today)
    month_total = monthly_minutes(aggregation, this_month) if aggregation else 0
    month_days = sum(1 for r in records if month_key(r.date) == this_month)

    year_total = yearly_minutes(aggregation, today.year) if aggregation else 0
    year_days = sum(1 for r in records if r.date.year == today.year)

    recent = list(reversed(aggregation.daily[-RECENT_DAYS:])) if aggregation else []

    return EmployeeSummary(
        today_minutes=today_minutes,
        today=calculator.split(today_minutes, 1 if todays_record else 0),
        break_minutes=todays_record.recorded_break_minutes if todays_record else 0,
        month_minutes=month_total,
        month=calculator.split(month_total, month_days),
        year_minutes=year_total,
        year=calculator.split(year_total, year_days),
        recent_daily=recent,
    )


class PayrollReportService:
    def __init__(
        self,
        time_tracking: TimeTrackingService,
        employees: Optional[EmployeeDirectory] = None,
        *,
        calculator: Optional[OvertimeCalculator] = None,
    ):
        self._time_tracking = time_tracking
        self._employees = employees
        self._calculator = calculator or StandardDayOvertimeCalculator()

    def _name_lookup(self) -> dict[str, str]:
        return self._employees.name_lookup() if self._employees else {}

    def build_aggregations(self) -> list[EmployeeAggregation]:
        return aggregate_work_minutes(self._time_tracking.computed_records(), self._name_lookup())

    def build_employee_summary(self, employee_id: str, *, now: datetime | None = None) -> EmployeeSummary:
        tz = self._time_tracking.tz
        now = to_local(now, tz) if now else now_local(tz)
        records = self._time_tracking.computed_records(employee_id)
        aggregations = aggregate_work_minutes(records, self._name_lookup())
        todays = next((r for r in records if r.date == now.date()), None)
        return summarize_employee(
            aggregations[0] if aggregations else None,
            records,
            todays,
            today=now.date(),
            now=now,
            calculator=self._calculator,
        )

    def build_export_rows(self, level: PeriodLevel) -> list[dict]:
        return build_export_rows(self.build_aggregations(), level)

    def build_export_xlsx(self, level: PeriodLevel) -> bytes:
        return build_export_xlsx_bytes(self.build_export_rows(level), level)
