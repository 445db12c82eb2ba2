from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

from timekeeping.attendance.service import TimeTrackingService
from timekeeping.core.enums import PeriodLevel
from timekeeping.employees.model import Employee
from timekeeping.employees.service import EmployeeDirectory
from timekeeping.payroll.calculator.standard_calculator import StandardDayOvertimeCalculator
from timekeeping.payroll.service import PayrollReportService

TZ = timezone(timedelta(hours=2))


def _at(day: int, hour: int, minute: int = 0, month: int = 9) -> datetime:
    return datetime(2025, month, day, hour, minute, tzinfo=TZ)


class InMemoryEmployees:
    def __init__(self, *employees: Employee):
        self._by_id = {e.employee_id: e for e in employees}

    def list_all(self):
        return list(self._by_id.values())

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._by_id.get(employee_id)


def _setup():
    directory = EmployeeDirectory(
        InMemoryEmployees(
            Employee(employee_id="emp-1", full_name="Anna Becker"),
            Employee(employee_id="emp-2", full_name="Ben Fischer"),
        )
    )
    time_tracking = TimeTrackingService(employees=directory, tz=TZ)
    reports = PayrollReportService(time_tracking, directory, calculator=StandardDayOvertimeCalculator())
    return time_tracking, reports


def _work_day(svc: TimeTrackingService, employee_id: str, start: datetime, end: datetime) -> None:
    svc.clock_in(employee_id, now=start)
    svc.clock_out(employee_id, now=end)


def test_summary_splits_today_month_and_year():
    time_tracking, reports = _setup()
    # Monday 22.09. (no scheduled break): 9h
    _work_day(time_tracking, "emp-1", _at(22, 8), _at(22, 17))
    # Thursday 25.09.: 8h
    _work_day(time_tracking, "emp-1", _at(25, 8), _at(25, 16))
    # Monday 01.09.: 8h
    _work_day(time_tracking, "emp-1", _at(1, 8), _at(1, 16))
    # Still clocked in today (Friday 26.09. is a scheduled break day)
    time_tracking.clock_in("emp-1", now=_at(26, 8))

    summary = reports.build_employee_summary("emp-1", now=_at(26, 10))

    assert summary.today_minutes == 120
    assert summary.today.regular_minutes == 120
    assert summary.today.overtime_minutes == 0

    # Friday's stored value is 0 (open segment, missing break deducted down to zero).
    assert summary.month_minutes == 540 + 480 + 480
    assert summary.month.overtime_minutes == 0
    assert summary.year_minutes == summary.month_minutes
    assert [p.key for p in summary.recent_daily] == ["2025-09-26", "2025-09-25", "2025-09-22", "2025-09-01"]


def test_overtime_on_a_single_long_day():
    time_tracking, reports = _setup()
    _work_day(time_tracking, "emp-1", _at(22, 7), _at(22, 17))

    summary = reports.build_employee_summary("emp-1", now=_at(22, 18))

    assert summary.today_minutes == 600
    assert summary.today.overtime_minutes == 120
    assert summary.month.overtime_minutes == 120


def test_summary_for_unknown_employee_is_empty():
    _, reports = _setup()

    summary = reports.build_employee_summary("emp-9", now=_at(22, 12))

    assert summary.today_minutes == 0
    assert summary.month_minutes == 0
    assert summary.year_minutes == 0
    assert summary.recent_daily == []


def test_recent_daily_keeps_last_seven_days_newest_first():
    time_tracking, reports = _setup()
    for day in range(1, 11):
        _work_day(time_tracking, "emp-1", _at(day, 8), _at(day, 9))

    summary = reports.build_employee_summary("emp-1", now=_at(10, 12))

    assert [p.key for p in summary.recent_daily] == [f"2025-09-{d:02d}" for d in range(10, 3, -1)]


def test_aggregations_and_export_use_directory_names():
    time_tracking, reports = _setup()
    _work_day(time_tracking, "emp-2", _at(22, 8), _at(22, 9))
    _work_day(time_tracking, "emp-1", _at(22, 8), _at(22, 10))

    aggs = reports.build_aggregations()
    rows = reports.build_export_rows(PeriodLevel.MONTHLY)

    assert [a.employee_name for a in aggs] == ["Anna Becker", "Ben Fischer"]
    assert rows == [
        {"employee": "Anna Becker", "level": "Monat", "period": "September 2025", "hours": "2.00", "minutes": 120},
        {"employee": "Ben Fischer", "level": "Monat", "period": "September 2025", "hours": "1.00", "minutes": 60},
    ]


def test_summary_uses_the_local_day_for_an_aware_utc_now():
    time_tracking, reports = _setup()
    # Wednesday 24.09. is a scheduled break day, Thursday 25.09. is not.
    time_tracking.clock_in("emp-1", now=_at(25, 0, 10))
    time_tracking.clock_out("emp-1", now=_at(25, 1, 10))

    summary = reports.build_employee_summary("emp-1", now=datetime(2025, 9, 24, 23, 30, tzinfo=timezone.utc))

    assert summary.today_minutes == 60
