"""Example: drive the ledger through the service layer (no Flask, no database)."""

from datetime import datetime
from zoneinfo import ZoneInfo

from timekeeping.attendance.service import TimeTrackingService
from timekeeping.payroll.service import PayrollReportService

BERLIN = ZoneInfo("Europe/Berlin")


def main():
    service = TimeTrackingService(tz=BERLIN)
    day = datetime(2025, 9, 23, tzinfo=BERLIN)  # a Tuesday, scheduled break day

    service.clock_in("emp-1", now=day.replace(hour=7, minute=52))
    service.start_break("emp-1", now=day.replace(hour=12, minute=0))
    service.end_break("emp-1", now=day.replace(hour=13, minute=30))
    record = service.clock_out("emp-1", now=day.replace(hour=17, minute=0))

    print(record.worked_minutes, record.break_minutes, record.pending_break_minutes)

    reports = PayrollReportService(service)
    summary = reports.build_employee_summary("emp-1", now=day.replace(hour=18))
    print(summary.month_minutes, summary.month.overtime_minutes)


if __name__ == "__main__":
    main()
