from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType
from typing import Any, Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRecordRepository
from .attendance.policy import BreakPolicy
from .attendance.service import TimeTrackingService
from .attendance.sync import RecordSync
from .common.datetime_utils import get_timezone
from .database.connection import DatabaseConnection, DBConfig
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.service import EmployeeDirectory
from .payroll.calculator.standard_calculator import StandardDayOvertimeCalculator
from .payroll.service import PayrollReportService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    attendance_repo: Optional[MySQLAttendanceRecordRepository]
    employees_repo: Optional[MySQLEmployeeRepository]

    record_sync: RecordSync
    employee_directory: Optional[EmployeeDirectory]
    time_tracking_service: TimeTrackingService
    payroll_report_service: PayrollReportService


def _setting(settings: ModuleType | Any, name: str, default: Any = None) -> Any:
    return getattr(settings, name, default)


def build_container(*, settings: ModuleType | Any) -> Container:
    policy = BreakPolicy.from_settings(
        weekdays=_setting(settings, "SCHEDULED_BREAK_WEEKDAYS"),
        minutes=_setting(settings, "SCHEDULED_BREAK_MINUTES"),
    )
    tz = get_timezone(_setting(settings, "TIMEZONE"))
    calculator = StandardDayOvertimeCalculator(int(_setting(settings, "STANDARD_DAY_MINUTES", 480)))

    conn = None
    attendance_repo = None
    employees_repo = None
    employee_directory = None
    if _setting(settings, "PERSISTENCE_ENABLED", True):
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(_setting(settings, "DB_CONFIG", {})))
        attendance_repo = MySQLAttendanceRecordRepository(conn)
        employees_repo = MySQLEmployeeRepository(conn)
        employee_directory = EmployeeDirectory(employees_repo)

    record_sync = RecordSync(attendance_repo, inline=bool(_setting(settings, "SYNC_INLINE", False)))
    time_tracking_service = TimeTrackingService(
        attendance_repo,
        sync=record_sync,
        employees=employee_directory,
        policy=policy,
        tz=tz,
    )
    time_tracking_service.load()

    payroll_report_service = PayrollReportService(
        time_tracking_service,
        employee_directory,
        calculator=calculator,
    )

    return Container(
        conn=conn,
        attendance_repo=attendance_repo,
        employees_repo=employees_repo,
        record_sync=record_sync,
        employee_directory=employee_directory,
        time_tracking_service=time_tracking_service,
        payroll_report_service=payroll_report_service,
    )
