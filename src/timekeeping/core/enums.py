from __future__ import annotations

from enum import Enum


class ClockEventType(str, Enum):
    """Kind of clock event stored in the ledger."""

    CLOCK_IN = "clock-in"
    CLOCK_OUT = "clock-out"
    BREAK_START = "break-start"
    BREAK_END = "break-end"


class DeviceType(str, Enum):
    """Device the event was recorded on (metadata only, never affects computation)."""

    PC = "PC"
    TABLET = "Tablet"
    SMARTPHONE = "Smartphone"


class EmployeeStatusState(str, Enum):
    IDLE = "idle"
    WORKING = "working"
    BREAK = "break"
    OFF = "off"


class PeriodLevel(str, Enum):
    """Aggregation level used by reports and exports."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
