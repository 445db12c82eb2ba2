from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from timekeeping.attendance.computation import compute_daily_record, compute_daily_records
from timekeeping.attendance.ledger import record_id_for
from timekeeping.attendance.model import ClockEvent, DailyAttendanceRecord
from timekeeping.attendance.policy import BreakPolicy
from timekeeping.core.enums import ClockEventType, DeviceType

TZ = timezone(timedelta(hours=2))

MONDAY = date(2025, 9, 22)
TUESDAY = date(2025, 9, 23)  # scheduled break day
WEDNESDAY = date(2025, 9, 24)  # scheduled break day
SATURDAY = date(2025, 9, 27)

IN = ClockEventType.CLOCK_IN
OUT = ClockEventType.CLOCK_OUT
BS = ClockEventType.BREAK_START
BE = ClockEventType.BREAK_END


def _record(day: date, *events: tuple[ClockEventType, str]) -> DailyAttendanceRecord:
    out = []
    for i, (event_type, hhmm) in enumerate(events, start=1):
        parts = [int(p) for p in hhmm.split(":")]
        hour, minute = parts[0], parts[1]
        second = parts[2] if len(parts) > 2 else 0
        out.append(
            ClockEvent(
                id=f"e{i}",
                type=event_type,
                timestamp=datetime(day.year, day.month, day.day, hour, minute, second, tzinfo=TZ),
                device=DeviceType.PC,
                location="Empfang",
            )
        )
    return DailyAttendanceRecord(id=record_id_for("emp-1", day), employee_id="emp-1", date=day, events=tuple(out))


def test_plain_day_without_break_on_unscheduled_day():
    computed = compute_daily_record(_record(MONDAY, (IN, "08:00"), (OUT, "16:30")))

    assert computed.worked_minutes == 510
    assert computed.break_minutes == 0
    assert computed.scheduled_break_minutes == 0
    assert computed.pending_break_minutes == 0
    assert computed.ignored_break_minutes == 0
    assert computed.automatic_break_detected is False


def test_missing_break_on_scheduled_day_is_deducted_automatically():
    computed = compute_daily_record(_record(TUESDAY, (IN, "08:00"), (OUT, "17:00")))

    assert computed.recorded_break_minutes == 0
    assert computed.scheduled_break_minutes == 120
    assert computed.worked_minutes == 540 - 120
    assert computed.break_minutes == 120
    assert computed.pending_break_minutes == 120
    assert computed.automatic_break_detected is True


def test_break_on_unscheduled_day_is_folded_into_work():
    computed = compute_daily_record(_record(MONDAY, (IN, "08:00"), (BS, "12:00"), (BE, "12:15"), (OUT, "16:30")))

    assert computed.worked_minutes == 510
    assert computed.recorded_break_minutes == 15
    assert computed.ignored_break_minutes == 15
    assert computed.break_minutes == 0
    assert computed.pending_break_minutes == 0


def test_weekend_break_is_ignored_as_well():
    computed = compute_daily_record(_record(SATURDAY, (IN, "09:00"), (BS, "10:00"), (BE, "10:45"), (OUT, "12:00")))

    assert computed.worked_minutes == 180
    assert computed.ignored_break_minutes == 45


def test_short_break_on_scheduled_day():
    computed = compute_daily_record(_record(TUESDAY, (IN, "08:00"), (BS, "12:00"), (BE, "13:30"), (OUT, "17:00")))

    raw_worked = 240 + 210
    assert computed.recorded_break_minutes == 90
    assert computed.automatic_break_detected is True
    assert computed.pending_break_minutes == 30
    assert computed.break_minutes == 120
    assert computed.worked_minutes == raw_worked - 30
    assert computed.ignored_break_minutes == 0


def test_excess_break_on_scheduled_day_is_credited_back():
    computed = compute_daily_record(_record(TUESDAY, (IN, "08:00"), (BS, "12:00"), (BE, "14:30"), (OUT, "18:00")))

    raw_worked = 240 + 210
    assert computed.recorded_break_minutes == 150
    assert computed.break_minutes == 120
    assert computed.worked_minutes == raw_worked + 30
    assert computed.pending_break_minutes == 0
    assert computed.automatic_break_detected is False


def test_exact_break_on_scheduled_day():
    computed = compute_daily_record(_record(WEDNESDAY, (IN, "08:00"), (BS, "12:00"), (BE, "14:00"), (OUT, "17:00")))

    assert computed.worked_minutes == 240 + 180
    assert computed.break_minutes == 120
    assert computed.pending_break_minutes == 0
    assert computed.automatic_break_detected is False


def test_events_are_sorted_before_computation():
    shuffled = _record(MONDAY, (OUT, "16:30"), (BE, "12:15"), (IN, "08:00"), (BS, "12:00"))

    computed = compute_daily_record(shuffled)

    assert computed.worked_minutes == 510
    assert [e.type for e in computed.events] == [IN, BS, BE, OUT]


def test_unmatched_break_end_contributes_nothing():
    computed = compute_daily_record(_record(MONDAY, (IN, "08:00"), (BE, "10:00"), (OUT, "12:00")))

    assert computed.worked_minutes == 240
    assert computed.recorded_break_minutes == 0


def test_unmatched_break_start_is_never_counted_as_break():
    computed = compute_daily_record(_record(MONDAY, (IN, "08:00"), (BS, "12:00")))

    assert computed.worked_minutes == 240
    assert computed.recorded_break_minutes == 0


def test_repeated_clock_in_restarts_the_segment():
    computed = compute_daily_record(_record(MONDAY, (IN, "08:00"), (IN, "09:00"), (OUT, "12:00")))

    assert computed.worked_minutes == 180


def test_clock_out_without_clock_in_is_a_no_op():
    computed = compute_daily_record(_record(MONDAY, (OUT, "07:00"), (IN, "08:00")))

    assert computed.worked_minutes == 0


def test_empty_record_on_scheduled_day_saturates_at_zero():
    computed = compute_daily_record(_record(TUESDAY))

    assert computed.worked_minutes == 0
    assert computed.break_minutes == 120
    assert computed.pending_break_minutes == 120
    assert computed.automatic_break_detected is True


def test_minutes_are_rounded_to_nearest():
    half_up = compute_daily_record(_record(MONDAY, (IN, "08:00:00"), (OUT, "08:10:30")))
    below_half = compute_daily_record(_record(MONDAY, (IN, "08:00:00"), (OUT, "08:10:29")))

    assert half_up.worked_minutes == 11
    assert below_half.worked_minutes == 10


def test_custom_break_policy():
    policy = BreakPolicy.from_settings(weekdays=[0], minutes=30)

    computed = compute_daily_record(_record(MONDAY, (IN, "08:00"), (OUT, "12:00")), policy=policy)

    assert computed.scheduled_break_minutes == 30
    assert computed.worked_minutes == 210
    assert computed.automatic_break_detected is True


def test_computation_is_deterministic():
    record = _record(TUESDAY, (IN, "08:00"), (BS, "12:00"), (BE, "13:30"), (OUT, "17:00"))

    assert compute_daily_record(record) == compute_daily_record(record)


def test_compute_daily_records_applies_the_given_policy_to_each_day():
    policy = BreakPolicy.from_settings(weekdays=[0], minutes=30)
    records = [
        _record(MONDAY, (IN, "08:00"), (OUT, "12:00")),
        _record(TUESDAY, (IN, "08:00"), (OUT, "12:00")),
    ]

    computed = compute_daily_records(records, policy=policy)

    assert [c.worked_minutes for c in computed] == [210, 240]
    assert [c.automatic_break_detected for c in computed] == [True, False]
