from __future__ import annotations

import math
from datetime import date, datetime, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.constants import DEFAULT_TIMEZONE
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid date: {value!r}") from e


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO-8601 timestamp; naive values are treated as UTC."""
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def get_timezone(name: str | None = None) -> tzinfo:
    if name and name.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(name or DEFAULT_TIMEZONE)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValidationError(f"Unknown timezone: {name!r}") from e


def now_local(tz: tzinfo | None = None) -> datetime:
    """Current timezone-aware time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(tz or get_timezone())


def round_half_up(value: float) -> int:
    """Round to nearest; halves always go up, negatives included (-0.5 -> 0)."""
    return int(math.floor(value + 0.5))


def minutes_between(start: datetime, end: datetime) -> int:
    """Whole minutes from start to end, rounded to nearest and never negative."""
    return max(0, round_half_up((end - start).total_seconds() / 60))


def to_local(value: datetime, tz: tzinfo) -> datetime:
    """Naive values are taken as already local; aware ones are converted."""
    if value.tzinfo is None:
        return value.replace(tzinfo=tz)
    return value.astimezone(tz)
