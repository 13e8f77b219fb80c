from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import List

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime((value or "").strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError("Ngày không hợp lệ (YYYY-MM-DD)")


def parse_iso_datetime(value: str) -> datetime:
    """Parse 'YYYY-MM-DDTHH:MM[:SS]' (or with a space separator)."""
    v = (value or "").strip()
    for fmt in ("%Y-%m-%dT%H:%M:%S", "%Y-%m-%dT%H:%M", "%Y-%m-%d %H:%M:%S", "%Y-%m-%d %H:%M"):
        try:
            return datetime.strptime(v, fmt)
        except ValueError:
            continue
    raise ValidationError("Thời gian không hợp lệ (YYYY-MM-DDTHH:MM)")


def parse_hhmm(value: str) -> time:
    try:
        return datetime.strptime((value or "").strip(), "%H:%M").time()
    except ValueError:
        raise ValidationError("Giờ không hợp lệ (HH:MM)")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min)


def end_of_day(day: date) -> datetime:
    return datetime.combine(day, time.max)


def sunday_weekday(day: date) -> int:
    """Day of week with 0=Sunday .. 6=Saturday (the scheduling UI convention)."""
    return (day.weekday() + 1) % 7


def week_dates(day: date) -> List[date]:
    """Monday..Sunday of the week containing ``day``."""
    monday = day - timedelta(days=day.weekday())
    return [monday + timedelta(days=i) for i in range(7)]


def format_duration(minutes: int) -> str:
    return f"{minutes // 60}h {minutes % 60:02d}m"
