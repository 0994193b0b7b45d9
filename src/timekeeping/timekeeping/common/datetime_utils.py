from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterator, Optional

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Ngày không hợp lệ: {value!r}") from exc


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def format_minutes(minutes: Optional[int]) -> Optional[str]:
    """480 -> '08:00'. Values past midnight keep counting hours (1500 -> '25:00')."""
    if minutes is None:
        return None
    sign = "-" if minutes < 0 else ""
    minutes = abs(minutes)
    return f"{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def iter_days(start: date, end: date) -> Iterator[date]:
    day = start
    while day <= end:
        yield day
        day += timedelta(days=1)
