from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.exceptions import ValidationError


def require_positive_id(value, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{field_name} không hợp lệ") from exc
    if number <= 0:
        raise ValidationError(f"{field_name} không hợp lệ")
    return number


def require_date_range(start: date, end: date, *, max_days: Optional[int] = None) -> int:
    """Returns the number of days in the inclusive range."""
    if end < start:
        raise ValidationError("Khoảng ngày không hợp lệ: ngày kết thúc trước ngày bắt đầu")
    days = (end - start).days + 1
    if max_days is not None and days > max_days:
        raise ValidationError(f"Khoảng ngày tối đa {max_days} ngày")
    return days
