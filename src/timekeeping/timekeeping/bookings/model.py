from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import BookingCategory, BookingDirection


@dataclass(frozen=True)
class Booking:
    """Một lần chấm công (vào/ra) của nhân viên trong một ngày.

    Times are minutes since midnight. ``edited_time`` starts equal to
    ``original_time`` and is the value calculations read; ``calculated_time``
    is only written back by a calculation run.
    """

    booking_id: int
    tenant_id: int
    employee_id: int
    booking_date: date
    direction: BookingDirection
    category: BookingCategory
    original_time: int
    edited_time: int
    calculated_time: Optional[int] = None
    pair_id: Optional[int] = None
