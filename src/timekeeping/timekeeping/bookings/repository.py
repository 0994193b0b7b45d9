from __future__ import annotations

from datetime import date
from typing import Mapping, Protocol, Sequence

from .model import Booking


class BookingRepository(Protocol):
    def get_for_employee_and_date(self, employee_id: int, booking_date: date) -> Sequence[Booking]:
        """Bookings of one employee-day ordered by edited time."""

        raise NotImplementedError

    def write_adjusted_times(self, times: Mapping[int, int]) -> None:
        """Persist ``calculated_time`` for every booking id in one batch."""

        raise NotImplementedError
