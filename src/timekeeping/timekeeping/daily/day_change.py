"""Cross-midnight attribution ("to-first").

A shift that starts before midnight belongs entirely to the day it started on:
its departure is pulled from the next day into the first day's calculation and
ignored when the next day is calculated.
"""

from __future__ import annotations

from typing import Optional, Sequence

from ..bookings.model import Booking
from ..core.enums import BookingCategory, BookingDirection


def _work_sorted(bookings: Sequence[Booking]) -> list[Booking]:
    items = [b for b in bookings if b.category == BookingCategory.WORK]
    items.sort(key=lambda b: (b.edited_time, b.booking_id))
    return items


def trailing_arrival(bookings: Sequence[Booking]) -> Optional[Booking]:
    """The last work booking of the day when it is an arrival without a departure after it."""

    work = _work_sorted(bookings)
    if work and work[-1].direction == BookingDirection.IN:
        return work[-1]
    return None


def leading_departure(bookings: Sequence[Booking]) -> Optional[Booking]:
    """The first work booking of the day when it is a departure."""

    work = _work_sorted(bookings)
    if work and work[0].direction == BookingDirection.OUT:
        return work[0]
    return None


def attribute_to_first_day(
    today: Sequence[Booking],
    *,
    previous: Optional[Sequence[Booking]] = None,
    following: Optional[Sequence[Booking]] = None,
) -> list[Booking]:
    """Return the bookings to calculate for ``today``.

    ``previous``/``following`` are the neighbouring days' bookings, or None when
    they were not needed (no leading departure / no trailing arrival today).
    ``previous`` must only be given when that day is calculated with a day plan;
    otherwise nobody would count the departure.
    """

    result = list(today)

    lead = leading_departure(today)
    if lead is not None and previous and trailing_arrival(previous) is not None:
        result = [b for b in result if b.booking_id != lead.booking_id]

    tail = trailing_arrival(result)
    if tail is not None and following:
        departure = leading_departure(following)
        if departure is not None:
            result.append(departure)

    return result
