from __future__ import annotations

from enum import Enum


class BookingDirection(str, Enum):
    """Hướng của một lần chấm công: vào (arrival) hoặc ra (departure)."""

    IN = "in"
    OUT = "out"


class BookingCategory(str, Enum):
    """Work bookings bound the working span; break bookings bound a booked break."""

    WORK = "work"
    BREAK = "break"


class RoundingMode(str, Enum):
    NONE = "none"
    UP = "up"
    DOWN = "down"
    NEAREST = "nearest"
    ADD = "add"
    SUBTRACT = "subtract"


class BreakType(str, Enum):
    FIXED = "fixed"
    VARIABLE = "variable"
    MINIMUM = "minimum"


class NoBookingPolicy(str, Enum):
    """What to book for a planned workday that has no bookings at all."""

    ERROR = "error"
    CREDIT_TARGET = "credit_target"
    CREDIT_ZERO = "credit_zero"
    USE_ABSENCE = "use_absence"
    SKIP = "skip"


class HolidayCreditPolicy(str, Enum):
    CREDIT_TARGET = "credit_target"
    CREDIT_ZERO = "credit_zero"
    AVERAGE = "average"


class DayChangePolicy(str, Enum):
    """Cross-midnight attribution. Only TO_FIRST has an implementation."""

    TO_FIRST = "to_first"
    SPLIT = "split"
    BY_SHIFT = "by_shift"


class DailyValueStatus(str, Enum):
    CALCULATED = "calculated"
    ERROR = "error"


class ScenarioKind(str, Enum):
    OFF_DAY = "off_day"
    HOLIDAY_CREDIT = "holiday_credit"
    WORKED_HOLIDAY = "worked_holiday"
    NO_BOOKINGS = "no_bookings"
    ABSENCE_CREDIT = "absence_credit"
    SKIP = "skip"
    REGULAR_DAY = "regular_day"


class ShiftMatch(str, Enum):
    """Which detection window(s) recognised the day's shift."""

    NONE = "none"
    ARRIVAL = "arrival"
    DEPARTURE = "departure"
    BOTH = "both"
