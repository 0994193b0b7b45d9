from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional

from ..core.enums import BookingCategory, BookingDirection, BreakType
from .rounding import NoRounding, Rounding


@dataclass(frozen=True)
class BookingInput:
    """A booking as seen by the calculator: id, effective time and its role."""

    booking_id: int
    time: int
    direction: BookingDirection
    category: BookingCategory = BookingCategory.WORK
    pair_id: Optional[int] = None


@dataclass(frozen=True)
class Tolerance:
    come_plus: int = 0
    come_minus: int = 0
    go_plus: int = 0
    go_minus: int = 0


@dataclass(frozen=True)
class BreakRule:
    """One break deduction policy.

    - FIXED: clock window ``start_time``-``end_time``; deducts the overlap with work.
    - VARIABLE: ``duration`` after ``after_work_minutes``, only when no break was booked.
    - MINIMUM: ``duration`` after ``after_work_minutes``, always.
    """

    break_type: BreakType
    duration: int
    start_time: Optional[int] = None
    end_time: Optional[int] = None
    after_work_minutes: Optional[int] = None
    auto_deduct: bool = True
    is_paid: bool = False
    minutes_difference: bool = False


@dataclass(frozen=True)
class DayPlanConfig:
    """Fully resolved rule-set for one calculation run."""

    regular_minutes: int
    come_from: Optional[int] = None
    come_to: Optional[int] = None
    go_from: Optional[int] = None
    go_to: Optional[int] = None
    core_start: Optional[int] = None
    core_end: Optional[int] = None
    min_net_minutes: Optional[int] = None
    max_net_minutes: Optional[int] = None
    tolerance: Tolerance = field(default_factory=Tolerance)
    come_rounding: Rounding = field(default_factory=NoRounding)
    go_rounding: Rounding = field(default_factory=NoRounding)
    round_all_bookings: bool = True
    cap_to_window: bool = False
    breaks: tuple[BreakRule, ...] = ()


@dataclass(frozen=True)
class BookingPair:
    """A matched start/end.

    Work pairs run IN -> OUT, break pairs run OUT -> IN; ``start``/``end`` hold
    the effective minutes and ``duration`` is already normalised across midnight.
    """

    category: BookingCategory
    start_booking_id: int
    end_booking_id: int
    start: int
    end: int
    duration: int

    @property
    def crosses_midnight(self) -> bool:
        return self.end < self.start


@dataclass(frozen=True)
class CalculationResult:
    target_minutes: int
    gross_minutes: int = 0
    net_minutes: int = 0
    break_minutes: int = 0
    overtime_minutes: int = 0
    undertime_minutes: int = 0
    capped_minutes: int = 0
    first_come: Optional[int] = None
    last_go: Optional[int] = None
    booking_count: int = 0
    calculated_times: Mapping[int, int] = field(default_factory=dict)
    pairs: tuple[BookingPair, ...] = ()
    unpaired_in_ids: tuple[int, ...] = ()
    unpaired_out_ids: tuple[int, ...] = ()
    error_codes: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def has_error(self) -> bool:
        return bool(self.error_codes)


def unique_codes(codes: Iterable[str]) -> tuple[str, ...]:
    """De-duplicate codes keeping first-seen order."""

    return tuple(dict.fromkeys(codes))


def overtime_undertime(net_minutes: int, target_minutes: int) -> tuple[int, int]:
    diff = net_minutes - target_minutes
    if diff > 0:
        return diff, 0
    return 0, -diff
