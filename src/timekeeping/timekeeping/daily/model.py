from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..absences.model import Absence
from ..calculation.model import BookingInput, DayPlanConfig
from ..calculation.shift import ShiftDetectionInput
from ..core.enums import HolidayCreditPolicy, NoBookingPolicy


@dataclass(frozen=True)
class DayFacts:
    """The facts scenario dispatch depends on; resolved once per run."""

    has_assignment: bool
    is_holiday: bool
    booking_count: int
    no_booking_policy: NoBookingPolicy = NoBookingPolicy.ERROR
    holiday_credit_policy: HolidayCreditPolicy = HolidayCreditPolicy.CREDIT_TARGET
    absences_available: bool = False


@dataclass(frozen=True)
class AlternativePlan:
    """A plan shift detection may switch to, already translated for the calculator."""

    detection: ShiftDetectionInput
    config: DayPlanConfig


@dataclass(frozen=True)
class DayContext:
    """Everything a scenario strategy may read. No I/O happens after this is built."""

    tenant_id: int
    employee_id: int
    work_date: date
    facts: DayFacts
    bookings: tuple[BookingInput, ...] = ()
    config: Optional[DayPlanConfig] = None
    absence: Optional[Absence] = None
    shift_detection: Optional[ShiftDetectionInput] = None
    alternative_plans: tuple[AlternativePlan, ...] = ()

    @property
    def target_minutes(self) -> int:
        return self.config.regular_minutes if self.config else 0
