from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..calculation.base import DayCalculator
from ..calculation.standard_calculator import StandardDayCalculator
from ..core.enums import NoBookingPolicy, ScenarioKind
from .model import DayFacts
from .strategies.absence_credit import AbsenceCreditStrategy
from .strategies.base import DailyScenarioStrategy
from .strategies.booked_day import BookedDayStrategy
from .strategies.holiday_credit import HolidayCreditStrategy
from .strategies.no_bookings import NoBookingsStrategy
from .strategies.off_day import OffDayStrategy
from .strategies.skip import SkipStrategy


def resolve_scenario(facts: DayFacts) -> ScenarioKind:
    """Pure dispatch over (assignment, holiday, bookings, policy)."""

    if not facts.has_assignment:
        return ScenarioKind.OFF_DAY
    if facts.is_holiday:
        return ScenarioKind.WORKED_HOLIDAY if facts.booking_count > 0 else ScenarioKind.HOLIDAY_CREDIT
    if facts.booking_count > 0:
        return ScenarioKind.REGULAR_DAY
    if facts.no_booking_policy == NoBookingPolicy.SKIP:
        return ScenarioKind.SKIP
    if facts.no_booking_policy == NoBookingPolicy.USE_ABSENCE and facts.absences_available:
        return ScenarioKind.ABSENCE_CREDIT
    return ScenarioKind.NO_BOOKINGS


@dataclass
class DailyScenarioFactory:
    """Factory Pattern: map a day's facts to the strategy that produces its result."""

    calculator: Optional[DayCalculator] = None

    def __post_init__(self) -> None:
        if self.calculator is None:
            self.calculator = StandardDayCalculator()

    def for_day(self, facts: DayFacts) -> DailyScenarioStrategy:
        kind = resolve_scenario(facts)
        if kind == ScenarioKind.OFF_DAY:
            return OffDayStrategy()
        if kind == ScenarioKind.HOLIDAY_CREDIT:
            return HolidayCreditStrategy()
        if kind == ScenarioKind.WORKED_HOLIDAY:
            return BookedDayStrategy(self.calculator, on_holiday=True)
        if kind == ScenarioKind.REGULAR_DAY:
            return BookedDayStrategy(self.calculator)
        if kind == ScenarioKind.SKIP:
            return SkipStrategy()
        if kind == ScenarioKind.ABSENCE_CREDIT:
            return AbsenceCreditStrategy()
        return NoBookingsStrategy()
