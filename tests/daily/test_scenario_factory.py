import pytest

from src.timekeeping.timekeeping.core.enums import HolidayCreditPolicy, NoBookingPolicy, ScenarioKind
from src.timekeeping.timekeeping.daily.factory import DailyScenarioFactory, resolve_scenario
from src.timekeeping.timekeeping.daily.model import DayFacts
from src.timekeeping.timekeeping.daily.strategies.booked_day import BookedDayStrategy
from src.timekeeping.timekeeping.daily.strategies.off_day import OffDayStrategy
from src.timekeeping.timekeeping.daily.strategies.skip import SkipStrategy


@pytest.mark.parametrize(
    "facts, expected",
    [
        (DayFacts(has_assignment=False, is_holiday=False, booking_count=0), ScenarioKind.OFF_DAY),
        (DayFacts(has_assignment=False, is_holiday=True, booking_count=3), ScenarioKind.OFF_DAY),
        (DayFacts(has_assignment=True, is_holiday=True, booking_count=0), ScenarioKind.HOLIDAY_CREDIT),
        (DayFacts(has_assignment=True, is_holiday=True, booking_count=2), ScenarioKind.WORKED_HOLIDAY),
        (DayFacts(has_assignment=True, is_holiday=False, booking_count=2), ScenarioKind.REGULAR_DAY),
        (DayFacts(has_assignment=True, is_holiday=False, booking_count=0), ScenarioKind.NO_BOOKINGS),
        (
            DayFacts(has_assignment=True, is_holiday=False, booking_count=0, no_booking_policy=NoBookingPolicy.SKIP),
            ScenarioKind.SKIP,
        ),
        (
            DayFacts(
                has_assignment=True,
                is_holiday=False,
                booking_count=0,
                no_booking_policy=NoBookingPolicy.USE_ABSENCE,
                absences_available=True,
            ),
            ScenarioKind.ABSENCE_CREDIT,
        ),
        (
            DayFacts(
                has_assignment=True,
                is_holiday=False,
                booking_count=0,
                no_booking_policy=NoBookingPolicy.USE_ABSENCE,
                absences_available=False,
            ),
            ScenarioKind.NO_BOOKINGS,
        ),
    ],
)
def test_resolve_scenario(facts, expected):
    assert resolve_scenario(facts) == expected


def test_holiday_policy_does_not_change_the_scenario_kind():
    facts = DayFacts(
        has_assignment=True,
        is_holiday=True,
        booking_count=0,
        holiday_credit_policy=HolidayCreditPolicy.CREDIT_ZERO,
        no_booking_policy=NoBookingPolicy.SKIP,
    )
    assert resolve_scenario(facts) == ScenarioKind.HOLIDAY_CREDIT


def test_factory_returns_matching_strategies():
    factory = DailyScenarioFactory()

    off = factory.for_day(DayFacts(has_assignment=False, is_holiday=False, booking_count=0))
    assert isinstance(off, OffDayStrategy)

    worked = factory.for_day(DayFacts(has_assignment=True, is_holiday=True, booking_count=2))
    assert isinstance(worked, BookedDayStrategy)
    assert worked.kind == ScenarioKind.WORKED_HOLIDAY

    skip = factory.for_day(
        DayFacts(has_assignment=True, is_holiday=False, booking_count=0, no_booking_policy=NoBookingPolicy.SKIP)
    )
    assert isinstance(skip, SkipStrategy)
