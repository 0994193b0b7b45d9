from datetime import date

import pytest

from src.timekeeping.timekeeping.bookings.model import Booking
from src.timekeeping.timekeeping.calculation.rounding import AddFixed, NoRounding, RoundNearest
from src.timekeeping.timekeeping.core.enums import (
    BookingCategory,
    BookingDirection,
    BreakType,
    DayChangePolicy,
    HolidayCreditPolicy,
    NoBookingPolicy,
)
from src.timekeeping.timekeeping.core.exceptions import ConfigurationError
from src.timekeeping.timekeeping.daily.input_builder import (
    build_day_plan_config,
    day_change_policy,
    holiday_credit_policy,
    no_booking_policy,
    shift_detection_input,
    to_booking_inputs,
)
from src.timekeeping.timekeeping.dayplans.model import DayPlan, DayPlanBreak


def _plan(**kw):
    values = dict(day_plan_id=1, tenant_id=1, code="STD", name="Standard")
    values.update(kw)
    return DayPlan(**values)


def test_stored_plan_translates_to_config():
    plan = _plan(
        regular_minutes=450,
        come_from=420,
        go_to=1020,
        tolerance_come_minus=5,
        tolerance_go_plus=10,
        come_rounding_mode="nearest",
        come_rounding_interval=10,
        go_rounding_mode="add",
        go_rounding_interval=15,
        go_rounding_offset=10,
        breaks=(DayPlanBreak(break_type="minimum", duration=30, after_work_minutes=360, is_paid=True),),
    )

    config = build_day_plan_config(plan)

    assert config.regular_minutes == 450
    assert config.come_from == 420
    assert config.tolerance.come_minus == 5
    assert config.tolerance.go_plus == 10
    assert config.come_rounding == RoundNearest(10)
    assert config.go_rounding == AddFixed(10)
    assert config.breaks[0].break_type == BreakType.MINIMUM
    assert config.breaks[0].is_paid
    assert config.round_all_bookings


def test_defaults_mean_no_rounding():
    config = build_day_plan_config(_plan())
    assert config.come_rounding == NoRounding()
    assert config.go_rounding == NoRounding()
    assert config.regular_minutes == 480


def test_unknown_break_type_is_rejected():
    with pytest.raises(ConfigurationError):
        build_day_plan_config(_plan(breaks=(DayPlanBreak(break_type="lunch", duration=30),)))


def test_policies_accept_dashed_values():
    plan = _plan(no_booking_policy="credit-target", holiday_credit_policy="credit-zero", day_change_policy="by-shift")

    assert no_booking_policy(plan) == NoBookingPolicy.CREDIT_TARGET
    assert holiday_credit_policy(plan) == HolidayCreditPolicy.CREDIT_ZERO
    assert day_change_policy(plan) == DayChangePolicy.BY_SHIFT


def test_unknown_policy_is_rejected():
    with pytest.raises(ConfigurationError):
        no_booking_policy(_plan(no_booking_policy="ignore"))


def test_calculation_reads_edited_time():
    booking = Booking(
        booking_id=3,
        tenant_id=1,
        employee_id=7,
        booking_date=date(2026, 3, 2),
        direction=BookingDirection.IN,
        category=BookingCategory.WORK,
        original_time=470,
        edited_time=480,
    )

    (item,) = to_booking_inputs([booking])

    assert item.time == 480
    assert item.booking_id == 3


def test_dashed_rounding_modes_from_the_store():
    config = build_day_plan_config(
        _plan(come_rounding_mode="round-nearest", come_rounding_interval=10, go_rounding_mode="add-fixed", go_rounding_offset=10)
    )

    assert config.come_rounding == RoundNearest(10)
    assert config.go_rounding == AddFixed(10)


def test_plan_without_detection_windows_has_no_shift_input():
    assert shift_detection_input(_plan(alternative_plan_ids=(2, 3))) is None


def test_shift_detection_input_carries_windows_and_alternatives():
    detection = shift_detection_input(
        _plan(code="EARLY", shift_detect_depart_from=960, shift_detect_depart_to=1080, alternative_plan_ids=(4, 2))
    )

    assert detection.plan_code == "EARLY"
    assert detection.has_departure_window
    assert not detection.has_arrival_window
    assert detection.alternative_plan_ids == (4, 2)


def test_inverted_detection_window_is_rejected():
    with pytest.raises(ConfigurationError):
        shift_detection_input(_plan(shift_detect_arrive_from=480, shift_detect_arrive_to=360))
