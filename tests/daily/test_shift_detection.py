from datetime import date

import pytest

from src.timekeeping.timekeeping.core.exceptions import ConfigurationError

DAY = date(2026, 3, 2)


def _early_plan(harness, **overrides):
    values = dict(
        day_plan_id=1,
        code="EARLY",
        regular_minutes=480,
        shift_detect_arrive_from=360,
        shift_detect_arrive_to=420,
        alternative_plan_ids=(2,),
    )
    values.update(overrides)
    return harness.assign(DAY, **values)


def test_matching_alternative_plan_is_used_for_the_day(harness):
    _early_plan(harness)
    harness.add_plan(day_plan_id=2, code="LATE", regular_minutes=420, shift_detect_arrive_from=480, shift_detect_arrive_to=540)
    harness.book(DAY, 500, "in")
    harness.book(DAY, 1000, "out")

    value = harness.calculate(DAY)

    assert value.target_minutes == 420
    assert value.net_minutes == 500
    assert value.overtime_minutes == 80
    assert not value.has_error


def test_assigned_plan_kept_when_its_window_matches(harness):
    _early_plan(harness)
    harness.add_plan(day_plan_id=2, code="LATE", regular_minutes=420, shift_detect_arrive_from=0, shift_detect_arrive_to=1440)
    harness.book(DAY, 400, "in")
    harness.book(DAY, 880, "out")

    value = harness.calculate(DAY)

    assert value.target_minutes == 480
    assert not value.has_error


def test_no_matching_plan_flags_the_day(harness):
    _early_plan(harness)
    harness.add_plan(day_plan_id=2, code="LATE", regular_minutes=420, shift_detect_arrive_from=480, shift_detect_arrive_to=540)
    harness.book(DAY, 600, "in")
    harness.book(DAY, 1080, "out")

    value = harness.calculate(DAY)

    assert value.target_minutes == 480
    assert value.net_minutes == 480
    assert value.has_error
    assert value.error_codes == ("NO_MATCHING_SHIFT",)


def test_missing_alternative_plan_counts_as_no_match(harness):
    _early_plan(harness)
    harness.book(DAY, 500, "in")
    harness.book(DAY, 1000, "out")

    value = harness.calculate(DAY)

    assert "NO_MATCHING_SHIFT" in value.error_codes


def test_alternative_without_windows_never_matches(harness):
    _early_plan(harness)
    harness.add_plan(day_plan_id=2, code="FLEX", regular_minutes=420)
    harness.book(DAY, 500, "in")
    harness.book(DAY, 1000, "out")

    value = harness.calculate(DAY)

    assert value.target_minutes == 480
    assert "NO_MATCHING_SHIFT" in value.error_codes


def test_worked_holiday_also_runs_shift_detection(harness):
    harness.holidays.days.add((1, DAY))
    _early_plan(harness)
    harness.add_plan(day_plan_id=2, code="LATE", regular_minutes=420, shift_detect_arrive_from=480, shift_detect_arrive_to=540)
    harness.book(DAY, 500, "in")
    harness.book(DAY, 920, "out")

    value = harness.calculate(DAY)

    assert value.target_minutes == 420
    assert "WORKED_ON_HOLIDAY" in value.warnings
    assert not value.has_error


def test_days_without_bookings_skip_detection(harness):
    _early_plan(harness, no_booking_policy="credit_target")

    value = harness.calculate(DAY)

    assert value.net_minutes == 480
    assert not value.has_error


def test_half_configured_window_is_a_configuration_error(harness):
    _early_plan(harness, shift_detect_arrive_to=None)
    harness.book(DAY, 400, "in")
    harness.book(DAY, 880, "out")

    with pytest.raises(ConfigurationError):
        harness.calculate(DAY)
