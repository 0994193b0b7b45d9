import pytest

from src.timekeeping.timekeeping.calculation.shift import (
    ShiftDetectionInput,
    detect_shift,
    match_plan,
    validate_shift_detection,
)
from src.timekeeping.timekeeping.core.enums import ShiftMatch

EARLY = ShiftDetectionInput(plan_id=1, plan_code="EARLY", arrive_from=360, arrive_to=420, alternative_plan_ids=(2, 3))
MIDDLE = ShiftDetectionInput(plan_id=2, plan_code="MIDDLE", arrive_from=420, arrive_to=480)
LATE = ShiftDetectionInput(plan_id=3, plan_code="LATE", arrive_from=480, arrive_to=540)


def test_no_assigned_plan_gives_empty_result():
    result = detect_shift(None, 420, 1020)

    assert result.matched_plan_id is None
    assert result.is_original_plan
    assert not result.has_error


def test_plan_without_windows_keeps_original():
    plan = ShiftDetectionInput(plan_id=1, plan_code="STD", alternative_plan_ids=(2,))

    result = detect_shift(plan, 420, 1020, {2: MIDDLE})

    assert result.matched_plan_id == 1
    assert result.is_original_plan
    assert result.matched_by == ShiftMatch.NONE
    assert not result.has_error


def test_no_booking_times_keeps_original_without_error():
    result = detect_shift(EARLY, None, None, {2: MIDDLE})

    assert result.matched_plan_id == 1
    assert not result.has_error


@pytest.mark.parametrize(
    "arrival, matched",
    [(390, True), (360, True), (420, True), (350, False), (430, False)],
)
def test_arrival_window_boundaries_are_inclusive(arrival, matched):
    expected = ShiftMatch.ARRIVAL if matched else ShiftMatch.NONE
    assert match_plan(EARLY, arrival, 1020) == expected


def test_arrival_window_ignores_missing_departure():
    result = detect_shift(EARLY, 400, None)

    assert result.matched_by == ShiftMatch.ARRIVAL
    assert not result.has_error


@pytest.mark.parametrize(
    "departure, matched",
    [(1020, True), (960, True), (1080, True), (950, False), (1090, False)],
)
def test_departure_window(departure, matched):
    plan = ShiftDetectionInput(plan_id=1, plan_code="STD", depart_from=960, depart_to=1080)

    result = detect_shift(plan, 480, departure)

    assert result.has_error is not matched
    assert result.matched_by == (ShiftMatch.DEPARTURE if matched else ShiftMatch.NONE)


@pytest.mark.parametrize(
    "arrival, departure, matched",
    [
        (420, 1020, True),
        (420, 900, False),
        (500, 1020, False),
        (500, 900, False),
        (360, 1080, True),
        (None, 1020, False),
        (420, None, False),
    ],
)
def test_both_windows_must_match(arrival, departure, matched):
    plan = ShiftDetectionInput(
        plan_id=1, plan_code="STD", arrive_from=360, arrive_to=480, depart_from=960, depart_to=1080
    )

    result = detect_shift(plan, arrival, departure)

    assert result.has_error is not matched
    if matched:
        assert result.matched_by == ShiftMatch.BOTH


def test_first_matching_alternative_wins():
    result = detect_shift(EARLY, 450, 1020, {2: MIDDLE, 3: LATE})

    assert result.matched_plan_id == 2
    assert result.matched_plan_code == "MIDDLE"
    assert not result.is_original_plan
    assert result.matched_by == ShiftMatch.ARRIVAL


def test_later_alternative_matches_when_earlier_do_not():
    result = detect_shift(EARLY, 500, 1020, {2: MIDDLE, 3: LATE})

    assert result.matched_plan_id == 3
    assert not result.is_original_plan


def test_assigned_plan_is_checked_before_alternatives():
    overlapping = ShiftDetectionInput(plan_id=2, plan_code="WIDE", arrive_from=0, arrive_to=1440)
    plan = ShiftDetectionInput(plan_id=1, plan_code="EARLY", arrive_from=360, arrive_to=420, alternative_plan_ids=(2,))

    result = detect_shift(plan, 400, 1020, {2: overlapping})

    assert result.matched_plan_id == 1
    assert result.is_original_plan


def test_no_match_returns_original_plan_with_error():
    result = detect_shift(EARLY, 600, 1020, {2: MIDDLE, 3: LATE})

    assert result.matched_plan_id == 1
    assert result.matched_plan_code == "EARLY"
    assert result.is_original_plan
    assert result.matched_by == ShiftMatch.NONE
    assert result.error_code == "NO_MATCHING_SHIFT"


def test_alternatives_that_could_not_be_loaded_are_skipped():
    assert detect_shift(EARLY, 500, 1020, {3: LATE}).matched_plan_id == 3
    assert detect_shift(EARLY, 500, 1020).error_code == "NO_MATCHING_SHIFT"


@pytest.mark.parametrize(
    "arrival, departure, matched",
    [(0, 1440, True), (60, 1380, True), (120, 1200, False)],
)
def test_midnight_boundaries(arrival, departure, matched):
    night = ShiftDetectionInput(
        plan_id=1, plan_code="NIGHT", arrive_from=0, arrive_to=60, depart_from=1380, depart_to=1440
    )

    result = detect_shift(night, arrival, departure)

    assert result.has_error is not matched


def test_validate_accepts_complete_windows():
    assert validate_shift_detection(EARLY) == []


def test_validate_reports_half_configured_and_inverted_windows():
    plan = ShiftDetectionInput(plan_id=1, plan_code="BAD", arrive_from=480, arrive_to=420, depart_from=960)

    problems = validate_shift_detection(plan)

    assert "shift_detect_arrive_from must be <= shift_detect_arrive_to" in problems
    assert "shift_detect_depart_from and shift_detect_depart_to must be set together" in problems


def test_validate_rejects_minutes_outside_the_day():
    plan = ShiftDetectionInput(plan_id=1, plan_code="BAD", depart_from=960, depart_to=1500)

    assert validate_shift_detection(plan) == ["shift_detect_depart_to must be between 0 and 1440"]
