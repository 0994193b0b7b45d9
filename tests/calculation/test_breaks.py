from src.timekeeping.timekeeping.calculation.breaks import (
    calculate_break_deduction,
    fixed_break_minutes,
    minimum_break_minutes,
    overlap,
)
from src.timekeeping.timekeeping.calculation.model import BookingPair, BreakRule
from src.timekeeping.timekeeping.core.enums import BookingCategory, BreakType


def _work(start, end):
    return BookingPair(
        category=BookingCategory.WORK, start_booking_id=1, end_booking_id=2, start=start, end=end, duration=end - start
    )


def _minimum(after=300, **kw):
    return BreakRule(break_type=BreakType.MINIMUM, duration=30, after_work_minutes=after, **kw)


def test_without_rules_only_booked_break_counts():
    result = calculate_break_deduction([], 30, 480, [])
    assert result.total_minutes == 30
    assert result.unpaid_minutes == 30
    assert result.warnings == ()


def test_booked_break_and_minimum_rule_add_up():
    result = calculate_break_deduction([], 45, 480, [_minimum()])
    assert result.total_minutes == 75
    assert "MANUAL_BREAK" in result.warnings
    assert "AUTO_BREAK_APPLIED" in result.warnings


def test_auto_deduct_when_nothing_booked():
    result = calculate_break_deduction([], 0, 480, [_minimum()])
    assert result.total_minutes == 30
    assert "AUTO_BREAK_APPLIED" in result.warnings
    assert "NO_BREAK_RECORDED" in result.warnings


def test_fixed_and_variable_rules():
    rules = [
        BreakRule(break_type=BreakType.FIXED, duration=30, start_time=720, end_time=750),
        BreakRule(break_type=BreakType.VARIABLE, duration=15),
    ]
    result = calculate_break_deduction([_work(480, 1020)], 0, 540, rules)
    assert result.total_minutes == 45


def test_variable_rule_is_skipped_when_a_break_was_booked():
    rules = [BreakRule(break_type=BreakType.VARIABLE, duration=15)]
    result = calculate_break_deduction([_work(480, 1020)], 20, 520, rules)
    assert result.total_minutes == 20
    assert "AUTO_BREAK_APPLIED" not in result.warnings


def test_threshold_is_compared_with_gross_work():
    rules = [_minimum(after=360)]
    assert calculate_break_deduction([], 0, 300, rules).total_minutes == 0
    assert calculate_break_deduction([], 0, 400, rules).total_minutes == 30


def test_minimum_break_edges():
    assert minimum_break_minutes(240, _minimum()) == 0
    assert minimum_break_minutes(300, _minimum()) == 30
    assert minimum_break_minutes(310, _minimum(minutes_difference=True)) == 10
    assert minimum_break_minutes(360, _minimum(minutes_difference=True)) == 30
    assert minimum_break_minutes(480, _minimum(after=None)) == 0


def test_paid_rule_is_recorded_but_not_deducted():
    result = calculate_break_deduction([], 0, 480, [_minimum(is_paid=True)])
    assert result.total_minutes == 30
    assert result.unpaid_minutes == 0


def test_fixed_break_overlap_is_capped_at_duration():
    wide = BreakRule(break_type=BreakType.FIXED, duration=30, start_time=720, end_time=780)
    assert fixed_break_minutes([_work(480, 1020)], wide) == 30

    partial = BreakRule(break_type=BreakType.FIXED, duration=30, start_time=720, end_time=750)
    assert fixed_break_minutes([_work(480, 735)], partial) == 15
    assert fixed_break_minutes([_work(480, 690)], partial) == 0

    no_window = BreakRule(break_type=BreakType.FIXED, duration=30, end_time=750)
    assert fixed_break_minutes([_work(480, 1020)], no_window) == 0


def test_overlap():
    assert overlap(480, 1020, 720, 750) == 30
    assert overlap(730, 1020, 720, 750) == 20
    assert overlap(725, 740, 720, 750) == 15
    assert overlap(480, 720, 720, 750) == 0
