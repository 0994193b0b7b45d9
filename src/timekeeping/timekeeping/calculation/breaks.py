from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..core.constants import WARN_AUTO_BREAK_APPLIED, WARN_MANUAL_BREAK, WARN_NO_BREAK_RECORDED
from ..core.enums import BookingCategory, BreakType
from .model import BookingPair, BreakRule


@dataclass(frozen=True)
class BreakDeduction:
    """Outcome of break evaluation.

    ``total_minutes`` is everything recorded as break (booked + all rules);
    ``unpaid_minutes`` is the part that comes off net time.
    """

    total_minutes: int
    unpaid_minutes: int
    warnings: tuple[str, ...] = ()


def overlap(start1: int, end1: int, start2: int, end2: int) -> int:
    return max(0, min(end1, end2) - max(start1, start2))


def fixed_break_minutes(pairs: Sequence[BookingPair], rule: BreakRule) -> int:
    if rule.start_time is None or rule.end_time is None:
        return 0
    total = 0
    for p in pairs:
        if p.category != BookingCategory.WORK:
            continue
        total += overlap(p.start, p.start + p.duration, rule.start_time, rule.end_time)
    return min(total, rule.duration)


def minimum_break_minutes(gross_minutes: int, rule: BreakRule) -> int:
    if rule.after_work_minutes is None or gross_minutes < rule.after_work_minutes:
        return 0
    if rule.minutes_difference:
        return min(gross_minutes - rule.after_work_minutes, rule.duration)
    return rule.duration


def variable_break_minutes(gross_minutes: int, recorded_break: int, rule: BreakRule) -> int:
    if recorded_break > 0:
        return 0
    if rule.after_work_minutes is not None and gross_minutes < rule.after_work_minutes:
        return 0
    return rule.duration


def calculate_break_deduction(
    pairs: Sequence[BookingPair],
    recorded_break: int,
    gross_minutes: int,
    rules: Sequence[BreakRule],
) -> BreakDeduction:
    """Combine booked breaks with the day plan's break rules.

    Automatic thresholds are compared with accumulated gross work, not clock time.
    """

    if not rules:
        return BreakDeduction(total_minutes=recorded_break, unpaid_minutes=recorded_break)

    warnings: list[str] = [WARN_MANUAL_BREAK if recorded_break > 0 else WARN_NO_BREAK_RECORDED]
    total = recorded_break
    unpaid = recorded_break
    auto_applied = False

    for rule in rules:
        if rule.break_type == BreakType.FIXED:
            minutes = fixed_break_minutes(pairs, rule)
        elif not rule.auto_deduct:
            minutes = 0
        elif rule.break_type == BreakType.VARIABLE:
            minutes = variable_break_minutes(gross_minutes, recorded_break, rule)
        else:
            minutes = minimum_break_minutes(gross_minutes, rule)

        if minutes <= 0:
            continue
        if rule.break_type != BreakType.FIXED:
            auto_applied = True
        total += minutes
        if not rule.is_paid:
            unpaid += minutes

    if auto_applied:
        warnings.append(WARN_AUTO_BREAK_APPLIED)
    return BreakDeduction(total_minutes=total, unpaid_minutes=unpaid, warnings=tuple(warnings))
