"""Nhận diện ca (shift detection).

A day plan may carry an arrival window and/or a departure window. When the
day's first arrival / last departure fall outside them, up to six alternative
plans are tried in order and the first one whose windows match is used
instead. No match keeps the assigned plan and reports NO_MATCHING_SHIFT.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from ..core.constants import ERR_NO_MATCHING_SHIFT, MINUTES_PER_DAY
from ..core.enums import ShiftMatch


@dataclass(frozen=True)
class ShiftDetectionInput:
    plan_id: int
    plan_code: str
    arrive_from: Optional[int] = None
    arrive_to: Optional[int] = None
    depart_from: Optional[int] = None
    depart_to: Optional[int] = None
    alternative_plan_ids: tuple[int, ...] = ()

    @property
    def has_arrival_window(self) -> bool:
        return self.arrive_from is not None and self.arrive_to is not None

    @property
    def has_departure_window(self) -> bool:
        return self.depart_from is not None and self.depart_to is not None

    @property
    def is_configured(self) -> bool:
        return any(
            v is not None for v in (self.arrive_from, self.arrive_to, self.depart_from, self.depart_to)
        )


@dataclass(frozen=True)
class ShiftDetectionResult:
    matched_plan_id: Optional[int]
    matched_plan_code: str = ""
    is_original_plan: bool = True
    matched_by: ShiftMatch = ShiftMatch.NONE
    error_code: Optional[str] = None

    @property
    def has_error(self) -> bool:
        return self.error_code is not None


def _in_window(minutes: Optional[int], start: Optional[int], end: Optional[int]) -> bool:
    if minutes is None or start is None or end is None:
        return False
    return start <= minutes <= end


def match_plan(plan: ShiftDetectionInput, first_arrival: Optional[int], last_departure: Optional[int]) -> ShiftMatch:
    """When both windows are configured both have to match."""

    arrival = plan.has_arrival_window
    departure = plan.has_departure_window
    arrival_ok = arrival and _in_window(first_arrival, plan.arrive_from, plan.arrive_to)
    departure_ok = departure and _in_window(last_departure, plan.depart_from, plan.depart_to)

    if arrival and departure:
        return ShiftMatch.BOTH if arrival_ok and departure_ok else ShiftMatch.NONE
    if arrival:
        return ShiftMatch.ARRIVAL if arrival_ok else ShiftMatch.NONE
    if departure:
        return ShiftMatch.DEPARTURE if departure_ok else ShiftMatch.NONE
    return ShiftMatch.NONE


def detect_shift(
    assigned: Optional[ShiftDetectionInput],
    first_arrival: Optional[int],
    last_departure: Optional[int],
    alternatives: Optional[Mapping[int, ShiftDetectionInput]] = None,
) -> ShiftDetectionResult:
    """Pick the day plan that fits the booking times.

    ``alternatives`` maps plan id -> detection input for the plans the caller
    could load; ids in ``assigned.alternative_plan_ids`` missing from it are
    skipped.
    """

    if assigned is None:
        return ShiftDetectionResult(matched_plan_id=None)

    original = ShiftDetectionResult(matched_plan_id=assigned.plan_id, matched_plan_code=assigned.plan_code)
    if not assigned.has_arrival_window and not assigned.has_departure_window:
        return original
    if first_arrival is None and last_departure is None:
        return original

    matched = match_plan(assigned, first_arrival, last_departure)
    if matched != ShiftMatch.NONE:
        return ShiftDetectionResult(
            matched_plan_id=assigned.plan_id,
            matched_plan_code=assigned.plan_code,
            matched_by=matched,
        )

    for plan_id in assigned.alternative_plan_ids:
        alt = (alternatives or {}).get(plan_id)
        if alt is None:
            continue
        matched = match_plan(alt, first_arrival, last_departure)
        if matched != ShiftMatch.NONE:
            return ShiftDetectionResult(
                matched_plan_id=alt.plan_id,
                matched_plan_code=alt.plan_code,
                is_original_plan=False,
                matched_by=matched,
            )

    return ShiftDetectionResult(
        matched_plan_id=assigned.plan_id,
        matched_plan_code=assigned.plan_code,
        error_code=ERR_NO_MATCHING_SHIFT,
    )


def validate_shift_detection(plan: ShiftDetectionInput) -> list[str]:
    """Return configuration problems; empty list means the windows are usable."""

    errors: list[str] = []
    for label, start, end in (
        ("arrive", plan.arrive_from, plan.arrive_to),
        ("depart", plan.depart_from, plan.depart_to),
    ):
        if start is None and end is None:
            continue
        if start is None or end is None:
            errors.append(f"shift_detect_{label}_from and shift_detect_{label}_to must be set together")
            continue
        if not 0 <= start <= MINUTES_PER_DAY:
            errors.append(f"shift_detect_{label}_from must be between 0 and {MINUTES_PER_DAY}")
        if not 0 <= end <= MINUTES_PER_DAY:
            errors.append(f"shift_detect_{label}_to must be between 0 and {MINUTES_PER_DAY}")
        if start > end:
            errors.append(f"shift_detect_{label}_from must be <= shift_detect_{label}_to")
    return errors
