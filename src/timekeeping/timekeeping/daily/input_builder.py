from __future__ import annotations

from enum import Enum
from typing import Optional, Sequence, Type, TypeVar

from ..bookings.model import Booking
from ..calculation.model import BookingInput, BreakRule, DayPlanConfig, Tolerance
from ..calculation.rounding import rounding_from_settings
from ..calculation.shift import ShiftDetectionInput, validate_shift_detection
from ..core.enums import BreakType, DayChangePolicy, HolidayCreditPolicy, NoBookingPolicy
from ..core.exceptions import ConfigurationError
from ..dayplans.model import DayPlan, DayPlanBreak

E = TypeVar("E", bound=Enum)


def parse_policy(enum_cls: Type[E], value: str, field_name: str) -> E:
    try:
        return enum_cls(str(value).strip().lower().replace("-", "_"))
    except ValueError as exc:
        raise ConfigurationError(f"Unknown {field_name}: {value!r}") from exc


def no_booking_policy(day_plan: DayPlan) -> NoBookingPolicy:
    return parse_policy(NoBookingPolicy, day_plan.no_booking_policy, "no_booking_policy")


def holiday_credit_policy(day_plan: DayPlan) -> HolidayCreditPolicy:
    return parse_policy(HolidayCreditPolicy, day_plan.holiday_credit_policy, "holiday_credit_policy")


def day_change_policy(day_plan: DayPlan) -> DayChangePolicy:
    return parse_policy(DayChangePolicy, day_plan.day_change_policy, "day_change_policy")


def _break_rule(row: DayPlanBreak) -> BreakRule:
    return BreakRule(
        break_type=parse_policy(BreakType, row.break_type, "break_type"),
        duration=int(row.duration),
        start_time=row.start_time,
        end_time=row.end_time,
        after_work_minutes=row.after_work_minutes,
        auto_deduct=row.auto_deduct,
        is_paid=row.is_paid,
        minutes_difference=row.minutes_difference,
    )


def build_day_plan_config(day_plan: DayPlan) -> DayPlanConfig:
    """Translate a stored day plan into a fully resolved calculator config.

    Raises ConfigurationError for values the calculator cannot interpret.
    """

    return DayPlanConfig(
        regular_minutes=int(day_plan.regular_minutes),
        come_from=day_plan.come_from,
        come_to=day_plan.come_to,
        go_from=day_plan.go_from,
        go_to=day_plan.go_to,
        core_start=day_plan.core_start,
        core_end=day_plan.core_end,
        min_net_minutes=day_plan.min_net_minutes,
        max_net_minutes=day_plan.max_net_minutes,
        tolerance=Tolerance(
            come_plus=int(day_plan.tolerance_come_plus or 0),
            come_minus=int(day_plan.tolerance_come_minus or 0),
            go_plus=int(day_plan.tolerance_go_plus or 0),
            go_minus=int(day_plan.tolerance_go_minus or 0),
        ),
        come_rounding=rounding_from_settings(
            day_plan.come_rounding_mode,
            interval=day_plan.come_rounding_interval,
            offset=day_plan.come_rounding_offset,
        ),
        go_rounding=rounding_from_settings(
            day_plan.go_rounding_mode,
            interval=day_plan.go_rounding_interval,
            offset=day_plan.go_rounding_offset,
        ),
        round_all_bookings=bool(day_plan.round_all_bookings),
        cap_to_window=bool(day_plan.cap_to_window),
        breaks=tuple(_break_rule(b) for b in day_plan.breaks),
    )


def shift_detection_input(day_plan: DayPlan) -> Optional[ShiftDetectionInput]:
    """None when the plan has no detection window at all."""

    detection = ShiftDetectionInput(
        plan_id=day_plan.day_plan_id,
        plan_code=day_plan.code,
        arrive_from=day_plan.shift_detect_arrive_from,
        arrive_to=day_plan.shift_detect_arrive_to,
        depart_from=day_plan.shift_detect_depart_from,
        depart_to=day_plan.shift_detect_depart_to,
        alternative_plan_ids=tuple(day_plan.alternative_plan_ids),
    )
    if not detection.is_configured:
        return None
    problems = validate_shift_detection(detection)
    if problems:
        raise ConfigurationError(f"Day plan {day_plan.code!r}: " + "; ".join(problems))
    return detection


def to_booking_inputs(bookings: Sequence[Booking]) -> tuple[BookingInput, ...]:
    """Calculations read the edited time, never the originally captured one."""

    return tuple(
        BookingInput(
            booking_id=b.booking_id,
            time=b.edited_time,
            direction=b.direction,
            category=b.category,
            pair_id=b.pair_id,
        )
        for b in bookings
    )
