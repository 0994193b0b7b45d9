from __future__ import annotations

from typing import Optional

from ...calculation.model import CalculationResult
from ...core.constants import (
    ERR_NO_BOOKINGS,
    WARN_ABSENCE_NOT_IMPLEMENTED,
    WARN_NO_BOOKINGS_CREDITED,
    WARN_NO_BOOKINGS_DEDUCTED,
)
from ...core.enums import NoBookingPolicy, ScenarioKind
from ..model import DayContext
from .base import DailyScenarioStrategy, credited_result


def no_bookings_error(ctx: DayContext, warnings: tuple[str, ...] = ()) -> CalculationResult:
    target = ctx.target_minutes
    return CalculationResult(
        target_minutes=target,
        undertime_minutes=target,
        error_codes=(ERR_NO_BOOKINGS,),
        warnings=warnings,
    )


class NoBookingsStrategy(DailyScenarioStrategy):
    """Planned workday, not a holiday, zero bookings."""

    kind = ScenarioKind.NO_BOOKINGS

    def evaluate(self, ctx: DayContext) -> Optional[CalculationResult]:
        policy = ctx.facts.no_booking_policy
        if policy == NoBookingPolicy.CREDIT_TARGET:
            return credited_result(ctx, ctx.target_minutes, (WARN_NO_BOOKINGS_CREDITED,))
        if policy == NoBookingPolicy.CREDIT_ZERO:
            return credited_result(ctx, 0, (WARN_NO_BOOKINGS_DEDUCTED,))
        if policy == NoBookingPolicy.USE_ABSENCE:
            # Only reached when no absence source is wired in.
            return no_bookings_error(ctx, (WARN_ABSENCE_NOT_IMPLEMENTED,))
        return no_bookings_error(ctx)
