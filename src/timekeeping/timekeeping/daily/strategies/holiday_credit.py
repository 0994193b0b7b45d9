from __future__ import annotations

from typing import Optional

from ...calculation.model import CalculationResult
from ...core.constants import WARN_AVERAGE_NOT_IMPLEMENTED, WARN_HOLIDAY
from ...core.enums import HolidayCreditPolicy, ScenarioKind
from ..model import DayContext
from .base import DailyScenarioStrategy, credited_result


class HolidayCreditStrategy(DailyScenarioStrategy):
    kind = ScenarioKind.HOLIDAY_CREDIT

    def evaluate(self, ctx: DayContext) -> Optional[CalculationResult]:
        policy = ctx.facts.holiday_credit_policy
        if policy == HolidayCreditPolicy.CREDIT_ZERO:
            return credited_result(ctx, 0, (WARN_HOLIDAY,))
        if policy == HolidayCreditPolicy.AVERAGE:
            # Average-based credit is not covered here; credit the target instead.
            return credited_result(ctx, ctx.target_minutes, (WARN_HOLIDAY, WARN_AVERAGE_NOT_IMPLEMENTED))
        return credited_result(ctx, ctx.target_minutes, (WARN_HOLIDAY,))
