from __future__ import annotations

from dataclasses import replace
from typing import Optional

from ...calculation.base import DayCalculator
from ...calculation.model import CalculationResult, DayPlanConfig, unique_codes
from ...calculation.pairing import first_come, last_go
from ...calculation.shift import ShiftDetectionResult, detect_shift
from ...core.constants import WARN_WORKED_ON_HOLIDAY
from ...core.enums import ScenarioKind
from ..model import DayContext
from .base import DailyScenarioStrategy


class BookedDayStrategy(DailyScenarioStrategy):
    """Bookings exist: run the calculator with the assigned (or shift-detected) day plan."""

    def __init__(self, calculator: DayCalculator, *, on_holiday: bool = False):
        self._calculator = calculator
        self._on_holiday = on_holiday
        self.kind = ScenarioKind.WORKED_HOLIDAY if on_holiday else ScenarioKind.REGULAR_DAY

    def evaluate(self, ctx: DayContext) -> Optional[CalculationResult]:
        config, shift = self._select_plan(ctx)
        result = self._calculator.calculate(ctx.bookings, config)
        if shift is not None and shift.has_error:
            result = replace(result, error_codes=unique_codes((*result.error_codes, shift.error_code)))
        if self._on_holiday:
            result = replace(result, warnings=unique_codes((*result.warnings, WARN_WORKED_ON_HOLIDAY)))
        return result

    @staticmethod
    def _select_plan(ctx: DayContext) -> tuple[DayPlanConfig, Optional[ShiftDetectionResult]]:
        if ctx.shift_detection is None:
            return ctx.config, None

        # Detection looks at the booked times, before tolerance and rounding.
        by_id = {alt.detection.plan_id: alt for alt in ctx.alternative_plans}
        shift = detect_shift(
            ctx.shift_detection,
            first_come(ctx.bookings),
            last_go(ctx.bookings),
            {plan_id: alt.detection for plan_id, alt in by_id.items()},
        )
        if not shift.is_original_plan and shift.matched_plan_id in by_id:
            return by_id[shift.matched_plan_id].config, shift
        return ctx.config, shift
