from __future__ import annotations

from typing import Optional

from ...calculation.model import CalculationResult
from ...core.constants import WARN_BOOKINGS_ON_OFF_DAY, WARN_OFF_DAY
from ...core.enums import ScenarioKind
from ..model import DayContext
from .base import DailyScenarioStrategy


class OffDayStrategy(DailyScenarioStrategy):
    """No assignment: no target and nothing to calculate."""

    kind = ScenarioKind.OFF_DAY

    def evaluate(self, ctx: DayContext) -> Optional[CalculationResult]:
        count = ctx.facts.booking_count
        warnings = (WARN_OFF_DAY, WARN_BOOKINGS_ON_OFF_DAY) if count else (WARN_OFF_DAY,)
        return CalculationResult(target_minutes=0, booking_count=count, warnings=warnings)
