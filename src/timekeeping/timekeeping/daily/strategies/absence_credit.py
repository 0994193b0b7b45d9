from __future__ import annotations

from typing import Optional

from ...calculation.model import CalculationResult
from ...core.constants import WARN_ABSENCE
from ...core.enums import ScenarioKind
from ..model import DayContext
from .base import DailyScenarioStrategy, credited_result
from .no_bookings import no_bookings_error


class AbsenceCreditStrategy(DailyScenarioStrategy):
    """Credit target x portion of the approved absence; none found is a NO_BOOKINGS error."""

    kind = ScenarioKind.ABSENCE_CREDIT

    def evaluate(self, ctx: DayContext) -> Optional[CalculationResult]:
        if ctx.absence is None:
            return no_bookings_error(ctx)
        return credited_result(ctx, ctx.absence.credit_minutes(ctx.target_minutes), (WARN_ABSENCE,))
