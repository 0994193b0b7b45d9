from __future__ import annotations

from typing import Optional

from ...calculation.model import CalculationResult
from ...core.enums import ScenarioKind
from ..model import DayContext
from .base import DailyScenarioStrategy


class SkipStrategy(DailyScenarioStrategy):
    kind = ScenarioKind.SKIP

    def evaluate(self, ctx: DayContext) -> Optional[CalculationResult]:
        return None
