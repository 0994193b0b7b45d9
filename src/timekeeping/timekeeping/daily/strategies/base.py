from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ...calculation.model import CalculationResult, overtime_undertime
from ...core.enums import ScenarioKind
from ..model import DayContext


class DailyScenarioStrategy(ABC):
    """Strategy Pattern: how one kind of day turns into a result.

    Returning None means "write nothing" for that day.
    """

    kind: ScenarioKind

    @abstractmethod
    def evaluate(self, ctx: DayContext) -> Optional[CalculationResult]:
        raise NotImplementedError


def credited_result(ctx: DayContext, credit: int, warnings: tuple[str, ...]) -> CalculationResult:
    """A day without a calculation run where ``credit`` minutes count as worked."""

    target = ctx.target_minutes
    overtime, undertime = overtime_undertime(credit, target)
    return CalculationResult(
        target_minutes=target,
        gross_minutes=credit,
        net_minutes=credit,
        overtime_minutes=overtime,
        undertime_minutes=undertime,
        booking_count=len(ctx.bookings),
        warnings=warnings,
    )
