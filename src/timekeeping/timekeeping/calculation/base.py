from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from .model import BookingInput, CalculationResult, DayPlanConfig


class DayCalculator(ABC):
    """Calculator interface: one employee-day of bookings in, one result out."""

    @abstractmethod
    def calculate(self, bookings: Sequence[BookingInput], day_plan: DayPlanConfig) -> CalculationResult:
        raise NotImplementedError
