from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from .model import DayPlan, DayPlanAssignment


class DayPlanAssignmentRepository(Protocol):
    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[DayPlanAssignment]:
        """None means an off day, not an error."""

        raise NotImplementedError


class DayPlanRepository(Protocol):
    def get_by_id(self, day_plan_id: int) -> Optional[DayPlan]:
        """Used for shift detection alternatives; None when the plan no longer exists."""

        raise NotImplementedError
