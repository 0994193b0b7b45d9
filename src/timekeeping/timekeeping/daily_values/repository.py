from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from .model import DailyValue


class DailyValueRepository(Protocol):
    def upsert(self, value: DailyValue) -> None:
        """Insert or fully replace the row for (employee, date)."""

        raise NotImplementedError

    def get_by_employee_date(self, employee_id: int, value_date: date) -> Optional[DailyValue]:
        raise NotImplementedError
