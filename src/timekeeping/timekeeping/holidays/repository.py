from __future__ import annotations

from datetime import date
from typing import Protocol


class HolidayRepository(Protocol):
    def is_holiday(self, tenant_id: int, day: date) -> bool:
        raise NotImplementedError
