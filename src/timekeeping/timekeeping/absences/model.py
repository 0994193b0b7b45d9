from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Absence:
    """Approved absence day. ``portion`` is 1.0 for a full day, 0.5 for half a day."""

    absence_id: int
    employee_id: int
    absence_date: date
    absence_type: str
    portion: float = 1.0

    def credit_minutes(self, target_minutes: int) -> int:
        return int(round(target_minutes * self.portion))
