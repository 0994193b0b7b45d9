from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from .model import Absence


class AbsenceRepository(Protocol):
    def get_approved_absence(self, employee_id: int, day: date) -> Optional[Absence]:
        raise NotImplementedError
