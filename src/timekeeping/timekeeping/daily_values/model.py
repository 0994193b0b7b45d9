from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import format_minutes
from ..core.enums import DailyValueStatus


@dataclass(frozen=True)
class DailyValue:
    """Kết quả tính giờ của một nhân viên trong một ngày (one row per employee+date)."""

    tenant_id: int
    employee_id: int
    value_date: date
    status: DailyValueStatus
    gross_minutes: int
    net_minutes: int
    target_minutes: int
    overtime_minutes: int
    undertime_minutes: int
    break_minutes: int
    has_error: bool
    error_codes: tuple[str, ...]
    warnings: tuple[str, ...]
    first_come: Optional[int]
    last_go: Optional[int]
    booking_count: int
    calculated_at: datetime
    calculation_version: int
    capped_minutes: int = 0

    def to_dict(self) -> dict:
        return {
            "tenant_id": self.tenant_id,
            "employee_id": self.employee_id,
            "value_date": self.value_date.isoformat(),
            "status": self.status.value,
            "gross_minutes": self.gross_minutes,
            "net_minutes": self.net_minutes,
            "target_minutes": self.target_minutes,
            "overtime_minutes": self.overtime_minutes,
            "undertime_minutes": self.undertime_minutes,
            "break_minutes": self.break_minutes,
            "capped_minutes": self.capped_minutes,
            "has_error": self.has_error,
            "error_codes": list(self.error_codes),
            "warnings": list(self.warnings),
            "first_come": format_minutes(self.first_come),
            "last_go": format_minutes(self.last_go),
            "booking_count": self.booking_count,
            "calculated_at": self.calculated_at.isoformat(),
            "calculation_version": self.calculation_version,
        }
