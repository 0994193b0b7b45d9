from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.constants import DEFAULT_REGULAR_MINUTES


@dataclass(frozen=True)
class DayPlanBreak:
    """Stored break rule row; ``break_type`` is translated when a run starts."""

    break_type: str
    duration: int
    start_time: Optional[int] = None
    end_time: Optional[int] = None
    after_work_minutes: Optional[int] = None
    auto_deduct: bool = True
    is_paid: bool = False
    minutes_difference: bool = False


@dataclass(frozen=True)
class DayPlan:
    """Kế hoạch ngày (day plan): bộ quy tắc tính giờ cho một loại ngày làm việc.

    Times are minutes since midnight. Rounding and policy columns keep their
    stored string values; unknown values are rejected at translation time.
    """

    day_plan_id: int
    tenant_id: int
    code: str
    name: str
    regular_minutes: int = DEFAULT_REGULAR_MINUTES
    come_from: Optional[int] = None
    come_to: Optional[int] = None
    go_from: Optional[int] = None
    go_to: Optional[int] = None
    core_start: Optional[int] = None
    core_end: Optional[int] = None
    min_net_minutes: Optional[int] = None
    max_net_minutes: Optional[int] = None
    tolerance_come_plus: int = 0
    tolerance_come_minus: int = 0
    tolerance_go_plus: int = 0
    tolerance_go_minus: int = 0
    come_rounding_mode: Optional[str] = None
    come_rounding_interval: Optional[int] = None
    come_rounding_offset: Optional[int] = None
    go_rounding_mode: Optional[str] = None
    go_rounding_interval: Optional[int] = None
    go_rounding_offset: Optional[int] = None
    round_all_bookings: bool = True
    cap_to_window: bool = False
    no_booking_policy: str = "error"
    holiday_credit_policy: str = "credit_target"
    day_change_policy: str = "to_first"
    shift_detect_arrive_from: Optional[int] = None
    shift_detect_arrive_to: Optional[int] = None
    shift_detect_depart_from: Optional[int] = None
    shift_detect_depart_to: Optional[int] = None
    alternative_plan_ids: tuple[int, ...] = ()
    breaks: tuple[DayPlanBreak, ...] = ()


@dataclass(frozen=True)
class DayPlanAssignment:
    """Gán kế hoạch ngày cho nhân viên vào một ngày cụ thể."""

    employee_id: int
    work_date: date
    day_plan: DayPlan
