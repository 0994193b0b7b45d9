from __future__ import annotations

from typing import Optional

from ..core.constants import MAX_ALTERNATIVE_PLANS
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, optional_int
from .model import DayPlan, DayPlanBreak
from .repository import DayPlanRepository


class MySQLDayPlanRepository(DayPlanRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, day_plan_id: int) -> Optional[DayPlan]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT * FROM day_plans WHERE day_plan_id=%s", (int(day_plan_id),))
            r = fetchone(cur)
            if not r:
                return None
            return row_to_day_plan(r, load_breaks(cur, int(r["day_plan_id"])))


def load_breaks(cur, day_plan_id: int) -> tuple[DayPlanBreak, ...]:
    cur.execute(
        """
        SELECT break_type, duration, start_time, end_time, after_work_minutes,
               auto_deduct, is_paid, minutes_difference
        FROM day_plan_breaks
        WHERE day_plan_id=%s
        ORDER BY sort_order ASC, break_id ASC
        """,
        (int(day_plan_id),),
    )
    return tuple(
        DayPlanBreak(
            break_type=str(b["break_type"]),
            duration=int(b["duration"]),
            start_time=optional_int(b.get("start_time")),
            end_time=optional_int(b.get("end_time")),
            after_work_minutes=optional_int(b.get("after_work_minutes")),
            auto_deduct=bool(b.get("auto_deduct", 1)),
            is_paid=bool(b.get("is_paid", 0)),
            minutes_difference=bool(b.get("minutes_difference", 0)),
        )
        for b in fetchall(cur)
    )


def _alternative_ids(r: dict) -> tuple[int, ...]:
    ids = (optional_int(r.get(f"shift_alt_plan_{i}")) for i in range(1, MAX_ALTERNATIVE_PLANS + 1))
    return tuple(i for i in ids if i is not None)


def row_to_day_plan(r: dict, breaks: tuple[DayPlanBreak, ...]) -> DayPlan:
    return DayPlan(
        day_plan_id=int(r["day_plan_id"]),
        tenant_id=int(r["tenant_id"]),
        code=r["code"],
        name=r["name"],
        regular_minutes=int(r["regular_minutes"]),
        come_from=optional_int(r.get("come_from")),
        come_to=optional_int(r.get("come_to")),
        go_from=optional_int(r.get("go_from")),
        go_to=optional_int(r.get("go_to")),
        core_start=optional_int(r.get("core_start")),
        core_end=optional_int(r.get("core_end")),
        min_net_minutes=optional_int(r.get("min_net_minutes")),
        max_net_minutes=optional_int(r.get("max_net_minutes")),
        tolerance_come_plus=int(r.get("tolerance_come_plus") or 0),
        tolerance_come_minus=int(r.get("tolerance_come_minus") or 0),
        tolerance_go_plus=int(r.get("tolerance_go_plus") or 0),
        tolerance_go_minus=int(r.get("tolerance_go_minus") or 0),
        come_rounding_mode=r.get("come_rounding_mode"),
        come_rounding_interval=optional_int(r.get("come_rounding_interval")),
        come_rounding_offset=optional_int(r.get("come_rounding_offset")),
        go_rounding_mode=r.get("go_rounding_mode"),
        go_rounding_interval=optional_int(r.get("go_rounding_interval")),
        go_rounding_offset=optional_int(r.get("go_rounding_offset")),
        round_all_bookings=bool(r.get("round_all_bookings", 1)),
        cap_to_window=bool(r.get("cap_to_window", 0)),
        no_booking_policy=str(r.get("no_booking_policy") or "error"),
        holiday_credit_policy=str(r.get("holiday_credit_policy") or "credit_target"),
        day_change_policy=str(r.get("day_change_policy") or "to_first"),
        shift_detect_arrive_from=optional_int(r.get("shift_detect_arrive_from")),
        shift_detect_arrive_to=optional_int(r.get("shift_detect_arrive_to")),
        shift_detect_depart_from=optional_int(r.get("shift_detect_depart_from")),
        shift_detect_depart_to=optional_int(r.get("shift_detect_depart_to")),
        alternative_plan_ids=_alternative_ids(r),
        breaks=breaks,
    )
