from __future__ import annotations

from datetime import date
from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import DayPlanAssignment
from .mysql_day_plan_repository import load_breaks, row_to_day_plan
from .repository import DayPlanAssignmentRepository


class MySQLDayPlanAssignmentRepository(DayPlanAssignmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[DayPlanAssignment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT a.employee_id, a.work_date, dp.*
                FROM employee_day_plans a
                JOIN day_plans dp ON dp.day_plan_id = a.day_plan_id
                WHERE a.employee_id=%s AND a.work_date=%s
                """,
                (int(employee_id), work_date),
            )
            r = fetchone(cur)
            if not r:
                return None

            return DayPlanAssignment(
                employee_id=int(r["employee_id"]),
                work_date=r["work_date"],
                day_plan=row_to_day_plan(r, load_breaks(cur, int(r["day_plan_id"]))),
            )
