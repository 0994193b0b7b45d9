from __future__ import annotations

from datetime import date
from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Absence
from .repository import AbsenceRepository


class MySQLAbsenceRepository(AbsenceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_approved_absence(self, employee_id: int, day: date) -> Optional[Absence]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT absence_id, employee_id, absence_date, absence_type, portion
                FROM absence_days
                WHERE employee_id=%s AND absence_date=%s AND status='approved'
                ORDER BY absence_id DESC
                LIMIT 1
                """,
                (int(employee_id), day),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Absence(
                absence_id=int(r["absence_id"]),
                employee_id=int(r["employee_id"]),
                absence_date=r["absence_date"],
                absence_type=str(r["absence_type"]),
                portion=float(r.get("portion") or 1.0),
            )
