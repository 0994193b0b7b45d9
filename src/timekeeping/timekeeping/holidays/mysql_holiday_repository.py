from __future__ import annotations

from datetime import date

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .repository import HolidayRepository


class MySQLHolidayRepository(HolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def is_holiday(self, tenant_id: int, day: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT 1 AS found FROM holidays WHERE tenant_id=%s AND holiday_date=%s LIMIT 1",
                (int(tenant_id), day),
            )
            return fetchone(cur) is not None
