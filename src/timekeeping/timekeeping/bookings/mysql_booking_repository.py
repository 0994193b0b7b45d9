from __future__ import annotations

from datetime import date
from typing import Mapping, Sequence

from ..core.enums import BookingCategory, BookingDirection
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, optional_int
from .model import Booking
from .repository import BookingRepository


class MySQLBookingRepository(BookingRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee_and_date(self, employee_id: int, booking_date: date) -> Sequence[Booking]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT booking_id, tenant_id, employee_id, booking_date, direction, category,
                       original_time, edited_time, calculated_time, pair_id
                FROM bookings
                WHERE employee_id=%s AND booking_date=%s
                ORDER BY edited_time ASC, booking_id ASC
                """,
                (int(employee_id), booking_date),
            )
            rows = fetchall(cur)
            return [
                Booking(
                    booking_id=int(r["booking_id"]),
                    tenant_id=int(r["tenant_id"]),
                    employee_id=int(r["employee_id"]),
                    booking_date=r["booking_date"],
                    direction=BookingDirection(r["direction"]),
                    category=BookingCategory(r["category"]),
                    original_time=int(r["original_time"]),
                    edited_time=int(r["edited_time"]),
                    calculated_time=optional_int(r.get("calculated_time")),
                    pair_id=optional_int(r.get("pair_id")),
                )
                for r in rows
            ]

    def write_adjusted_times(self, times: Mapping[int, int]) -> None:
        if not times:
            return
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                "UPDATE bookings SET calculated_time=%s WHERE booking_id=%s",
                [(int(minutes), int(booking_id)) for booking_id, minutes in times.items()],
            )
