from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.enums import DailyValueStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, decode_codes, encode_codes, fetchone, optional_int
from .model import DailyValue
from .repository import DailyValueRepository

_COLUMNS = (
    "tenant_id, employee_id, value_date, status, gross_minutes, net_minutes, target_minutes, "
    "overtime_minutes, undertime_minutes, break_minutes, capped_minutes, has_error, error_codes, "
    "warnings, first_come, last_go, booking_count, calculated_at, calculation_version"
)


class MySQLDailyValueRepository(DailyValueRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert(self, value: DailyValue) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO daily_values({_COLUMNS})
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    tenant_id=VALUES(tenant_id), status=VALUES(status),
                    gross_minutes=VALUES(gross_minutes), net_minutes=VALUES(net_minutes),
                    target_minutes=VALUES(target_minutes), overtime_minutes=VALUES(overtime_minutes),
                    undertime_minutes=VALUES(undertime_minutes), break_minutes=VALUES(break_minutes),
                    capped_minutes=VALUES(capped_minutes), has_error=VALUES(has_error),
                    error_codes=VALUES(error_codes), warnings=VALUES(warnings),
                    first_come=VALUES(first_come), last_go=VALUES(last_go),
                    booking_count=VALUES(booking_count), calculated_at=VALUES(calculated_at),
                    calculation_version=VALUES(calculation_version)
                """,
                (
                    value.tenant_id,
                    value.employee_id,
                    value.value_date,
                    value.status.value,
                    value.gross_minutes,
                    value.net_minutes,
                    value.target_minutes,
                    value.overtime_minutes,
                    value.undertime_minutes,
                    value.break_minutes,
                    value.capped_minutes,
                    int(value.has_error),
                    encode_codes(value.error_codes),
                    encode_codes(value.warnings),
                    value.first_come,
                    value.last_go,
                    value.booking_count,
                    value.calculated_at,
                    value.calculation_version,
                ),
            )

    def get_by_employee_date(self, employee_id: int, value_date: date) -> Optional[DailyValue]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM daily_values WHERE employee_id=%s AND value_date=%s",
                (int(employee_id), value_date),
            )
            r = fetchone(cur)
            if not r:
                return None
            return DailyValue(
                tenant_id=int(r["tenant_id"]),
                employee_id=int(r["employee_id"]),
                value_date=r["value_date"],
                status=DailyValueStatus(r["status"]),
                gross_minutes=int(r["gross_minutes"]),
                net_minutes=int(r["net_minutes"]),
                target_minutes=int(r["target_minutes"]),
                overtime_minutes=int(r["overtime_minutes"]),
                undertime_minutes=int(r["undertime_minutes"]),
                break_minutes=int(r["break_minutes"]),
                capped_minutes=int(r.get("capped_minutes") or 0),
                has_error=bool(r["has_error"]),
                error_codes=decode_codes(r.get("error_codes")),
                warnings=decode_codes(r.get("warnings")),
                first_come=optional_int(r.get("first_come")),
                last_go=optional_int(r.get("last_go")),
                booking_count=int(r["booking_count"]),
                calculated_at=r["calculated_at"],
                calculation_version=int(r["calculation_version"]),
            )
