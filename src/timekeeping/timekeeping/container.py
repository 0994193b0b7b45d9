from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .absences.mysql_absence_repository import MySQLAbsenceRepository
from .absences.repository import AbsenceRepository
from .bookings.mysql_booking_repository import MySQLBookingRepository
from .bookings.repository import BookingRepository
from .calculation.standard_calculator import StandardDayCalculator
from .core.constants import DEFAULT_MAX_RECALC_DAYS
from .daily.factory import DailyScenarioFactory
from .daily.service import DailyCalculationService
from .daily_values.mysql_daily_value_repository import MySQLDailyValueRepository
from .daily_values.repository import DailyValueRepository
from .database.connection import DBConfig, DatabaseConnection
from .dayplans.mysql_assignment_repository import MySQLDayPlanAssignmentRepository
from .dayplans.mysql_day_plan_repository import MySQLDayPlanRepository
from .dayplans.repository import DayPlanAssignmentRepository, DayPlanRepository
from .holidays.mysql_holiday_repository import MySQLHolidayRepository
from .holidays.repository import HolidayRepository


@dataclass(frozen=True)
class Container:
    bookings_repo: BookingRepository
    assignments_repo: DayPlanAssignmentRepository
    day_plans_repo: DayPlanRepository
    holidays_repo: HolidayRepository
    daily_values_repo: DailyValueRepository
    absences_repo: Optional[AbsenceRepository]

    daily_calculation_service: DailyCalculationService

    max_recalc_days: int = DEFAULT_MAX_RECALC_DAYS
    conn: Optional[DatabaseConnection] = None


def build_container(
    *,
    db_config: dict,
    absences_enabled: bool = False,
    max_recalc_days: int = DEFAULT_MAX_RECALC_DAYS,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    bookings_repo = MySQLBookingRepository(conn)
    assignments_repo = MySQLDayPlanAssignmentRepository(conn)
    day_plans_repo = MySQLDayPlanRepository(conn)
    holidays_repo = MySQLHolidayRepository(conn)
    daily_values_repo = MySQLDailyValueRepository(conn)
    absences_repo = MySQLAbsenceRepository(conn) if absences_enabled else None

    daily_calculation_service = DailyCalculationService(
        bookings_repo,
        assignments_repo,
        holidays_repo,
        daily_values_repo,
        absences_repo,
        scenario_factory=DailyScenarioFactory(StandardDayCalculator()),
        day_plans=day_plans_repo,
    )

    return Container(
        bookings_repo=bookings_repo,
        assignments_repo=assignments_repo,
        day_plans_repo=day_plans_repo,
        holidays_repo=holidays_repo,
        daily_values_repo=daily_values_repo,
        absences_repo=absences_repo,
        daily_calculation_service=daily_calculation_service,
        max_recalc_days=int(max_recalc_days),
        conn=conn,
    )
