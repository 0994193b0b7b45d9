from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from datetime import date, datetime, timedelta
from typing import Callable, Iterator, Optional

from ..absences.repository import AbsenceRepository
from ..bookings.model import Booking
from ..bookings.repository import BookingRepository
from ..calculation.model import CalculationResult, unique_codes
from ..common.cancellation import CancelToken
from ..common.datetime_utils import iter_days, now_local
from ..common.validators import require_date_range
from ..core.constants import WARN_DAY_CHANGE_NOT_IMPLEMENTED
from ..core.enums import DailyValueStatus, DayChangePolicy, ScenarioKind
from ..daily_values.model import DailyValue
from ..daily_values.repository import DailyValueRepository
from ..dayplans.model import DayPlan, DayPlanAssignment
from ..dayplans.repository import DayPlanAssignmentRepository, DayPlanRepository
from ..holidays.repository import HolidayRepository
from .day_change import attribute_to_first_day, leading_departure, trailing_arrival
from .factory import DailyScenarioFactory
from .input_builder import (
    build_day_plan_config,
    day_change_policy,
    holiday_credit_policy,
    no_booking_policy,
    shift_detection_input,
    to_booking_inputs,
)
from .model import AlternativePlan, DayContext, DayFacts

logger = logging.getLogger("timekeeping.daily_calc")

_ONE_DAY = timedelta(days=1)
_BOOKED_KINDS = (ScenarioKind.REGULAR_DAY, ScenarioKind.WORKED_HOLIDAY)


@dataclass
class _EmployeeLock:
    lock: threading.Lock = field(default_factory=threading.Lock)
    users: int = 0


@dataclass(frozen=True)
class _Loaded:
    assignment: Optional[DayPlanAssignment]
    is_holiday: bool
    bookings: list[Booking]
    extra_warnings: tuple[str, ...] = ()


class DailyCalculationService:
    """Turns one employee-day into its persisted DailyValue.

    Reads: assignment, holiday, bookings (plus neighbouring days for shifts
    crossing midnight) and, for plans with shift detection, the alternative plans. Writes: booking calculated times, then the daily value.
    Store errors propagate to the caller unchanged.
    """

    def __init__(
        self,
        bookings: BookingRepository,
        assignments: DayPlanAssignmentRepository,
        holidays: HolidayRepository,
        daily_values: DailyValueRepository,
        absences: AbsenceRepository | None = None,
        *,
        scenario_factory: DailyScenarioFactory | None = None,
        day_plans: DayPlanRepository | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self._bookings = bookings
        self._assignments = assignments
        self._holidays = holidays
        self._daily_values = daily_values
        self._absences = absences
        self._day_plans = day_plans
        self._factory = scenario_factory or DailyScenarioFactory()
        self._clock = clock or now_local
        self._locks: dict[tuple[int, int], _EmployeeLock] = {}
        self._locks_guard = threading.Lock()

    @property
    def absences_available(self) -> bool:
        return self._absences is not None

    @contextmanager
    def _employee_lock(self, tenant_id: int, employee_id: int) -> Iterator[None]:
        """Hold the lock of one employee; it is dropped once nobody holds or waits for it."""

        key = (tenant_id, employee_id)
        with self._locks_guard:
            entry = self._locks.get(key)
            if entry is None:
                entry = self._locks[key] = _EmployeeLock()
            entry.users += 1
        try:
            with entry.lock:
                yield
        finally:
            with self._locks_guard:
                entry.users -= 1
                if entry.users == 0:
                    del self._locks[key]

    def calculate_day(self, tenant_id: int, employee_id: int, work_date: date) -> Optional[DailyValue]:
        """Calculate and persist one day. Returns None when the day is skipped."""

        with self._employee_lock(tenant_id, employee_id):
            try:
                return self._calculate_day(tenant_id, employee_id, work_date)
            except Exception:
                logger.exception(
                    "daily_calc_failed",
                    extra={"tenant_id": tenant_id, "employee_id": employee_id, "work_date": work_date.isoformat()},
                )
                raise

    def recalculate_range(
        self,
        tenant_id: int,
        employee_id: int,
        start: date,
        end: date,
        *,
        cancel: CancelToken | None = None,
    ) -> int:
        """Sequentially calculate every day of [start, end]; returns the number of days processed.

        A cancelled run stops before the next day; days already written stay.
        """

        require_date_range(start, end)
        count = 0
        for day in iter_days(start, end):
            if cancel is not None and cancel.is_cancelled():
                logger.info(
                    "daily_recalc_cancelled",
                    extra={
                        "tenant_id": tenant_id,
                        "employee_id": employee_id,
                        "work_date": day.isoformat(),
                        "processed_days": count,
                    },
                )
                break
            self.calculate_day(tenant_id, employee_id, day)
            count += 1
        return count

    def get_daily_value(self, employee_id: int, work_date: date) -> Optional[DailyValue]:
        return self._daily_values.get_by_employee_date(employee_id, work_date)

    def _calculate_day(self, tenant_id: int, employee_id: int, work_date: date) -> Optional[DailyValue]:
        loaded = self._load(tenant_id, employee_id, work_date)
        assignment = loaded.assignment

        if assignment is None:
            facts = DayFacts(has_assignment=False, is_holiday=loaded.is_holiday, booking_count=len(loaded.bookings))
            ctx = DayContext(tenant_id=tenant_id, employee_id=employee_id, work_date=work_date, facts=facts)
        else:
            plan = assignment.day_plan
            facts = DayFacts(
                has_assignment=True,
                is_holiday=loaded.is_holiday,
                booking_count=len(loaded.bookings),
                no_booking_policy=no_booking_policy(plan),
                holiday_credit_policy=holiday_credit_policy(plan),
                absences_available=self.absences_available,
            )
            ctx = DayContext(
                tenant_id=tenant_id,
                employee_id=employee_id,
                work_date=work_date,
                facts=facts,
                bookings=to_booking_inputs(loaded.bookings),
                config=build_day_plan_config(plan),
            )

        strategy = self._factory.for_day(facts)
        if strategy.kind == ScenarioKind.ABSENCE_CREDIT and self._absences is not None:
            absence = self._absences.get_approved_absence(employee_id, work_date)
            ctx = replace(ctx, absence=absence)
        if strategy.kind in _BOOKED_KINDS and assignment is not None:
            ctx = self._with_shift_detection(ctx, assignment.day_plan)

        result = strategy.evaluate(ctx)
        if result is None:
            logger.info(
                "daily_calc_skipped",
                extra={
                    "tenant_id": tenant_id,
                    "employee_id": employee_id,
                    "work_date": work_date.isoformat(),
                    "scenario": strategy.kind.value,
                },
            )
            return None

        if result.calculated_times:
            self._bookings.write_adjusted_times(dict(result.calculated_times))

        value = self._to_daily_value(tenant_id, employee_id, work_date, result, loaded.extra_warnings)
        self._daily_values.upsert(value)

        logger.info(
            "daily_calc_completed",
            extra={
                "tenant_id": tenant_id,
                "employee_id": employee_id,
                "work_date": work_date.isoformat(),
                "scenario": strategy.kind.value,
                "version": value.calculation_version,
                "has_error": value.has_error,
            },
        )
        return value

    def _with_shift_detection(self, ctx: DayContext, plan: DayPlan) -> DayContext:
        detection = shift_detection_input(plan)
        if detection is None:
            return ctx

        alternatives: list[AlternativePlan] = []
        if self._day_plans is not None:
            for plan_id in detection.alternative_plan_ids:
                alt = self._day_plans.get_by_id(plan_id)
                if alt is None:
                    continue
                alt_detection = shift_detection_input(alt)
                if alt_detection is None:
                    continue
                alternatives.append(AlternativePlan(detection=alt_detection, config=build_day_plan_config(alt)))
        return replace(ctx, shift_detection=detection, alternative_plans=tuple(alternatives))

    def _load(self, tenant_id: int, employee_id: int, work_date: date) -> _Loaded:
        assignment = self._assignments.get_for_employee_and_date(employee_id, work_date)
        is_holiday = bool(self._holidays.is_holiday(tenant_id, work_date))
        bookings = list(self._bookings.get_for_employee_and_date(employee_id, work_date))

        if assignment is None or not bookings:
            return _Loaded(assignment=assignment, is_holiday=is_holiday, bookings=bookings)

        policy = day_change_policy(assignment.day_plan)
        previous = None
        following = None
        if leading_departure(bookings) is not None:
            # An off day never pulls the departure over, so it stays with today.
            if self._assignments.get_for_employee_and_date(employee_id, work_date - _ONE_DAY) is not None:
                previous = self._bookings.get_for_employee_and_date(employee_id, work_date - _ONE_DAY)
        if trailing_arrival(bookings) is not None:
            following = self._bookings.get_for_employee_and_date(employee_id, work_date + _ONE_DAY)

        attributed = attribute_to_first_day(bookings, previous=previous, following=following)
        extra: tuple[str, ...] = ()
        if policy != DayChangePolicy.TO_FIRST:
            extra = (WARN_DAY_CHANGE_NOT_IMPLEMENTED,)
        return _Loaded(assignment=assignment, is_holiday=is_holiday, bookings=attributed, extra_warnings=extra)

    def _to_daily_value(
        self,
        tenant_id: int,
        employee_id: int,
        work_date: date,
        result: CalculationResult,
        extra_warnings: tuple[str, ...],
    ) -> DailyValue:
        previous = self._daily_values.get_by_employee_date(employee_id, work_date)
        calculated_at = self._clock()
        version = 1
        if previous is not None:
            version = previous.calculation_version + 1
            if calculated_at <= previous.calculated_at:
                calculated_at = previous.calculated_at + timedelta(microseconds=1)

        warnings = unique_codes((*result.warnings, *extra_warnings))
        return DailyValue(
            tenant_id=tenant_id,
            employee_id=employee_id,
            value_date=work_date,
            status=DailyValueStatus.ERROR if result.has_error else DailyValueStatus.CALCULATED,
            gross_minutes=result.gross_minutes,
            net_minutes=result.net_minutes,
            target_minutes=result.target_minutes,
            overtime_minutes=result.overtime_minutes,
            undertime_minutes=result.undertime_minutes,
            break_minutes=result.break_minutes,
            capped_minutes=result.capped_minutes,
            has_error=result.has_error,
            error_codes=result.error_codes,
            warnings=warnings,
            first_come=result.first_come,
            last_go=result.last_go,
            booking_count=result.booking_count,
            calculated_at=calculated_at,
            calculation_version=version,
        )
