from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

import pytest

from src.timekeeping.timekeeping.absences.model import Absence
from src.timekeeping.timekeeping.bookings.model import Booking
from src.timekeeping.timekeeping.core.enums import BookingCategory, BookingDirection
from src.timekeeping.timekeeping.daily.service import DailyCalculationService
from src.timekeeping.timekeeping.daily_values.model import DailyValue
from src.timekeeping.timekeeping.dayplans.model import DayPlan, DayPlanAssignment

TENANT = 1
EMPLOYEE = 7


@dataclass
class InMemoryBookings:
    by_day: dict[tuple[int, date], list[Booking]] = field(default_factory=dict)
    written: list[dict[int, int]] = field(default_factory=list)

    def get_for_employee_and_date(self, employee_id: int, booking_date: date):
        items = self.by_day.get((employee_id, booking_date), [])
        return sorted(items, key=lambda b: (b.edited_time, b.booking_id))

    def write_adjusted_times(self, times) -> None:
        self.written.append(dict(times))


@dataclass
class InMemoryAssignments:
    plans: dict[tuple[int, date], DayPlan] = field(default_factory=dict)

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[DayPlanAssignment]:
        plan = self.plans.get((employee_id, work_date))
        if plan is None:
            return None
        return DayPlanAssignment(employee_id=employee_id, work_date=work_date, day_plan=plan)


@dataclass
class InMemoryDayPlans:
    plans: dict[int, DayPlan] = field(default_factory=dict)

    def get_by_id(self, day_plan_id: int) -> Optional[DayPlan]:
        return self.plans.get(day_plan_id)


@dataclass
class InMemoryHolidays:
    days: set[tuple[int, date]] = field(default_factory=set)

    def is_holiday(self, tenant_id: int, day: date) -> bool:
        return (tenant_id, day) in self.days


@dataclass
class InMemoryDailyValues:
    rows: dict[tuple[int, date], DailyValue] = field(default_factory=dict)
    upserts: list[DailyValue] = field(default_factory=list)

    def upsert(self, value: DailyValue) -> None:
        self.upserts.append(value)
        self.rows[(value.employee_id, value.value_date)] = value

    def get_by_employee_date(self, employee_id: int, value_date: date) -> Optional[DailyValue]:
        return self.rows.get((employee_id, value_date))


@dataclass
class InMemoryAbsences:
    absences: dict[tuple[int, date], Absence] = field(default_factory=dict)

    def get_approved_absence(self, employee_id: int, day: date) -> Optional[Absence]:
        return self.absences.get((employee_id, day))


def make_plan(**overrides) -> DayPlan:
    values = dict(day_plan_id=1, tenant_id=TENANT, code="STD", name="Hành chính", regular_minutes=480)
    values.update(overrides)
    return DayPlan(**values)


@dataclass
class Harness:
    bookings: InMemoryBookings
    assignments: InMemoryAssignments
    day_plans: InMemoryDayPlans
    holidays: InMemoryHolidays
    daily_values: InMemoryDailyValues
    absences: Optional[InMemoryAbsences]
    service: DailyCalculationService
    _next_id: int = 0

    def assign(self, day: date, **plan) -> DayPlan:
        dp = make_plan(**plan)
        self.assignments.plans[(EMPLOYEE, day)] = dp
        return dp

    def add_plan(self, **plan) -> DayPlan:
        dp = make_plan(**plan)
        self.day_plans.plans[dp.day_plan_id] = dp
        return dp

    def book(self, day: date, minutes: int, direction: str, category: str = "work") -> Booking:
        self._next_id += 1
        b = Booking(
            booking_id=self._next_id,
            tenant_id=TENANT,
            employee_id=EMPLOYEE,
            booking_date=day,
            direction=BookingDirection(direction),
            category=BookingCategory(category),
            original_time=minutes,
            edited_time=minutes,
        )
        self.bookings.by_day.setdefault((EMPLOYEE, day), []).append(b)
        return b

    def calculate(self, day: date):
        return self.service.calculate_day(TENANT, EMPLOYEE, day)


FIXED_NOW = datetime(2026, 3, 2, 6, 0, 0)


def build_harness(*, absences: bool = False, clock=None, daily_values=None, holidays=None) -> Harness:
    bookings = InMemoryBookings()
    assignments = InMemoryAssignments()
    day_plans = InMemoryDayPlans()
    holidays = holidays if holidays is not None else InMemoryHolidays()
    daily_values = daily_values if daily_values is not None else InMemoryDailyValues()
    absence_repo = InMemoryAbsences() if absences else None
    service = DailyCalculationService(
        bookings,
        assignments,
        holidays,
        daily_values,
        absence_repo,
        clock=clock or (lambda: FIXED_NOW),
        day_plans=day_plans,
    )
    return Harness(bookings, assignments, day_plans, holidays, daily_values, absence_repo, service)


@pytest.fixture
def harness() -> Harness:
    return build_harness()


@pytest.fixture
def harness_with_absences() -> Harness:
    return build_harness(absences=True)


@pytest.fixture
def harness_factory():
    return build_harness
