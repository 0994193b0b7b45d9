from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from ..core.constants import (
    ERR_BELOW_MIN_WORK_TIME,
    ERR_EARLY_COME,
    ERR_EARLY_GO,
    ERR_LATE_COME,
    ERR_LATE_GO,
    ERR_MISSING_COME,
    ERR_MISSING_GO,
    ERR_NO_BOOKINGS,
    WARN_MAX_TIME_REACHED,
)
from ..core.enums import BookingCategory, BookingDirection
from .base import DayCalculator
from .breaks import calculate_break_deduction
from .model import BookingInput, CalculationResult, DayPlanConfig, overtime_undertime, unique_codes
from .pairing import first_come, last_go, pair_bookings
from .tolerance import apply_come_tolerance, apply_go_tolerance
from .validation import cap_to_window, validate_core_hours, validate_time_window


class StandardDayCalculator(DayCalculator):
    """Standard rule set.

    Steps: tolerance -> rounding -> (optional) window capping -> pairing ->
    window/core checks -> gross -> breaks -> net (capped at max) -> over/under.
    Never raises for bad data; anomalies end up as codes on the result.
    """

    def calculate(self, bookings: Sequence[BookingInput], day_plan: DayPlanConfig) -> CalculationResult:
        if not bookings:
            return CalculationResult(
                target_minutes=day_plan.regular_minutes,
                undertime_minutes=max(day_plan.regular_minutes, 0),
                error_codes=(ERR_NO_BOOKINGS,),
            )

        adjusted, effective, capped = self._process(bookings, day_plan)

        errors: list[str] = []
        warnings: list[str] = []

        pairing = pair_bookings(effective)
        warnings.extend(pairing.warnings)
        if pairing.unpaired_in_ids:
            errors.append(ERR_MISSING_GO)
        if pairing.unpaired_out_ids:
            errors.append(ERR_MISSING_COME)

        # Window checks look at the adjusted times before capping.
        come = first_come(adjusted)
        go = last_go(adjusted)
        if come is not None:
            errors.extend(validate_time_window(come, day_plan.come_from, day_plan.come_to, ERR_EARLY_COME, ERR_LATE_COME))
        if go is not None:
            errors.extend(validate_time_window(go, day_plan.go_from, day_plan.go_to, ERR_EARLY_GO, ERR_LATE_GO))
        errors.extend(validate_core_hours(come, go, day_plan.core_start, day_plan.core_end))

        gross = sum(p.duration for p in pairing.pairs if p.category == BookingCategory.WORK)
        recorded_break = sum(p.duration for p in pairing.pairs if p.category == BookingCategory.BREAK)
        deduction = calculate_break_deduction(pairing.pairs, recorded_break, gross, day_plan.breaks)
        warnings.extend(deduction.warnings)

        net = max(gross - deduction.unpaid_minutes, 0)
        if day_plan.max_net_minutes is not None and net > day_plan.max_net_minutes:
            capped += net - day_plan.max_net_minutes
            net = day_plan.max_net_minutes
            warnings.append(WARN_MAX_TIME_REACHED)

        if day_plan.min_net_minutes is not None and net < day_plan.min_net_minutes:
            errors.append(ERR_BELOW_MIN_WORK_TIME)

        overtime, undertime = overtime_undertime(net, day_plan.regular_minutes)

        return CalculationResult(
            target_minutes=day_plan.regular_minutes,
            gross_minutes=gross,
            net_minutes=net,
            break_minutes=deduction.total_minutes,
            overtime_minutes=overtime,
            undertime_minutes=undertime,
            capped_minutes=capped,
            first_come=come,
            last_go=go,
            booking_count=len(bookings),
            calculated_times={b.booking_id: b.time for b in effective},
            pairs=pairing.pairs,
            unpaired_in_ids=pairing.unpaired_in_ids,
            unpaired_out_ids=pairing.unpaired_out_ids,
            error_codes=unique_codes(errors),
            warnings=unique_codes(warnings),
        )

    def _process(self, bookings: Sequence[BookingInput], day_plan: DayPlanConfig):
        """Returns (adjusted, effective, capped minutes).

        ``adjusted`` carries tolerance + rounding, ``effective`` additionally the
        window capping that feeds pairing and the write-back.
        """

        first_in_id = None
        last_out_id = None
        if not day_plan.round_all_bookings:
            ordered = sorted(bookings, key=lambda b: (b.time, b.booking_id))
            work_in = [b for b in ordered if b.category == BookingCategory.WORK and b.direction == BookingDirection.IN]
            work_out = [b for b in ordered if b.category == BookingCategory.WORK and b.direction == BookingDirection.OUT]
            first_in_id = work_in[0].booking_id if work_in else None
            last_out_id = work_out[-1].booking_id if work_out else None

        expected_go = day_plan.go_to if day_plan.go_to is not None else day_plan.go_from
        tol = day_plan.tolerance

        adjusted: list[BookingInput] = []
        effective: list[BookingInput] = []
        capped_total = 0

        for b in bookings:
            minutes = b.time
            if b.category == BookingCategory.WORK:
                is_arrival = b.direction == BookingDirection.IN
                if is_arrival:
                    minutes = apply_come_tolerance(minutes, day_plan.come_from, tol)
                    if day_plan.round_all_bookings or b.booking_id == first_in_id:
                        minutes = day_plan.come_rounding.apply(minutes)
                else:
                    minutes = apply_go_tolerance(minutes, expected_go, tol)
                    if day_plan.round_all_bookings or b.booking_id == last_out_id:
                        minutes = day_plan.go_rounding.apply(minutes)
                adjusted.append(replace(b, time=minutes))

                if day_plan.cap_to_window:
                    minutes, capped = cap_to_window(
                        minutes,
                        is_arrival=is_arrival,
                        come_from=day_plan.come_from,
                        go_to=day_plan.go_to,
                        go_plus=tol.go_plus,
                    )
                    capped_total += capped
                effective.append(replace(b, time=minutes))
            else:
                adjusted.append(b)
                effective.append(b)

        return adjusted, effective, capped_total
