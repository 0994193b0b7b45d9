from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..core.constants import MINUTES_PER_DAY, WARN_CROSS_MIDNIGHT
from ..core.enums import BookingCategory, BookingDirection
from .model import BookingInput, BookingPair


@dataclass(frozen=True)
class PairingResult:
    pairs: tuple[BookingPair, ...]
    unpaired_in_ids: tuple[int, ...]
    unpaired_out_ids: tuple[int, ...]
    warnings: tuple[str, ...]


def make_pair(start: BookingInput, end: BookingInput, category: BookingCategory) -> BookingPair:
    end_time = end.time if end.time >= start.time else end.time + MINUTES_PER_DAY
    return BookingPair(
        category=category,
        start_booking_id=start.booking_id,
        end_booking_id=end.booking_id,
        start=start.time,
        end=end.time,
        duration=end_time - start.time,
    )


def pair_bookings(bookings: Sequence[BookingInput]) -> PairingResult:
    """Pair bookings per category.

    Explicit ``pair_id`` links win. Remaining work arrivals take the next free
    departure at or after them, then any earlier free departure (cross-midnight).
    Break bookings pair departure -> next arrival.
    """

    pairs: list[BookingPair] = []
    unpaired_in: list[int] = []
    unpaired_out: list[int] = []
    warnings: list[str] = []

    for category in (BookingCategory.WORK, BookingCategory.BREAK):
        subset = [b for b in bookings if b.category == category]
        if not subset:
            continue
        p, ui, uo, w = _pair_category(subset, category)
        pairs.extend(p)
        unpaired_in.extend(ui)
        unpaired_out.extend(uo)
        warnings.extend(w)

    return PairingResult(
        pairs=tuple(pairs),
        unpaired_in_ids=tuple(unpaired_in),
        unpaired_out_ids=tuple(unpaired_out),
        warnings=tuple(warnings),
    )


def _pair_category(bookings: Sequence[BookingInput], category: BookingCategory):
    ins = sorted((b for b in bookings if b.direction == BookingDirection.IN), key=lambda b: (b.time, b.booking_id))
    outs = sorted((b for b in bookings if b.direction == BookingDirection.OUT), key=lambda b: (b.time, b.booking_id))
    outs_by_id = {b.booking_id: b for b in outs}
    ins_by_id = {b.booking_id: b for b in ins}

    # Work runs arrival -> departure, a break runs departure -> arrival.
    if category == BookingCategory.WORK:
        starts, ends, ends_by_id, starts_by_id = ins, outs, outs_by_id, ins_by_id
    else:
        starts, ends, ends_by_id, starts_by_id = outs, ins, ins_by_id, outs_by_id

    pairs: list[BookingPair] = []
    warnings: list[str] = []
    used: set[int] = set()

    for b in bookings:
        if b.pair_id is None or b.booking_id in used or b.pair_id in used:
            continue
        if b.booking_id in starts_by_id and b.pair_id in ends_by_id:
            start, end = b, ends_by_id[b.pair_id]
        elif b.booking_id in ends_by_id and b.pair_id in starts_by_id:
            start, end = starts_by_id[b.pair_id], b
        else:
            continue
        pair = make_pair(start, end, category)
        if pair.crosses_midnight:
            warnings.append(WARN_CROSS_MIDNIGHT)
        pairs.append(pair)
        used.update((start.booking_id, end.booking_id))

    for start in starts:
        if start.booking_id in used:
            continue
        end = next((e for e in ends if e.booking_id not in used and e.time >= start.time), None)
        if end is None:
            continue
        pairs.append(make_pair(start, end, category))
        used.update((start.booking_id, end.booking_id))

    if category == BookingCategory.WORK:
        for start in starts:
            if start.booking_id in used:
                continue
            end = next((e for e in ends if e.booking_id not in used and e.time < start.time), None)
            if end is None:
                continue
            pairs.append(make_pair(start, end, category))
            warnings.append(WARN_CROSS_MIDNIGHT)
            used.update((start.booking_id, end.booking_id))

    unpaired_in = [b.booking_id for b in ins if b.booking_id not in used]
    unpaired_out = [b.booking_id for b in outs if b.booking_id not in used]
    return pairs, unpaired_in, unpaired_out, warnings


def first_come(bookings: Sequence[BookingInput]):
    times = [b.time for b in bookings if b.category == BookingCategory.WORK and b.direction == BookingDirection.IN]
    return min(times) if times else None


def last_go(bookings: Sequence[BookingInput]):
    times = [b.time for b in bookings if b.category == BookingCategory.WORK and b.direction == BookingDirection.OUT]
    return max(times) if times else None
