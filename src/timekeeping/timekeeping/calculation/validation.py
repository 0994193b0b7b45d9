from __future__ import annotations

from typing import Optional

from ..core.constants import ERR_MISSED_CORE_END, ERR_MISSED_CORE_START


def validate_time_window(
    value: int,
    earliest: Optional[int],
    latest: Optional[int],
    early_code: str,
    late_code: str,
) -> list[str]:
    codes: list[str] = []
    if earliest is not None and value < earliest:
        codes.append(early_code)
    if latest is not None and value > latest:
        codes.append(late_code)
    return codes


def validate_core_hours(
    first_come: Optional[int],
    last_go: Optional[int],
    core_start: Optional[int],
    core_end: Optional[int],
) -> list[str]:
    """Presence is mandatory for the whole core window when one is configured."""

    if core_start is None or core_end is None:
        return []
    codes: list[str] = []
    if first_come is None or first_come > core_start:
        codes.append(ERR_MISSED_CORE_START)
    if last_go is None or last_go < core_end:
        codes.append(ERR_MISSED_CORE_END)
    return codes


def cap_to_window(
    minutes: int,
    *,
    is_arrival: bool,
    come_from: Optional[int],
    go_to: Optional[int],
    go_plus: int = 0,
) -> tuple[int, int]:
    """Clamp a boundary to the evaluation window; returns (time, capped minutes)."""

    if is_arrival:
        if come_from is not None and minutes < come_from:
            return come_from, come_from - minutes
        return minutes, 0
    if go_to is not None and minutes > go_to + go_plus:
        limit = go_to + go_plus
        return limit, minutes - limit
    return minutes, 0
