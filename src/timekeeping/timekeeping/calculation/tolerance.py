from __future__ import annotations

from typing import Optional

from .model import Tolerance


def apply_come_tolerance(minutes: int, expected: Optional[int], tolerance: Tolerance) -> int:
    """Snap an arrival to ``expected`` when it lies inside the early/late band."""

    if expected is None:
        return minutes
    if minutes < expected and 0 < tolerance.come_minus and expected - minutes <= tolerance.come_minus:
        return expected
    if minutes > expected and 0 < tolerance.come_plus and minutes - expected <= tolerance.come_plus:
        return expected
    return minutes


def apply_go_tolerance(minutes: int, expected: Optional[int], tolerance: Tolerance) -> int:
    """Snap a departure to ``expected`` when it lies inside the early/late band."""

    if expected is None:
        return minutes
    if minutes < expected and 0 < tolerance.go_minus and expected - minutes <= tolerance.go_minus:
        return expected
    if minutes > expected and 0 < tolerance.go_plus and minutes - expected <= tolerance.go_plus:
        return expected
    return minutes
