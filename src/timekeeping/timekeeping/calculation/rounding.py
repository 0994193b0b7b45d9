from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ..core.enums import RoundingMode
from ..core.exceptions import ConfigurationError


class Rounding(ABC):
    """One rounding configuration applied to a boundary time (minutes since midnight)."""

    mode: RoundingMode

    @abstractmethod
    def apply(self, minutes: int) -> int:
        raise NotImplementedError


@dataclass(frozen=True)
class NoRounding(Rounding):
    mode = RoundingMode.NONE

    def apply(self, minutes: int) -> int:
        return minutes


@dataclass(frozen=True)
class RoundUp(Rounding):
    interval: int
    mode = RoundingMode.UP

    def apply(self, minutes: int) -> int:
        if self.interval <= 0:
            return minutes
        remainder = minutes % self.interval
        if remainder == 0:
            return minutes
        return minutes + self.interval - remainder


@dataclass(frozen=True)
class RoundDown(Rounding):
    interval: int
    mode = RoundingMode.DOWN

    def apply(self, minutes: int) -> int:
        if self.interval <= 0:
            return minutes
        return minutes - minutes % self.interval


@dataclass(frozen=True)
class RoundNearest(Rounding):
    """Round to the nearest multiple of ``interval``.

    Exact halves go to the even multiple instead of always rounding up: with
    interval 10, 485 -> 480 and 475 -> 480. A plain half-up rule would turn
    485 into 490, which disagrees with the documented worked example.
    """

    interval: int
    mode = RoundingMode.NEAREST

    def apply(self, minutes: int) -> int:
        if self.interval <= 0:
            return minutes
        quotient, remainder = divmod(minutes, self.interval)
        doubled = remainder * 2
        if doubled > self.interval or (doubled == self.interval and quotient % 2 == 1):
            quotient += 1
        return quotient * self.interval


@dataclass(frozen=True)
class AddFixed(Rounding):
    """Adds ``offset`` unconditionally; the result may exceed 1439."""

    offset: int
    mode = RoundingMode.ADD

    def apply(self, minutes: int) -> int:
        if self.offset <= 0:
            return minutes
        return minutes + self.offset


@dataclass(frozen=True)
class SubtractFixed(Rounding):
    offset: int
    mode = RoundingMode.SUBTRACT

    def apply(self, minutes: int) -> int:
        if self.offset <= 0:
            return minutes
        return max(minutes - self.offset, 0)


def _normalize_mode(mode: str) -> str:
    """Accepts "round-up", "round_nearest", "add-fixed", ... next to the short names."""

    value = mode.strip().lower().replace("-", "_")
    if value.startswith("round_"):
        value = value[len("round_"):]
    if value.endswith("_fixed"):
        value = value[: -len("_fixed")]
    return value


def rounding_from_settings(
    mode: Optional[str],
    *,
    interval: Optional[int] = None,
    offset: Optional[int] = None,
) -> Rounding:
    """Build a Rounding from the stored (mode, interval, offset) columns.

    Only the parameter belonging to ``mode`` is read; the other one is ignored.
    """

    if mode is None or mode.strip() == "":
        return NoRounding()
    try:
        kind = RoundingMode(_normalize_mode(mode))
    except ValueError as exc:
        raise ConfigurationError(f"Unknown rounding mode: {mode!r}") from exc

    if kind == RoundingMode.NONE:
        return NoRounding()
    if kind == RoundingMode.UP:
        return RoundUp(int(interval or 0))
    if kind == RoundingMode.DOWN:
        return RoundDown(int(interval or 0))
    if kind == RoundingMode.NEAREST:
        return RoundNearest(int(interval or 0))
    if kind == RoundingMode.ADD:
        return AddFixed(int(offset or 0))
    return SubtractFixed(int(offset or 0))
