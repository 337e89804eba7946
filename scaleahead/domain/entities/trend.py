"""Domain entity for the fitted utilization trend."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TrendLine:
    """Utilization as an affine function of seconds since the Unix epoch."""

    intercept: float
    slope: float

    def value_at(self, seconds: float) -> float:
        return self.intercept + self.slope * seconds
