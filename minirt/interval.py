"""Closed numeric intervals."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Interval:
    """The closed interval [low, high]."""

    low: float
    high: float

    def clamp(self, value: float) -> float:
        """Return ``value`` limited to the interval."""
        if value < self.low:
            return self.low
        if value > self.high:
            return self.high
        return value

    def __contains__(self, value: float) -> bool:
        return self.low <= value <= self.high