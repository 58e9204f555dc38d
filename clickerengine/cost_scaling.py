from __future__ import annotations

import math
from typing import Callable


class CostScaling:
    """Determines how a generator's price grows with the owned count.

    Every scaling floors its result so prices stay whole numbers.
    """

    def __init__(self, fn: Callable[[float, int], float]) -> None:
        self._fn = fn

    def compute(self, base_cost: float, current_count: int) -> float:
        """Floored price, or ``math.inf`` once it no longer fits a float."""
        try:
            cost = self._fn(base_cost, current_count)
        except OverflowError:
            return math.inf
        if not math.isfinite(cost):
            return math.inf
        return math.floor(cost)

    @classmethod
    def fixed(cls) -> CostScaling:
        """Price never changes."""
        return cls(lambda base, _count: base)

    @classmethod
    def exponential(cls, growth_rate: float = 1.15) -> CostScaling:
        """Price = floor(base * growth_rate^count)."""
        gr = growth_rate  # capture

        def _compute(base: float, count: int) -> float:
            return base * gr ** count

        return cls(_compute)

    @classmethod
    def linear(cls, increment_pct: float = 0.10) -> CostScaling:
        """Price = floor(base * (1 + increment_pct * count))."""
        pct = increment_pct

        def _compute(base: float, count: int) -> float:
            return base * (1.0 + pct * count)

        return cls(_compute)

    @classmethod
    def custom(cls, fn: Callable[[float, int], float]) -> CostScaling:
        """Arbitrary price function."""
        return cls(fn)
