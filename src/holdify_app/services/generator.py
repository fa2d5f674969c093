from __future__ import annotations

import math
import sys
from typing import Callable, Optional

import numpy as np

from .rounding import round_currency

UniformSource = Callable[[], float]


class MonthlyValueGenerator:
    """Draws monthly revenue and charge figures around a growing base value.

    The uniform source can be any zero-argument callable returning floats in
    [0, 1). By default a numpy ``Generator`` is used, seeded with ``seed``.

    Example:
        >>> draws = iter([0.5, 0.25])
        >>> gen = MonthlyValueGenerator(uniform=lambda: next(draws))
        >>> gen.generate(1000.0, volatility=0.1, growth_rate=0.0, month=1)
        1000.0
    """

    def __init__(self, uniform: Optional[UniformSource] = None, seed: Optional[int] = None) -> None:
        if uniform is None:
            uniform = np.random.default_rng(seed).random
        self._uniform = uniform

    def standard_normal(self) -> float:
        """Box-Muller transform of two uniform draws."""
        u1 = float(self._uniform())
        u2 = float(self._uniform())
        # log(0) is undefined; the smallest positive float stands in for a zero draw
        u1 = u1 or sys.float_info.min
        return math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)

    def generate(self, base_value: float, volatility: float, growth_rate: float, month: int) -> float:
        expected = base_value * (1 + growth_rate) ** (month - 1)
        z = self.standard_normal()
        value = expected * (1 + z * volatility)
        return max(0.0, round_currency(value))
