from __future__ import annotations

from typing import Iterable

import pytest

from holdify_app.models.parameters import SimulationParameters
from holdify_app.models.taxes import TaxBracket, TaxParameters


class SequenceUniform:
    """Replays a fixed list of uniform draws."""

    def __init__(self, values: Iterable[float]) -> None:
        self._values = list(values)
        self.calls = 0

    def __call__(self) -> float:
        value = self._values[self.calls % len(self._values)]
        self.calls += 1
        return value


@pytest.fixture
def flat_tax() -> TaxParameters:
    return TaxParameters(brackets=[TaxBracket(threshold=0, rate=0.15)])


@pytest.fixture
def make_parameters(flat_tax):
    def _make(**overrides) -> SimulationParameters:
        values = dict(
            base_monthly_revenue_holding=10000,
            base_monthly_charges_holding=5000,
            base_monthly_revenue_subsidiary=5000,
            base_monthly_charges_subsidiary=3000,
            volatility=0,
            monthly_growth_rate=0,
            initial_holding_capital=50000,
            initial_subsidiary_capital=100000,
            duration_months=1,
            taxes=flat_tax,
            dividend_on_profit_ratio=0.05,
        )
        values.update(overrides)
        return SimulationParameters(**values)

    return _make


@pytest.fixture
def sequence_uniform():
    return SequenceUniform
