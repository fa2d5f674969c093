from __future__ import annotations

from typing import List

from .models.parameters import SimulationParameters
from .models.reversal import NoReversal
from .models.shareholders import RemunerationMode, Shareholder
from .models.taxes import DividendTaxRates, TaxBracket, TaxParameters

# Indicative corporate tax schedule, not a statement of current law.
DEFAULT_TAX_BRACKETS: List[TaxBracket] = [
    TaxBracket(threshold=0, rate=0.15),
    TaxBracket(threshold=42500, rate=0.25),
    TaxBracket(threshold=500000, rate=0.28),
    TaxBracket(threshold=5000000, rate=0.31),
]

DEFAULT_DIVIDEND_TAX = DividendTaxRates(income_rate=0.128, social_rate=0.172)

DEFAULT_TAX_PARAMS = TaxParameters(brackets=DEFAULT_TAX_BRACKETS, dividend=DEFAULT_DIVIDEND_TAX)


def build_sample_parameters() -> SimulationParameters:
    return SimulationParameters(
        base_monthly_revenue_holding=10000,
        base_monthly_charges_holding=3000,
        base_monthly_revenue_subsidiary=5000,
        base_monthly_charges_subsidiary=2000,
        volatility=0.1,
        monthly_growth_rate=0.02,
        initial_holding_capital=0,
        initial_subsidiary_capital=0,
        duration_months=12,
        taxes=DEFAULT_TAX_PARAMS,
        shareholders=[
            Shareholder(
                name="Shareholder 1",
                investment=50000,
                dividend_rate=0.05,
                remuneration_mode=RemunerationMode.ON_PROFIT,
            ),
        ],
        dividend_on_profit_ratio=0.05,
        reversal_policy=NoReversal(),
        use_capital_based_revenue=False,
        capital_revenue_rate=0.01,
    )
