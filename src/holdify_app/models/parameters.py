from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import Field, confloat, conint

from .common import FrozenModel
from .reversal import NoReversal, ReversalPolicy
from .shareholders import Shareholder
from .taxes import TaxParameters


class SimulationParameters(FrozenModel):
    base_monthly_revenue_holding: float
    base_monthly_charges_holding: float
    base_monthly_revenue_subsidiary: float
    base_monthly_charges_subsidiary: float
    volatility: confloat(ge=0) = Field(0.0, description="Standard deviation of monthly values, as a fraction")
    monthly_growth_rate: float = 0.0
    initial_holding_capital: float = 0.0
    initial_subsidiary_capital: float = 0.0
    duration_months: conint(ge=0)
    taxes: TaxParameters
    shareholders: List[Shareholder] = Field(default_factory=list)
    dividend_on_profit_ratio: confloat(ge=0, le=1) = 0.0
    reversal_policy: ReversalPolicy = Field(default_factory=NoReversal)
    use_capital_based_revenue: bool = False
    capital_revenue_rate: float = Field(0.0, description="Monthly revenue as a share of holding capital")
    start_date: Optional[date] = None

    def total_shareholder_investment(self) -> float:
        return sum(shareholder.investment for shareholder in self.shareholders)

    def active_shareholders(self) -> List[Shareholder]:
        return [shareholder for shareholder in self.shareholders if shareholder.is_active]
