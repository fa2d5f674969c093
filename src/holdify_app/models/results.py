from __future__ import annotations

from datetime import date
from typing import Dict, List, Optional

from pydantic import Field

from .common import FrozenModel
from .shareholders import ShareholderPayout


class MonthlyResult(FrozenModel):
    month: int
    period_start: Optional[date] = None
    revenue_holding: float
    charges_holding: float
    result_holding: float
    revenue_subsidiary: float
    charges_subsidiary: float
    result_subsidiary: float
    profit_holding: float
    is_amount: float = Field(..., description="Corporate tax paid by the holding")
    profit_net: float
    dividend_on_profit: float
    shareholders_dividends: float
    holding_to_subsidiary: float
    subsidiary_capital: float
    holding_capital: float
    shareholder_payouts: List[ShareholderPayout] = Field(default_factory=list)


class SimulationSummary(FrozenModel):
    months: int
    total_revenue_holding: float
    total_charges_holding: float
    total_result_holding: float
    total_revenue_subsidiary: float
    total_charges_subsidiary: float
    total_result_subsidiary: float
    total_is_amount: float
    total_dividend_on_profit: float
    total_shareholders_dividends: float
    total_holding_to_subsidiary: float
    final_holding_capital: Optional[float] = None
    final_subsidiary_capital: Optional[float] = None


class ChartSeries(FrozenModel):
    labels: List[str]
    datasets: Dict[str, List[float]]
