from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Tuple

from dateutil.relativedelta import relativedelta

from ..errors import SimulationConfigError
from ..models.parameters import SimulationParameters
from ..models.results import MonthlyResult
from ..models.shareholders import ShareholderPayout
from .dividends import compute_shareholder_dividends, compute_shareholder_payouts
from .generator import MonthlyValueGenerator
from .reversal import compute_reversal
from .rounding import round_currency
from .taxes import compute_tax

logger = logging.getLogger(__name__)

_SCALAR_FIELDS = (
    "base_monthly_revenue_holding",
    "base_monthly_charges_holding",
    "base_monthly_revenue_subsidiary",
    "base_monthly_charges_subsidiary",
    "volatility",
    "monthly_growth_rate",
    "initial_holding_capital",
    "initial_subsidiary_capital",
    "dividend_on_profit_ratio",
    "capital_revenue_rate",
)


@dataclass
class CapitalState:
    holding: float
    subsidiary: float


@dataclass
class MonthlyFlows:
    revenue_holding: float
    charges_holding: float
    revenue_subsidiary: float
    charges_subsidiary: float

    @property
    def result_holding(self) -> float:
        return self.revenue_holding - self.charges_holding

    @property
    def result_subsidiary(self) -> float:
        return self.revenue_subsidiary - self.charges_subsidiary


class SimulationCalculator:
    def __init__(self, generator: Optional[MonthlyValueGenerator] = None) -> None:
        self.generator = generator or MonthlyValueGenerator()

    def run(self, parameters: SimulationParameters) -> List[MonthlyResult]:
        self._validate(parameters)

        capital = CapitalState(
            holding=parameters.initial_holding_capital + parameters.total_shareholder_investment(),
            subsidiary=parameters.initial_subsidiary_capital,
        )
        logger.info(
            "Simulating %d months from holding capital %.2f and subsidiary capital %.2f",
            parameters.duration_months,
            capital.holding,
            capital.subsidiary,
        )

        monthly_results: List[MonthlyResult] = []
        for month in range(1, parameters.duration_months + 1):
            flows = self._compute_flows(month, parameters, capital)

            profit_holding = max(0.0, flows.result_holding)
            is_amount = compute_tax(profit_holding, parameters.taxes.brackets)
            profit_net = profit_holding - is_amount

            dividend_on_profit, shareholders_dividends, payouts = self._compute_dividends(parameters, profit_net)
            holding_to_subsidiary = compute_reversal(parameters.reversal_policy, capital.holding, profit_net)

            was_solvent = capital.holding >= 0
            capital.subsidiary = round_currency(capital.subsidiary + flows.result_subsidiary + holding_to_subsidiary)
            capital.holding = round_currency(
                capital.holding
                + flows.result_holding
                - is_amount
                - dividend_on_profit
                - shareholders_dividends
                - holding_to_subsidiary
            )
            if was_solvent and capital.holding < 0:
                logger.warning("Holding capital turned negative in month %d: %.2f", month, capital.holding)

            logger.debug(
                "Month %d: result holding %.2f, tax %.2f, dividends %.2f, transfer %.2f",
                month,
                flows.result_holding,
                is_amount,
                dividend_on_profit + shareholders_dividends,
                holding_to_subsidiary,
            )

            monthly_results.append(
                MonthlyResult(
                    month=month,
                    period_start=self._period_start(parameters.start_date, month),
                    revenue_holding=flows.revenue_holding,
                    charges_holding=flows.charges_holding,
                    result_holding=flows.result_holding,
                    revenue_subsidiary=flows.revenue_subsidiary,
                    charges_subsidiary=flows.charges_subsidiary,
                    result_subsidiary=flows.result_subsidiary,
                    profit_holding=profit_holding,
                    is_amount=is_amount,
                    profit_net=profit_net,
                    dividend_on_profit=dividend_on_profit,
                    shareholders_dividends=shareholders_dividends,
                    holding_to_subsidiary=holding_to_subsidiary,
                    subsidiary_capital=capital.subsidiary,
                    holding_capital=capital.holding,
                    shareholder_payouts=payouts,
                )
            )

        logger.info(
            "Simulation finished: holding capital %.2f, subsidiary capital %.2f",
            capital.holding,
            capital.subsidiary,
        )
        return monthly_results

    def _validate(self, parameters: SimulationParameters) -> None:
        if parameters.duration_months < 0:
            raise SimulationConfigError(f"duration_months must be >= 0, got {parameters.duration_months}")
        if not parameters.taxes.brackets:
            raise SimulationConfigError("Tax schedule must contain at least one bracket")
        for name in _SCALAR_FIELDS:
            value = getattr(parameters, name)
            if not math.isfinite(value):
                raise SimulationConfigError(f"{name} must be finite, got {value}")
        for bracket in parameters.taxes.brackets:
            if not (math.isfinite(bracket.threshold) and math.isfinite(bracket.rate)):
                raise SimulationConfigError(f"Tax bracket must be finite, got {bracket}")
        for shareholder in parameters.shareholders:
            if not (math.isfinite(shareholder.investment) and math.isfinite(shareholder.dividend_rate)):
                raise SimulationConfigError(f"Shareholder {shareholder.name!r} has non-finite figures")

    def _compute_flows(
        self,
        month: int,
        parameters: SimulationParameters,
        capital: CapitalState,
    ) -> MonthlyFlows:
        if parameters.use_capital_based_revenue:
            holding_revenue_base = capital.holding * parameters.capital_revenue_rate
        else:
            holding_revenue_base = parameters.base_monthly_revenue_holding

        volatility = parameters.volatility
        growth = parameters.monthly_growth_rate
        return MonthlyFlows(
            revenue_holding=self.generator.generate(holding_revenue_base, volatility, growth, month),
            charges_holding=self.generator.generate(parameters.base_monthly_charges_holding, volatility, growth, month),
            revenue_subsidiary=self.generator.generate(parameters.base_monthly_revenue_subsidiary, volatility, growth, month),
            charges_subsidiary=self.generator.generate(parameters.base_monthly_charges_subsidiary, volatility, growth, month),
        )

    def _compute_dividends(self, parameters: SimulationParameters, profit_net: float) -> Tuple[float, float, List[ShareholderPayout]]:
        if profit_net > 0:
            dividend_on_profit = round_currency(profit_net * parameters.dividend_on_profit_ratio)
        else:
            dividend_on_profit = 0.0
        distributable = profit_net - dividend_on_profit
        shareholders_dividends = compute_shareholder_dividends(parameters.shareholders, distributable)
        payouts = compute_shareholder_payouts(parameters.shareholders, distributable, parameters.taxes.dividend)
        return dividend_on_profit, shareholders_dividends, payouts

    def _period_start(self, start_date: Optional[date], month: int) -> Optional[date]:
        if start_date is None:
            return None
        return start_date + relativedelta(months=month - 1)


def run_simulation(parameters: SimulationParameters, seed: Optional[int] = None) -> List[MonthlyResult]:
    calculator = SimulationCalculator(MonthlyValueGenerator(seed=seed))
    return calculator.run(parameters)
