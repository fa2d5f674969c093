from __future__ import annotations

from typing import Dict, Sequence

from ..models.results import ChartSeries, MonthlyResult, SimulationSummary
from .rounding import round_currency


def _total(results: Sequence[MonthlyResult], field: str) -> float:
    return round_currency(sum(getattr(result, field) for result in results))


def summarize(results: Sequence[MonthlyResult]) -> SimulationSummary:
    last = results[-1] if results else None
    return SimulationSummary(
        months=len(results),
        total_revenue_holding=_total(results, "revenue_holding"),
        total_charges_holding=_total(results, "charges_holding"),
        total_result_holding=_total(results, "result_holding"),
        total_revenue_subsidiary=_total(results, "revenue_subsidiary"),
        total_charges_subsidiary=_total(results, "charges_subsidiary"),
        total_result_subsidiary=_total(results, "result_subsidiary"),
        total_is_amount=_total(results, "is_amount"),
        total_dividend_on_profit=_total(results, "dividend_on_profit"),
        total_shareholders_dividends=_total(results, "shareholders_dividends"),
        total_holding_to_subsidiary=_total(results, "holding_to_subsidiary"),
        final_holding_capital=last.holding_capital if last is not None else None,
        final_subsidiary_capital=last.subsidiary_capital if last is not None else None,
    )


def build_chart_series(results: Sequence[MonthlyResult]) -> Dict[str, ChartSeries]:
    labels = [f"Month {result.month}" for result in results]
    return {
        "profits": ChartSeries(
            labels=labels,
            datasets={
                "profit_holding": [result.profit_holding for result in results],
                "profit_net": [result.profit_net for result in results],
            },
        ),
        "dividends": ChartSeries(
            labels=labels,
            datasets={
                "shareholders_dividends": [result.shareholders_dividends for result in results],
                "holding_to_subsidiary": [result.holding_to_subsidiary for result in results],
            },
        ),
        "capitals": ChartSeries(
            labels=labels,
            datasets={
                "subsidiary_capital": [result.subsidiary_capital for result in results],
                "holding_capital": [result.holding_capital for result in results],
            },
        ),
    }
