from __future__ import annotations

from typing import List, Sequence

from ..models.shareholders import RemunerationMode, Shareholder, ShareholderPayout
from ..models.taxes import DividendTaxRates
from .rounding import round_currency


def compute_withholding(gross_dividend: float, income_rate: float, social_rate: float) -> float:
    if gross_dividend <= 0:
        return 0.0
    return round_currency(gross_dividend * (income_rate + social_rate))


def compute_net_received(gross_dividend: float, withholding: float) -> float:
    return round_currency(gross_dividend - withholding)


def _shareholder_dividend(shareholder: Shareholder, profit_net: float, total_investment: float) -> float:
    if shareholder.remuneration_mode == RemunerationMode.ON_PROFIT:
        if total_investment <= 0:
            return 0.0
        share = shareholder.investment / total_investment
        # the declared rate applies to the monthly profit share as is
        return profit_net * share * shareholder.dividend_rate
    return shareholder.investment * (shareholder.dividend_rate / 12)


def compute_shareholder_dividends(shareholders: Sequence[Shareholder], profit_net: float) -> float:
    """Total dividends owed to the roster for one month, rounded once."""
    if not shareholders:
        return 0.0
    total_investment = sum(shareholder.investment for shareholder in shareholders)
    total = sum(_shareholder_dividend(shareholder, profit_net, total_investment) for shareholder in shareholders)
    return round_currency(total)


def compute_shareholder_payouts(
    shareholders: Sequence[Shareholder],
    profit_net: float,
    dividend_tax: DividendTaxRates,
) -> List[ShareholderPayout]:
    total_investment = sum(shareholder.investment for shareholder in shareholders)
    payouts: List[ShareholderPayout] = []
    for shareholder in shareholders:
        gross = round_currency(_shareholder_dividend(shareholder, profit_net, total_investment))
        withholding = compute_withholding(gross, dividend_tax.income_rate, dividend_tax.social_rate)
        payouts.append(
            ShareholderPayout(
                name=shareholder.name,
                remuneration_mode=shareholder.remuneration_mode,
                gross=gross,
                withholding=withholding,
                net=compute_net_received(gross, withholding),
            )
        )
    return payouts
