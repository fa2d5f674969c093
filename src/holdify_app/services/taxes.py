from __future__ import annotations

from typing import Sequence

from ..models.taxes import TaxBracket
from .rounding import round_currency


def compute_tax(profit: float, brackets: Sequence[TaxBracket]) -> float:
    """Progressive corporate tax on a positive profit.

    Brackets may arrive in any order. Each bracket taxes the slice of profit
    between its own threshold and the next one; the last bracket taxes
    everything above its threshold.
    """
    if profit <= 0:
        return 0.0
    if not brackets:
        raise ValueError("Tax schedule is empty; cannot tax a positive profit")

    ordered = sorted(brackets, key=lambda bracket: bracket.threshold)
    tax = 0.0
    for index, bracket in enumerate(ordered):
        if profit <= bracket.threshold:
            break
        if index + 1 < len(ordered):
            ceiling = ordered[index + 1].threshold
            taxable = min(profit - bracket.threshold, ceiling - bracket.threshold)
        else:
            taxable = profit - bracket.threshold
        tax += taxable * bracket.rate
    return round_currency(tax)
