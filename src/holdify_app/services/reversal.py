from __future__ import annotations

from ..errors import UnsupportedReversalPolicyError
from ..models.reversal import (
    ConditionalReversal,
    NoReversal,
    PercentOfHoldingReversal,
    ReversalPolicy,
    TieredReversal,
)
from .rounding import round_currency


def compute_reversal(policy: ReversalPolicy, holding_capital: float, profit_net: float) -> float:
    """Amount the holding transfers to the subsidiary this month."""
    if isinstance(policy, NoReversal):
        return 0.0
    if isinstance(policy, PercentOfHoldingReversal):
        return round_currency(holding_capital * policy.percentage)
    if isinstance(policy, ConditionalReversal):
        if holding_capital >= policy.threshold:
            return policy.amount
        return 0.0
    if isinstance(policy, TieredReversal):
        for tier in sorted(policy.tiers, key=lambda tier: tier.profit_threshold, reverse=True):
            if profit_net >= tier.profit_threshold:
                return tier.amount
        return 0.0
    raise UnsupportedReversalPolicyError(policy)
