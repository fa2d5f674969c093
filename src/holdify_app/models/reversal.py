from __future__ import annotations

from typing import Annotated, List, Literal, Union

from pydantic import Field

from .common import FrozenModel


class NoReversal(FrozenModel):
    type: Literal["none"] = "none"


class PercentOfHoldingReversal(FrozenModel):
    type: Literal["pct_of_holding"] = "pct_of_holding"
    percentage: float = Field(..., description="Share of the current holding capital transferred each month")


class ConditionalReversal(FrozenModel):
    type: Literal["conditional"] = "conditional"
    threshold: float = Field(..., description="Minimum holding capital triggering the transfer")
    amount: float


class ReversalTier(FrozenModel):
    profit_threshold: float
    amount: float


class TieredReversal(FrozenModel):
    type: Literal["tiered"] = "tiered"
    tiers: List[ReversalTier] = Field(default_factory=list)


ReversalPolicy = Annotated[
    Union[NoReversal, PercentOfHoldingReversal, ConditionalReversal, TieredReversal],
    Field(discriminator="type"),
]
