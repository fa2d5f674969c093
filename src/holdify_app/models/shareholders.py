from __future__ import annotations

from enum import Enum

from pydantic import Field, confloat, model_validator

from .common import FrozenModel


class RemunerationMode(str, Enum):
    ON_PROFIT = "on_profit"
    ON_INVESTMENT = "on_investment"


class Shareholder(FrozenModel):
    name: str = ""
    investment: confloat(ge=0) = 0.0
    dividend_rate: float = Field(..., description="Rate applied to the profit share, or annual rate on investment")
    remuneration_mode: RemunerationMode = RemunerationMode.ON_PROFIT

    @property
    def is_active(self) -> bool:
        return self.investment > 0

    @model_validator(mode="after")
    def require_name_when_active(self) -> "Shareholder":
        if self.is_active and not self.name.strip():
            raise ValueError("an active shareholder needs a name")
        return self


class ShareholderPayout(FrozenModel):
    name: str
    remuneration_mode: RemunerationMode
    gross: float
    withholding: float
    net: float
