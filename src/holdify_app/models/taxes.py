from __future__ import annotations

from typing import List

from pydantic import Field, confloat

from .common import FrozenModel


class TaxBracket(FrozenModel):
    threshold: float = Field(..., description="Lower bound of the bracket")
    rate: confloat(ge=0, le=1)


class DividendTaxRates(FrozenModel):
    income_rate: confloat(ge=0, le=1) = Field(0.128, description="Flat income tax on gross dividends")
    social_rate: confloat(ge=0, le=1) = Field(0.172, description="Social contributions on gross dividends")


class TaxParameters(FrozenModel):
    brackets: List[TaxBracket]
    dividend: DividendTaxRates = Field(default_factory=DividendTaxRates)
