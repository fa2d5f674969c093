from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .models.parameters import SimulationParameters
from .models.results import ChartSeries, MonthlyResult, SimulationSummary


class SimulationRequest(BaseModel):
    parameters: SimulationParameters
    seed: Optional[int] = Field(default=None, description="Seed for reproducible draws")


class SimulationResponse(BaseModel):
    results: List[MonthlyResult]
    summary: SimulationSummary
    charts: Dict[str, ChartSeries]


class DefaultsResponse(BaseModel):
    parameters: SimulationParameters
