from __future__ import annotations

from typing import Dict, List

from fastapi import FastAPI, HTTPException
from fastapi.responses import PlainTextResponse

from .errors import SimulationConfigError
from .models.results import MonthlyResult
from .models.reversal import ReversalPolicy, TieredReversal
from .sample_data import build_sample_parameters
from .schemas import DefaultsResponse, SimulationRequest, SimulationResponse
from .services.calculator import SimulationCalculator
from .services.export import export_to_csv
from .services.generator import MonthlyValueGenerator
from .services.reporting import build_chart_series, summarize


app = FastAPI(title="Holdify Simulation Engine", version="0.1.0")


def _active_policy(policy: ReversalPolicy) -> ReversalPolicy:
    if isinstance(policy, TieredReversal):
        tiers = [tier for tier in policy.tiers if tier.profit_threshold > 0 and tier.amount > 0]
        return policy.model_copy(update={"tiers": tiers})
    return policy


def _run(payload: SimulationRequest) -> List[MonthlyResult]:
    # Empty shareholder rows and tiers are placeholders left over from the form.
    parameters = payload.parameters.model_copy(
        update={
            "shareholders": payload.parameters.active_shareholders(),
            "reversal_policy": _active_policy(payload.parameters.reversal_policy),
        }
    )
    calculator = SimulationCalculator(MonthlyValueGenerator(seed=payload.seed))
    try:
        return calculator.run(parameters)
    except SimulationConfigError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@app.post("/simulate", response_model=SimulationResponse)
def simulate(payload: SimulationRequest) -> SimulationResponse:
    results = _run(payload)
    return SimulationResponse(results=results, summary=summarize(results), charts=build_chart_series(results))


@app.post("/simulate/csv", response_class=PlainTextResponse)
def simulate_csv(payload: SimulationRequest) -> PlainTextResponse:
    results = _run(payload)
    return PlainTextResponse(export_to_csv(results), media_type="text/csv")


@app.get("/defaults", response_model=DefaultsResponse)
def get_defaults() -> DefaultsResponse:
    return DefaultsResponse(parameters=build_sample_parameters())


@app.get("/health")
def healthcheck() -> Dict[str, str]:
    return {"status": "ok"}
