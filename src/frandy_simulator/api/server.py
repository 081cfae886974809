"""FastAPI server — HTTP access to the Frandy revenue simulator.

Run with:
    uvicorn frandy_simulator.api.server:app --reload --port 8000

Or:
    python -m frandy_simulator.api.server

Endpoints:
    GET  /schema                 — full JSON Schema for Scenario inputs
    GET  /scenario/defaults      — complete default scenario as JSON
    POST /simulate               — run a scenario (partial or full)
    POST /simulate/narrative     — run + plain-text interpretation only
    POST /simulate/compare       — evaluate strategy options against the target
    POST /allocation/rebalance   — fresh allocation from the tier ratio table
    POST /allocation/reapportion — keep tier mix, fit a new distribution
    POST /allocation/check       — allocated vs. nominal brand counts
    GET  /slots                  — saved scenario slots
    GET  /slots/{slot}           — load a slot
    PUT  /slots/{slot}           — save a scenario to a slot
    DELETE /slots/{slot}         — clear a slot
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, NonNegativeFloat, ValidationError

from frandy_simulator.config.brackets import TierId
from frandy_simulator.config.distribution import BracketDistribution
from frandy_simulator.config.allocation import TierAllocation
from frandy_simulator.config.options import StrategyOption
from frandy_simulator.config.scenario import Scenario
from frandy_simulator.engine.allocation import (
    check_allocation,
    reapportion_allocation,
    rebalance_allocation,
)
from frandy_simulator.engine.comparison import compare_options
from frandy_simulator.engine.orchestrator import run_scenario
from frandy_simulator.api.context import get_default_scenario, get_scenario_schema
from frandy_simulator.api.narrative import generate_comparison_narrative, generate_narrative
from frandy_simulator.storage.slots import SlotError, SlotNotFoundError, SlotStore

logger = logging.getLogger(__name__)

SLOT_DIR_ENV = "FRANDY_SLOT_DIR"
DEFAULT_SLOT_DIR = ".frandy_slots"


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Frandy Revenue Simulator API",
    version="1.0",
    description=(
        "Annual subscription revenue projection for a tiered SaaS product sold "
        "to franchise brands: tier allocation by largest-remainder apportionment "
        "and launch-month activation of revenue."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class SimulateRequest(BaseModel):
    """Request body for /simulate. All fields optional — defaults used for missing."""
    scenario: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial or full Scenario JSON. Missing fields use defaults. "
                    "Example: {'simulation': {'include_onboarding': true}}",
    )


class SimulateResponse(BaseModel):
    result: dict[str, Any]
    allocation_check: dict[str, Any]
    narrative: str = ""


class CompareRequest(BaseModel):
    scenario: dict[str, Any] = Field(default_factory=dict)
    options: list[StrategyOption] | None = Field(
        default=None,
        description="Options to evaluate. Omit for the three built-in options.",
    )
    target_revenue: int | None = Field(default=None, ge=0)


class CompareResponse(BaseModel):
    outcomes: list[dict[str, Any]]
    comparison_narrative: str


class RebalanceRequest(BaseModel):
    brand_distribution: list[BracketDistribution]
    tier_ratios: dict[TierId, NonNegativeFloat] | None = Field(
        default=None,
        description="Ratio table to apply. Omit to use the scenario's simulation.tier_ratios.",
    )
    scenario: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial scenario overrides supplying the ratio table when tier_ratios is omitted.",
    )


class ReapportionRequest(BaseModel):
    allocation: list[TierAllocation]
    brand_distribution: list[BracketDistribution]


class AllocationCheckRequest(BaseModel):
    brand_distribution: list[BracketDistribution]
    allocation: list[TierAllocation]


class SaveSlotRequest(BaseModel):
    scenario: dict[str, Any] = Field(default_factory=dict)
    name: str | None = None


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _build_scenario(overrides: dict[str, Any]) -> Scenario:
    """Build a Scenario from partial overrides merged onto defaults."""
    defaults = get_default_scenario()
    _deep_merge(defaults, overrides)
    try:
        return Scenario(**defaults)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=json.loads(exc.json())) from exc


def _deep_merge(base: dict, overrides: dict) -> dict:
    """Recursively merge overrides into base dict."""
    for key, val in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(val, dict):
            _deep_merge(base[key], val)
        else:
            base[key] = val
    return base


def _slot_store() -> SlotStore:
    return SlotStore(os.environ.get(SLOT_DIR_ENV, DEFAULT_SLOT_DIR))


def _slot_http_error(exc: SlotError) -> HTTPException:
    status = 404 if isinstance(exc, SlotNotFoundError) else 400
    return HTTPException(status_code=status, detail=str(exc))


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.get("/")
def root():
    return {
        "name": "Frandy Revenue Simulator API",
        "version": "1.0",
        "start_here": "GET /scenario/defaults",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/schema")
def get_schema():
    """Full JSON Schema for Scenario — all input parameters with types, defaults, constraints."""
    return get_scenario_schema()


@app.get("/scenario/defaults")
def get_defaults():
    """Complete default Scenario as JSON. Use as a starting point for modifications."""
    return get_default_scenario()


@app.post("/simulate", response_model=SimulateResponse)
def simulate(req: SimulateRequest):
    """Run a scenario on its configured time base.

    The allocation is used as sent; a mismatch with the brand distribution
    is reported in ``allocation_check`` and never corrected implicitly.
    """
    scenario = _build_scenario(req.scenario)
    result = run_scenario(scenario)
    check = check_allocation(scenario.brand_distribution, scenario.allocation)
    logger.info(
        "simulate time_base=%s total_revenue=%d balanced=%s",
        result.time_base, result.total_revenue, check.is_balanced,
    )
    return SimulateResponse(
        result=result.model_dump(),
        allocation_check=check.model_dump(),
        narrative=generate_narrative(result, scenario.simulation.target_revenue, check.warnings),
    )


@app.post("/simulate/narrative")
def simulate_with_narrative(req: SimulateRequest):
    """Same as /simulate but returns only the narrative and headline numbers."""
    scenario = _build_scenario(req.scenario)
    result = run_scenario(scenario)
    check = check_allocation(scenario.brand_distribution, scenario.allocation)
    return {
        "narrative": generate_narrative(result, scenario.simulation.target_revenue, check.warnings),
        "headline_metrics": {
            "total_revenue": result.total_revenue,
            "subscription_revenue": result.subscription_revenue,
            "onboarding_revenue": result.onboarding_revenue,
            "target_revenue": scenario.simulation.target_revenue,
        },
    }


@app.post("/simulate/compare", response_model=CompareResponse)
def simulate_compare(req: CompareRequest):
    """Evaluate strategy options; each keeps the current per-bracket tier mix."""
    scenario = _build_scenario(req.scenario)
    outcomes = compare_options(scenario, req.options, req.target_revenue)
    logger.info("compare options=%d", len(outcomes))
    return CompareResponse(
        outcomes=[o.model_dump() for o in outcomes],
        comparison_narrative=generate_comparison_narrative(outcomes),
    )


@app.post("/allocation/rebalance")
def allocation_rebalance(req: RebalanceRequest):
    ratios = req.tier_ratios
    if ratios is None:
        ratios = _build_scenario(req.scenario).simulation.tier_ratios
    allocation = rebalance_allocation(req.brand_distribution, ratios)
    return {"allocation": [a.model_dump() for a in allocation]}


@app.post("/allocation/reapportion")
def allocation_reapportion(req: ReapportionRequest):
    allocation = reapportion_allocation(req.allocation, req.brand_distribution)
    return {"allocation": [a.model_dump() for a in allocation]}


@app.post("/allocation/check")
def allocation_check(req: AllocationCheckRequest):
    return check_allocation(req.brand_distribution, req.allocation).model_dump()


@app.get("/slots")
def list_slots():
    return {"slots": [s.model_dump(mode="json") for s in _slot_store().list_slots()]}


@app.get("/slots/{slot}")
def load_slot(slot: int):
    try:
        snapshot = _slot_store().load(slot)
    except SlotError as exc:
        raise _slot_http_error(exc) from exc
    return snapshot.model_dump(mode="json")


@app.put("/slots/{slot}")
def save_slot(slot: int, req: SaveSlotRequest):
    scenario = _build_scenario(req.scenario)
    try:
        snapshot = _slot_store().save(slot, scenario, req.name)
    except SlotError as exc:
        raise _slot_http_error(exc) from exc
    return {"slot": snapshot.slot, "name": snapshot.name, "saved_at": snapshot.saved_at.isoformat()}


@app.delete("/slots/{slot}")
def delete_slot(slot: int):
    try:
        _slot_store().delete(slot)
    except SlotError as exc:
        raise _slot_http_error(exc) from exc
    return {"slot": slot, "deleted": True}


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn

    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    uvicorn.run(
        "frandy_simulator.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
