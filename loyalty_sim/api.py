# loyalty_sim/api.py
from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from .estimators import classify_risk
from .models import SimulatorInputs
from .report import display_dict, projections_to_frame, summary_dict
from .validation import InputValidationError, run_validated_simulation

logger = logging.getLogger(__name__)

SERVICE_TITLE = "Loyalty Program Simulator API"
SERVICE_VERSION = "1.0"

app = FastAPI(title=SERVICE_TITLE, version=SERVICE_VERSION)


# -----------------------
# Schemas
# -----------------------
class SimulateRequest(BaseModel):
    # ranges are checked by validate_inputs (HTTP 400), not here
    annual_revenue: float
    customer_count: float
    avg_basket: float
    purchase_frequency: float
    budget_pct: float
    rewards_allocation: float


class RiskLevelResponse(BaseModel):
    budget_pct: float
    level: str
    css_class: str


class SimulateResponse(BaseModel):
    total_incremental_revenue: float
    average_roi: float
    payback_months: int
    success_probability: int
    risk_level: str
    capex_annual: float
    projections: List[Dict[str, Any]]
    display: Dict[str, Any]


# -----------------------
# Endpoints
# -----------------------
@app.get("/")
def root():
    return {
        "service": SERVICE_TITLE,
        "version": SERVICE_VERSION,
        "endpoints": {
            "health": "/health",
            "docs": "/docs",
            "openapi": "/openapi.json",
            "risk_level": "/risk_level?budget_pct=...",
            "simulate": "POST /simulate",
        },
    }


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/risk_level", response_model=RiskLevelResponse)
def risk_level(budget_pct: float):
    """
    Risk tier for a budget percentage:
    /risk_level?budget_pct=4.5
    """
    risk = classify_risk(budget_pct)
    return {"budget_pct": budget_pct, "level": risk.level, "css_class": risk.css_class}


@app.post("/simulate", response_model=SimulateResponse)
def simulate(req: SimulateRequest):
    """
    Runs the 3-year projection and returns:
    - headline figures (revenue, average ROI, payback, success, risk, capex)
    - one record per program year
    - a display block with formatted currency / number strings

    Out-of-range inputs are rejected with HTTP 400 and the list of problems.
    """
    inputs = SimulatorInputs(**req.model_dump())
    try:
        results = run_validated_simulation(inputs)
    except InputValidationError as e:
        logger.warning("Rejected simulation request: %s", e)
        raise HTTPException(
            status_code=400,
            detail={"message": str(e), "problems": [{"field": f, "error": m} for f, m in e.problems]},
        )

    return SimulateResponse(
        **summary_dict(results),
        projections=projections_to_frame(results).to_dict(orient="records"),
        display=display_dict(results),
    )
