# loyalty_sim/report.py
from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict

import pandas as pd

from .formatting import format_currency, format_number
from .models import SimulationResults


def projections_to_frame(results: SimulationResults) -> pd.DataFrame:
    """One row per program year, one column per YearlyProjection field."""
    return pd.DataFrame([asdict(p) for p in results.projections])


def summary_dict(results: SimulationResults) -> Dict[str, Any]:
    return {
        "total_incremental_revenue": float(results.total_incremental_revenue),
        "average_roi": float(results.average_roi),
        "payback_months": int(results.payback_months),
        "success_probability": int(results.success_probability),
        "risk_level": results.risk_level,
        "capex_annual": float(results.capex_annual),
    }


def display_dict(results: SimulationResults) -> Dict[str, Any]:
    """Formatted strings for presentation; never fed back into calculations."""
    return {
        "total_incremental_revenue": format_currency(results.total_incremental_revenue),
        "capex_annual": format_currency(results.capex_annual),
        "years": [
            {
                "year": p.year,
                "active_members": format_number(p.active_members),
                "incremental_revenue": format_currency(p.incremental_revenue),
                "net_profit": format_currency(p.net_profit),
            }
            for p in results.projections
        ],
    }


def format_report(results: SimulationResults) -> str:
    """Plain-text yearly table plus formatted headline figures (CLI output)."""
    df = projections_to_frame(results)
    df["total_cost"] = [p.total_cost for p in results.projections]
    table = df[
        ["year", "active_members", "adoption_rate", "incremental_revenue", "total_cost", "net_profit", "roi"]
    ].round(2)

    lines = [
        table.to_string(index=False),
        "",
        f"Total incremental revenue : {format_currency(results.total_incremental_revenue)}",
        f"Average ROI               : {results.average_roi:.1f}%",
        f"Payback                   : {results.payback_months} months",
        f"Success probability       : {results.success_probability}%",
        f"Risk level                : {results.risk_level}",
        f"Annual capex              : {format_currency(results.capex_annual)}",
    ]
    return "\n".join(lines)
