# tests/test_report.py
from __future__ import annotations

import dataclasses

import pytest

from loyalty_sim.engine import run_simulation
from loyalty_sim.models import YearlyProjection
from loyalty_sim.report import display_dict, format_report, projections_to_frame, summary_dict


def test_projections_to_frame_has_one_row_per_year(reference_inputs):
    res = run_simulation(reference_inputs)
    df = projections_to_frame(res)

    assert len(df) == 3
    assert list(df.columns) == [f.name for f in dataclasses.fields(YearlyProjection)]
    assert df["year"].tolist() == [1, 2, 3]
    assert df["net_profit"].tolist() == pytest.approx([p.net_profit for p in res.projections])


def test_summary_dict(reference_inputs):
    summary = summary_dict(run_simulation(reference_inputs))

    assert summary["payback_months"] == 1
    assert summary["success_probability"] == 85
    assert summary["risk_level"] == "Medium"
    assert summary["capex_annual"] == 30000


def test_display_dict_only_formats(reference_inputs):
    res = run_simulation(reference_inputs)
    display = display_dict(res)

    assert display["capex_annual"] == "$30,000"
    assert [y["active_members"] for y in display["years"]] == ["20,000", "25,000", "27,500"]
    assert res == run_simulation(reference_inputs)


def test_format_report_mentions_headlines(reference_inputs):
    text = format_report(run_simulation(reference_inputs))

    assert "Payback                   : 1 months" in text
    assert "Risk level                : Medium" in text
    assert "$12,822,726" in text
    assert "total_cost" in text
