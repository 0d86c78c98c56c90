# loyalty_sim/engine.py
from __future__ import annotations

import logging
from typing import List, Union

import numpy as np

from .estimators import (
    classify_risk,
    compute_capex,
    compute_payback_month,
    compute_success_probability,
    compute_yearly_impacts,
)
from .models import SimulationResults, SimulatorInputs, YearlyProjection
from .policy import DEFAULT_POLICY, ProgramPolicy

logger = logging.getLogger(__name__)


def _round_half_up(x: float) -> Union[int, float]:
    """Rounds halves toward +inf. Non-finite values come back as floats unchanged."""
    rounded = np.floor(x + 0.5)
    if not np.isfinite(rounded):
        return float(rounded)
    return int(rounded)


def _percent_of(numerator: float, denominator: float) -> float:
    # zero denominators give inf / nan instead of raising
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / denominator * 100)


def run_simulation(inputs: SimulatorInputs, policy: ProgramPolicy = DEFAULT_POLICY) -> SimulationResults:
    """
    Project the loyalty program over policy.n_years program years.

    - Program budget = revenue * budget_pct / 100, split into rewards and
      marketing by rewards_allocation, plus an operational share on top.
    - Each year: impacts -> active members -> program basket/frequency ->
      incremental revenue vs. baseline -> inflated costs + flat capex -> profit/ROI.
    - Payback month is searched across the whole horizon (first crossing only).

    No validation is done here; see validation.run_validated_simulation.
    """
    capex_annual = compute_capex(inputs.annual_revenue, policy)
    program_budget = inputs.annual_revenue * (inputs.budget_pct / 100)

    rewards_weight = inputs.rewards_allocation / 100
    budget_rewards = program_budget * rewards_weight
    budget_marketing = program_budget * (1 - rewards_weight)
    budget_operational = program_budget * policy.operational_share

    success_probability = compute_success_probability(inputs.budget_pct, inputs.rewards_allocation, policy)
    risk_level = classify_risk(inputs.budget_pct, policy).level

    baseline_revenue_per_customer = inputs.avg_basket * inputs.purchase_frequency

    projections: List[YearlyProjection] = []
    total_revenue = 0.0

    for year in range(policy.n_years):
        impacts = compute_yearly_impacts(inputs.budget_pct, inputs.rewards_allocation, year, policy)

        adoption_rate = impacts.adoption / 100
        active_members = _round_half_up(inputs.customer_count * adoption_rate)

        program_basket = inputs.avg_basket * (1 + impacts.basket / 100)
        program_frequency = inputs.purchase_frequency * (1 + impacts.frequency / 100)
        program_revenue_per_customer = program_basket * program_frequency

        incremental_revenue = active_members * (program_revenue_per_customer - baseline_revenue_per_customer)

        # capex is not inflated
        inflation = policy.inflation_rate ** year
        rewards_cost = budget_rewards * inflation
        marketing_cost = budget_marketing * inflation
        operational_cost = budget_operational * inflation

        total_cost = rewards_cost + marketing_cost + operational_cost + capex_annual
        net_profit = incremental_revenue - total_cost
        roi = _percent_of(net_profit, total_cost)

        projection = YearlyProjection(
            year=year + 1,
            active_members=active_members,
            adoption_rate=adoption_rate * 100,
            program_basket=program_basket,
            program_frequency=program_frequency,
            program_revenue_per_customer=program_revenue_per_customer,
            incremental_revenue=incremental_revenue,
            rewards_cost=rewards_cost,
            marketing_cost=marketing_cost,
            operational_cost=operational_cost,
            capex=capex_annual,
            net_profit=net_profit,
            roi=roi,
            basket_impact=impacts.basket,
            frequency_impact=impacts.frequency,
            retention_rate=policy.retention_base_pct + year * policy.retention_step_pct,
        )
        projections.append(projection)
        total_revenue += incremental_revenue

        logger.debug(
            "year=%d members=%s revenue=%.2f cost=%.2f profit=%.2f roi=%.2f%%",
            projection.year, active_members, incremental_revenue, total_cost, net_profit, roi,
        )

    payback_months = compute_payback_month([p.net_profit for p in projections], policy)
    average_roi = sum(p.roi for p in projections) / policy.n_years

    logger.info(
        "Simulation done: total_revenue=%.2f avg_roi=%.2f%% payback=%d months success=%d risk=%s",
        total_revenue, average_roi, payback_months, success_probability, risk_level,
    )

    return SimulationResults(
        projections=tuple(projections),
        total_incremental_revenue=total_revenue,
        average_roi=average_roi,
        payback_months=payback_months,
        success_probability=success_probability,
        risk_level=risk_level,
        capex_annual=capex_annual,
    )
