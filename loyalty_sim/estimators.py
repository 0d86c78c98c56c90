# loyalty_sim/estimators.py
from __future__ import annotations

from typing import Sequence

import numpy as np

from .models import RiskLevel, YearlyImpacts
from .policy import DEFAULT_POLICY, ProgramPolicy


def compute_capex(annual_revenue: float, policy: ProgramPolicy = DEFAULT_POLICY) -> float:
    """
    Fixed yearly infrastructure cost, stepped by revenue tranche:
      capex = base + tranche_cost * floor(revenue / tranche_size)
    """
    tranches = np.floor(annual_revenue / policy.capex_tranche_size)
    return float(policy.capex_base + tranches * policy.capex_tranche_cost)


def classify_risk(budget_pct: float, policy: ProgramPolicy = DEFAULT_POLICY) -> RiskLevel:
    if budget_pct <= policy.risk_low_max_budget_pct:
        return RiskLevel("Low", "risk-low")
    if budget_pct <= policy.risk_medium_max_budget_pct:
        return RiskLevel("Medium", "risk-medium")
    return RiskLevel("High", "risk-high")


def compute_success_probability(
    budget_pct: float,
    rewards_allocation: float,
    policy: ProgramPolicy = DEFAULT_POLICY,
) -> int:
    """
    Heuristic success score: base, plus one adjustment for the budget band and
    one for the reward allocation band, clamped to [success_min, success_max].

    Budget bands:   < 2 | [2, 4] | (4, 6] | > 6
    Reward bands:   [50, 70] | < 50 | > 70
    """
    score = policy.success_base

    if budget_pct < policy.success_low_budget_pct:
        score += policy.success_adj_budget_low
    elif budget_pct <= policy.success_mid_budget_pct:
        score += policy.success_adj_budget_mid
    elif budget_pct <= policy.success_high_budget_pct:
        score += policy.success_adj_budget_high
    else:
        score += policy.success_adj_budget_over

    low, high = policy.success_reward_band
    if low <= rewards_allocation <= high:
        score += policy.success_adj_reward_in_band
    elif rewards_allocation < low:
        score += policy.success_adj_reward_below
    else:
        score += policy.success_adj_reward_above

    return int(min(policy.success_max, max(policy.success_min, score)))


def compute_yearly_impacts(
    budget_pct: float,
    rewards_allocation: float,
    year: int,
    policy: ProgramPolicy = DEFAULT_POLICY,
) -> YearlyImpacts:
    """
    Basket / frequency / adoption impacts (all in percent) for program year
    index `year` (0-based).

      w          = rewards_allocation / 100
      budget_mul = min(1.5, budget_pct / 4)
      basket     = (10 + 13 w) * budget_mul * year_mul[year]
      frequency  = (8 + 16 w)  * budget_mul * year_mul[year]
      adoption   = min(35, (15 + 10 (1 - w) + 1.5 budget_pct) * adoption_mul[year])

    Reward-heavy allocations lift basket and frequency; marketing-heavy
    allocations lift adoption.
    """
    if not 0 <= year < policy.n_years:
        raise ValueError(f"Unknown year index: {year}. Use 0..{policy.n_years - 1}.")

    rewards_weight = rewards_allocation / 100
    # np.minimum keeps NaN inputs as NaN
    budget_multiplier = float(np.minimum(policy.budget_multiplier_cap, budget_pct / policy.budget_multiplier_divisor))
    year_multiplier = policy.impact_year_multipliers[year]

    basket = (policy.basket_base_pct + rewards_weight * policy.basket_rewards_coef) * budget_multiplier * year_multiplier
    frequency = (
        (policy.frequency_base_pct + rewards_weight * policy.frequency_rewards_coef) * budget_multiplier * year_multiplier
    )

    marketing_weight = 1 - rewards_weight
    adoption = (
        policy.adoption_base_pct
        + marketing_weight * policy.adoption_marketing_coef
        + budget_pct * policy.adoption_budget_coef
    )
    adoption = float(np.minimum(policy.adoption_cap_pct, adoption * policy.adoption_year_multipliers[year]))

    return YearlyImpacts(basket=basket, frequency=frequency, adoption=adoption)


def compute_payback_month(
    yearly_net_profit: Sequence[float],
    policy: ProgramPolicy = DEFAULT_POLICY,
) -> int:
    """
    First month (1-based, counted across all years) where cumulative monthly
    profit is >= 0. Each year contributes net_profit / months_per_year per month.
    Accumulation stops at the first crossing. Falls back to the full horizon
    when cumulative profit never turns non-negative.
    """
    monthly = np.repeat(np.asarray(yearly_net_profit, dtype=float) / policy.months_per_year, policy.months_per_year)
    cumulative = np.cumsum(monthly)

    crossed = np.flatnonzero(cumulative >= 0)
    if len(crossed) == 0:
        return len(monthly)
    return int(crossed[0]) + 1
