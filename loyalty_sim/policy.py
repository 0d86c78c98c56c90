# loyalty_sim/policy.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ProgramPolicy:
    """
    Tunable parameters of the loyalty program projection.

    Percentages that feed formulas as percentages (budget, allocation, impacts)
    stay in percent units; shares applied to money (operational_share) are
    fractions.
    """

    # Capex: base + tranche_cost * floor(revenue / tranche_size)
    capex_base: float = 20000.0
    capex_tranche_size: float = 10_000_000.0
    capex_tranche_cost: float = 10000.0

    # Risk tiers (upper bounds are inclusive)
    risk_low_max_budget_pct: float = 3.0
    risk_medium_max_budget_pct: float = 6.0

    # Success probability scoring
    success_base: int = 63
    success_low_budget_pct: float = 2.0
    success_mid_budget_pct: float = 4.0
    success_high_budget_pct: float = 6.0
    success_adj_budget_low: int = -10
    success_adj_budget_mid: int = 12
    success_adj_budget_high: int = 15
    success_adj_budget_over: int = 8
    success_reward_band: Tuple[float, float] = (50.0, 70.0)
    success_adj_reward_in_band: int = 10
    success_adj_reward_below: int = 5
    success_adj_reward_above: int = 3
    success_min: int = 40
    success_max: int = 95

    # Yearly impacts
    basket_base_pct: float = 10.0
    basket_rewards_coef: float = 13.0
    frequency_base_pct: float = 8.0
    frequency_rewards_coef: float = 16.0
    budget_multiplier_divisor: float = 4.0
    budget_multiplier_cap: float = 1.5
    adoption_base_pct: float = 15.0
    adoption_marketing_coef: float = 10.0
    adoption_budget_coef: float = 1.5
    adoption_cap_pct: float = 35.0
    impact_year_multipliers: Tuple[float, ...] = (0.5, 0.75, 1.0)
    adoption_year_multipliers: Tuple[float, ...] = (0.8, 1.0, 1.1)

    # Costs
    operational_share: float = 0.10
    inflation_rate: float = 1.03

    # Retention heuristic: base + step * year_index
    retention_base_pct: float = 35.0
    retention_step_pct: float = 7.5

    months_per_year: int = 12

    def __post_init__(self) -> None:
        if len(self.impact_year_multipliers) != len(self.adoption_year_multipliers):
            raise ValueError(
                "impact_year_multipliers and adoption_year_multipliers must have the same length "
                f"(got {len(self.impact_year_multipliers)} and {len(self.adoption_year_multipliers)})."
            )
        if self.months_per_year <= 0:
            raise ValueError("months_per_year must be positive.")

    @property
    def n_years(self) -> int:
        return len(self.impact_year_multipliers)

    @property
    def horizon_months(self) -> int:
        return self.n_years * self.months_per_year


DEFAULT_POLICY = ProgramPolicy()
