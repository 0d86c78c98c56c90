# loyalty_sim/models.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class SimulatorInputs:
    """
    Business inputs for one projection run.

    budget_pct is the share of annual revenue given to the program (percent).
    rewards_allocation is the share of that budget spent on rewards (percent);
    the remainder goes to marketing.
    """

    annual_revenue: float
    customer_count: float
    avg_basket: float
    purchase_frequency: float
    budget_pct: float
    rewards_allocation: float


@dataclass(frozen=True)
class YearlyImpacts:
    basket: float
    frequency: float
    adoption: float


@dataclass(frozen=True)
class RiskLevel:
    level: str
    css_class: str


@dataclass(frozen=True)
class YearlyProjection:
    year: int
    active_members: Union[int, float]
    adoption_rate: float
    program_basket: float
    program_frequency: float
    program_revenue_per_customer: float
    incremental_revenue: float
    rewards_cost: float
    marketing_cost: float
    operational_cost: float
    capex: float
    net_profit: float
    roi: float
    basket_impact: float
    frequency_impact: float
    retention_rate: float

    @property
    def total_cost(self) -> float:
        return self.rewards_cost + self.marketing_cost + self.operational_cost + self.capex


@dataclass(frozen=True)
class SimulationResults:
    projections: Tuple[YearlyProjection, ...]
    total_incremental_revenue: float
    average_roi: float
    payback_months: int
    success_probability: int
    risk_level: str
    capex_annual: float
