# tests/test_estimators.py
from __future__ import annotations

import math

import pytest

from loyalty_sim.estimators import (
    classify_risk,
    compute_capex,
    compute_payback_month,
    compute_success_probability,
    compute_yearly_impacts,
)
from loyalty_sim.policy import DEFAULT_POLICY, ProgramPolicy


class TestCapex:
    """Capex steps up by 10k per full 10M revenue tranche."""

    @pytest.mark.parametrize(
        "revenue, expected",
        [
            (0, 20000),
            (9_999_999, 20000),
            (10_000_000, 30000),
            (25_000_000, 40000),
            (100_000_000, 120000),
        ],
    )
    def test_tranches(self, revenue, expected):
        assert compute_capex(revenue) == expected

    def test_nan_revenue_gives_nan_capex(self):
        assert math.isnan(compute_capex(math.nan))


class TestRiskClassifier:
    @pytest.mark.parametrize(
        "budget_pct, level, css",
        [
            (0, "Low", "risk-low"),
            (3, "Low", "risk-low"),
            (3.0001, "Medium", "risk-medium"),
            (6, "Medium", "risk-medium"),
            (6.5, "High", "risk-high"),
            (50, "High", "risk-high"),
        ],
    )
    def test_thresholds_are_inclusive(self, budget_pct, level, css):
        risk = classify_risk(budget_pct)
        assert risk.level == level
        assert risk.css_class == css


class TestSuccessProbability:
    def test_reference_case(self):
        """63 + 12 (budget in [2, 4]) + 10 (rewards in [50, 70])."""
        assert compute_success_probability(4, 60) == 85

    def test_low_budget_reward_heavy(self):
        assert compute_success_probability(1, 80) == 56

    @pytest.mark.parametrize(
        "budget_pct, expected",
        [(1.99, 63), (2, 85), (4, 85), (4.01, 88), (6, 88), (6.01, 81)],
    )
    def test_budget_bands(self, budget_pct, expected):
        # rewards allocation 60 contributes +10
        assert compute_success_probability(budget_pct, 60) == expected

    @pytest.mark.parametrize(
        "rewards, expected",
        [(0, 80), (49.9, 80), (50, 85), (70, 85), (70.1, 78), (100, 78)],
    )
    def test_reward_bands(self, rewards, expected):
        # budget 3 contributes +12
        assert compute_success_probability(3, rewards) == expected

    @pytest.mark.parametrize("lower, higher", [(0, 1), (1, 1.99), (1.99, 2), (2, 3), (3, 4)])
    def test_score_never_drops_as_budget_grows_to_4(self, lower, higher):
        assert compute_success_probability(lower, 60) <= compute_success_probability(higher, 60)

    def test_budget_band_steps_up_at_2(self):
        assert compute_success_probability(1.99, 60) < compute_success_probability(2, 60)

    def test_result_is_clamped(self):
        generous = ProgramPolicy(success_base=90)
        stingy = ProgramPolicy(success_base=20)
        assert compute_success_probability(5, 60, generous) == 95
        assert compute_success_probability(1, 80, stingy) == 40


class TestYearlyImpacts:
    def test_reference_case_ramps_up(self):
        impacts = [compute_yearly_impacts(4, 60, year) for year in range(3)]

        assert [i.basket for i in impacts] == pytest.approx([8.9, 13.35, 17.8])
        assert [i.frequency for i in impacts] == pytest.approx([8.8, 13.2, 17.6])
        assert [i.adoption for i in impacts] == pytest.approx([20.0, 25.0, 27.5])

    def test_budget_multiplier_is_capped(self):
        at_cap = compute_yearly_impacts(6, 50, 2)
        above_cap = compute_yearly_impacts(20, 50, 2)
        assert above_cap.basket == pytest.approx(at_cap.basket)
        assert above_cap.frequency == pytest.approx(at_cap.frequency)

    def test_adoption_is_capped(self):
        impacts = compute_yearly_impacts(15, 0, 2)
        assert impacts.adoption == 35

    def test_rewards_favor_uplift_marketing_favors_adoption(self):
        rewards_heavy = compute_yearly_impacts(4, 90, 1)
        marketing_heavy = compute_yearly_impacts(4, 10, 1)
        assert rewards_heavy.basket > marketing_heavy.basket
        assert rewards_heavy.frequency > marketing_heavy.frequency
        assert rewards_heavy.adoption < marketing_heavy.adoption

    def test_zero_budget_gives_no_uplift(self):
        impacts = compute_yearly_impacts(0, 60, 2)
        assert impacts.basket == 0
        assert impacts.frequency == 0

    @pytest.mark.parametrize("year", [-1, 3, 10])
    def test_year_outside_table_is_rejected(self, year):
        with pytest.raises(ValueError, match="Unknown year index"):
            compute_yearly_impacts(4, 60, year)


class TestPaybackMonth:
    def test_profitable_first_year_pays_back_in_month_one(self):
        assert compute_payback_month([1200, 1200, 1200]) == 1

    def test_crossing_in_second_year(self):
        # -100/month for 12 months, then +200/month -> breaks even after 6 more months
        assert compute_payback_month([-1200, 2400, 0]) == 18

    def test_exact_zero_counts_as_payback(self):
        assert compute_payback_month([-1200, 1200, 5000]) == 24

    def test_first_crossing_wins_even_if_later_losses(self):
        assert compute_payback_month([1200, -100000, -100000]) == 1

    def test_never_profitable_falls_back_to_horizon(self):
        assert compute_payback_month([-1, -1, -1]) == 36

    def test_nan_profit_falls_back_to_horizon(self):
        assert compute_payback_month([math.nan, math.nan, math.nan]) == DEFAULT_POLICY.horizon_months


class TestPolicy:
    def test_defaults_cover_three_years(self):
        assert DEFAULT_POLICY.n_years == 3
        assert DEFAULT_POLICY.horizon_months == 36

    def test_mismatched_year_tables_are_rejected(self):
        with pytest.raises(ValueError, match="same length"):
            ProgramPolicy(impact_year_multipliers=(0.5, 1.0))
