# scripts/run_simulation.py
from __future__ import annotations

import sys
from pathlib import Path
import argparse
import logging

# Add project root to Python path
project_root = Path(__file__).resolve().parents[1]
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from loyalty_sim.models import SimulatorInputs
from loyalty_sim.report import format_report
from loyalty_sim.validation import InputValidationError, run_validated_simulation

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Project a loyalty program over 3 years.")
    parser.add_argument("--revenue", type=float, default=10_000_000, help="Annual revenue")
    parser.add_argument("--customers", type=float, default=100_000, help="Number of customers")
    parser.add_argument("--basket", type=float, default=50, help="Average basket value")
    parser.add_argument("--frequency", type=float, default=12, help="Purchases per customer per year")
    parser.add_argument("--budget-pct", type=float, default=4, help="Program budget as %% of revenue")
    parser.add_argument("--rewards-pct", type=float, default=60, help="Share of budget spent on rewards (%%)")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    inputs = SimulatorInputs(
        annual_revenue=args.revenue,
        customer_count=args.customers,
        avg_basket=args.basket,
        purchase_frequency=args.frequency,
        budget_pct=args.budget_pct,
        rewards_allocation=args.rewards_pct,
    )

    try:
        results = run_validated_simulation(inputs)
    except InputValidationError as e:
        logger.error("%s", e)
        return 2

    print("\n" + "=" * 80)
    print("LOYALTY PROGRAM PROJECTION (3 years)")
    print("=" * 80)
    print(format_report(results))
    return 0


if __name__ == "__main__":
    sys.exit(main())
