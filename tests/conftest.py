# tests/conftest.py
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add project root to Python path
project_root = Path(__file__).resolve().parents[1]
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from loyalty_sim.models import SimulatorInputs


@pytest.fixture
def reference_inputs() -> SimulatorInputs:
    return SimulatorInputs(
        annual_revenue=10_000_000,
        customer_count=100_000,
        avg_basket=50,
        purchase_frequency=12,
        budget_pct=4,
        rewards_allocation=60,
    )
