# loyalty_sim/validation.py
from __future__ import annotations

import math
from dataclasses import fields
from typing import List, Tuple

from .engine import run_simulation
from .models import SimulationResults, SimulatorInputs
from .policy import DEFAULT_POLICY, ProgramPolicy

STRICTLY_POSITIVE_FIELDS = ("annual_revenue", "avg_basket")


class InputValidationError(ValueError):
    """Raised when simulator inputs are non-finite, negative or out of range."""

    def __init__(self, problems: List[Tuple[str, str]]):
        self.problems = problems
        detail = "; ".join(f"{name}: {msg}" for name, msg in problems)
        super().__init__(f"Invalid simulator inputs: {detail}")


def validate_inputs(inputs: SimulatorInputs) -> SimulatorInputs:
    """
    Check every field before it reaches the engine.
    Returns the inputs unchanged if valid, otherwise raises InputValidationError
    listing every problem found.
    """
    problems: List[Tuple[str, str]] = []

    for f in fields(inputs):
        value = getattr(inputs, f.name)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            problems.append((f.name, f"must be a number, got {type(value).__name__}"))
            continue
        if not math.isfinite(value):
            problems.append((f.name, f"must be finite, got {value}"))
            continue
        if value < 0:
            problems.append((f.name, f"must be non-negative, got {value}"))
        elif value == 0 and f.name in STRICTLY_POSITIVE_FIELDS:
            problems.append((f.name, "must be positive"))

    allocation = inputs.rewards_allocation
    if isinstance(allocation, (int, float)) and math.isfinite(allocation) and allocation > 100:
        problems.append(("rewards_allocation", f"must be within [0, 100], got {allocation}"))

    if problems:
        raise InputValidationError(problems)
    return inputs


def run_validated_simulation(
    inputs: SimulatorInputs,
    policy: ProgramPolicy = DEFAULT_POLICY,
) -> SimulationResults:
    return run_simulation(validate_inputs(inputs), policy)
