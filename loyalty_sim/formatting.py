# loyalty_sim/formatting.py
from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal


@dataclass(frozen=True)
class NumberFormat:
    currency_symbol: str = "$"
    thousands_sep: str = ","
    negative_sign: str = "-"


USD = NumberFormat()


def _sign(value: float, fmt: NumberFormat) -> str:
    # negative values keep their sign even when they round to zero: -0.4 -> "-0"
    return fmt.negative_sign if math.copysign(1.0, value) < 0 else ""


def _group_thousands(n: int, fmt: NumberFormat) -> str:
    return f"{n:,}".replace(",", fmt.thousands_sep)


def format_currency(value: float, fmt: NumberFormat = USD) -> str:
    """
    Whole-unit currency string, e.g. 1234567.5 -> '$1,234,568', -1200 -> '-$1,200',
    -0.4 -> '-$0'.
    Halves round away from zero. Non-finite values render as-is.
    """
    if not math.isfinite(value):
        return str(value)
    whole = int(Decimal(repr(float(value))).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    sign = _sign(value, fmt)
    return f"{sign}{fmt.currency_symbol}{_group_thousands(abs(whole), fmt)}"


def format_number(value: float, fmt: NumberFormat = USD) -> str:
    """
    Rounds half up (toward +inf) and groups thousands, e.g. 12345.5 -> '12,346'.
    """
    if not math.isfinite(value):
        return str(value)
    whole = int(math.floor(value + 0.5))
    sign = _sign(value, fmt)
    return f"{sign}{_group_thousands(abs(whole), fmt)}"
