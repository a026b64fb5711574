"""Number formatting shared by the result views."""

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

MISSING = "--"


def format_number(value: Optional[float], digits: int = 2) -> str:
    """Fixed-point text, or "--" for a missing or non-finite value.

    Ties round away from zero (2.5 -> "3", 0.125 -> "0.13").
    """
    if value is None or not math.isfinite(value):
        return MISSING
    rounded = Decimal(repr(float(value))).quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)
    return f"{rounded:f}"
