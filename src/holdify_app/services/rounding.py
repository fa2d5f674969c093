from __future__ import annotations

import math


def round_currency(value: float) -> float:
    """Round to cents, halves going up (towards positive infinity)."""
    return math.floor(value * 100 + 0.5) / 100
