from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up, unlike ``round``'s banker's rounding."""
    return int(math.floor(value + 0.5))
