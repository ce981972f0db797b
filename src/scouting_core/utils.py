"""
Numeric helpers shared by the engine.

All rounding in the engine goes through round_half_up so that .5 cases
resolve upward, matching how scores are tabulated in-game. Python's
built-in round() uses banker's rounding and must not be used for scores.
"""

import math
from typing import Iterable


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Clamp value to the closed interval [minimum, maximum]."""
    return max(minimum, min(maximum, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 rounding toward +infinity."""
    return int(math.floor(value + 0.5))


def round_to(value: float, places: int) -> float:
    """Round half up to a fixed number of decimal places."""
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def average(values: Iterable[float]) -> float:
    """Arithmetic mean, 0.0 for an empty iterable."""
    values = list(values)
    if not values:
        return 0.0
    return sum(values) / len(values)
