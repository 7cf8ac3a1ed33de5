"""Shared math utilities for review decay scoring."""

import math


def half_life_decay(days_elapsed: float, half_life: float) -> float:
    """Compute the half-life decay factor.

    Returns 1.0 at zero elapsed days, 0.5 after one half-life, and
    approaches 0 as days_elapsed grows.

    Args:
        days_elapsed: Days since decay began. Not clamped: a negative value
            yields a factor above 1.0.
        half_life: Days for the factor to halve. Must be > 0.

    Raises:
        OverflowError: If days_elapsed is so negative (beyond roughly
            -1024 half-lives) that the factor exceeds float range.
    """
    return 0.5 ** (days_elapsed / half_life)


def round_half_up(value: float, digits: int = 0) -> float:
    """Round to `digits` decimal places with ties going toward +infinity.

    Python's round() uses banker's rounding (2.5 -> 2); scores shown to
    readers use the schoolbook rule instead (2.5 -> 3, -2.5 -> -2).
    """
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale
