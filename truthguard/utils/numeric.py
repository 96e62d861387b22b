"""Numeric helpers shared by the scoring components."""

import math


def clamp(value: float, lower: float = 0.0, upper: float = 100.0) -> float:
    """Bound ``value`` to ``[lower, upper]``."""
    return max(lower, min(upper, value))


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round with halves going up (2.5 -> 3), unlike Python's banker's rounding.

    Scores are reported as integers and claim confidences to two decimals;
    both use this so 54.5 reports as 55, not 54.
    """
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def round_score(value: float) -> int:
    """Round a 0-100 score to the nearest integer, halves up."""
    return int(round_half_up(value))
