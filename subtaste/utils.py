import math


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves away from zero for positive values.

    Built-in round() uses banker's rounding (round(42.5) == 42), which would
    make index boundaries depend on the parity of the integer part.
    """
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def clamp_index(value: float) -> int:
    """Round and clamp a 0-100 score."""
    return int(clamp(round_half_up(value)))
