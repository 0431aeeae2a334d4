"""Half-up rounding used by the displayed figures (Python's round() is banker's rounding)"""
import math


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def round_to(value: float, decimals: int = 1) -> float:
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))
