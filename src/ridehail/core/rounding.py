"""Decimal rounding helpers.

Built-in ``round`` rounds half to even; prices and displayed travel times
round half away from zero.
"""

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, places: int = 0) -> float:
    """Round to ``places`` decimals, halves away from zero."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def round_money(value: float) -> float:
    return round_half_up(value, 2)


def round_minutes(value: float) -> int:
    return int(round_half_up(value))
