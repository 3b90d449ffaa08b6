"""Shared arithmetic for analysis tables: safe ratios, percentages, averages.

All rounding is half-up on the shortest decimal representation of the
value, so ``round_half_up(0.125, 2) == 0.13`` and ``round_half_up(2.675, 2)
== 2.68``. Python's built-in ``round`` uses banker's rounding on the binary
value and would make these tables depend on float representation.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

Number = Union[int, float]


def round_half_up(value: Number, digits: int = 0) -> float:
    """Round ``value`` to ``digits`` decimals, ties away from zero."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def safe_divide(numerator: Number, denominator: Optional[Number]) -> float:
    """``numerator / denominator`` rounded to 2 decimals; 0 when the denominator is 0 or None."""
    if not denominator:
        return 0.0
    return round_half_up(numerator / denominator, 2)


def percentage(part: Number, total: Optional[Number]) -> int:
    """Integer percentage of ``part`` in ``total``, via the 2-decimal ratio.

    >>> percentage(1, 1.5)
    67
    """
    return int(round_half_up(safe_divide(part, total) * 100))


def average(first: Optional[Number], second: Optional[Number]) -> float:
    """Mean of two values rounded to 1 decimal; 0 if either is missing."""
    if first is None or second is None:
        return 0.0
    return round_half_up((first + second) / 2.0, 1)
