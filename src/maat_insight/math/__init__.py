"""Arithmetic shared by every analysis."""

from .diversity import simpson_diversity
from .rounding import average, percentage, round_half_up, safe_divide

__all__ = [
    "average",
    "percentage",
    "round_half_up",
    "safe_divide",
    "simpson_diversity",
]
