"""Simpson diversity for authorship fragmentation.

Given per-author contribution counts c_1..c_n with total T:

    D = 1 - sum((c_i / T) ** 2)

    D = 0: a single author owns everything
    D -> 1 - 1/n: n authors contribute equally

Reference: Simpson (1949) - Measurement of Diversity
"""

from collections.abc import Iterable
from typing import Union


def simpson_diversity(counts: Iterable[Union[int, float]]) -> float:
    """Compute ``1 - sum(p_i^2)`` over the proportions of ``counts``.

    Returns 0.0 for an empty or all-zero distribution.

    Raises:
        ValueError: If any count is negative.
    """
    values = list(counts)
    if any(v < 0 for v in values):
        raise ValueError("Simpson diversity requires non-negative counts")

    total = sum(values)
    if total == 0:
        return 0.0

    return 1.0 - sum((v / total) ** 2 for v in values)
