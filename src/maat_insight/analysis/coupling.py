"""Logical coupling: entities that change together in the same commits.

For each pair of entities sharing a changeset::

    avg    = average(revs(a), revs(b))        # rounded to 1 decimal
    degree = percentage(shared, avg)          # integer percent

Pairs are reported when ``avg >= min_revs``, ``shared >= min_shared_revs``
and ``min_coupling <= degree <= max_coupling``. Changesets with more than
``max_changeset_size`` entities are ignored.
"""

from __future__ import annotations

import math
from collections import Counter

from ..config import AnalysisConfig
from ..dataset import Dataset
from ..logging_config import get_logger
from ..math import average, percentage
from ..models import ResultTable

logger = get_logger(__name__)

COUPLING_COLUMNS = ("entity", "coupled", "degree", "average-revs")
VERBOSE_COLUMNS = COUPLING_COLUMNS + (
    "first-entity-revisions",
    "second-entity-revisions",
    "shared-revisions",
)
SOC_COLUMNS = ("entity", "soc")


def logical_coupling(dataset: Dataset, config: AnalysisConfig) -> ResultTable:
    """Coupled entity pairs, strongest first."""
    shared_counts = Counter(dataset.coupling_pairs(config.max_changeset_size))
    logger.debug("coupling: %d co-changing pairs", len(shared_counts))

    rows = []
    for (first, second), shared in sorted(shared_counts.items()):
        first_revs = dataset.revision_count(first)
        second_revs = dataset.revision_count(second)
        avg = average(first_revs, second_revs)
        degree = percentage(shared, avg)

        if avg < config.min_revs or shared < config.min_shared_revs:
            continue
        if not config.min_coupling <= degree <= config.max_coupling:
            continue

        row: tuple = (first, second, degree, math.ceil(avg))
        if config.verbose_results:
            row += (first_revs, second_revs, shared)
        rows.append(row)

    rows.sort(key=lambda r: (-r[2], -r[3]))
    columns = VERBOSE_COLUMNS if config.verbose_results else COUPLING_COLUMNS
    return ResultTable(columns=columns, rows=tuple(rows))


def sum_of_coupling(dataset: Dataset, config: AnalysisConfig) -> ResultTable:
    """Sum of coupling degrees per entity over every reported pair."""
    coupled = logical_coupling(dataset, config)

    totals: dict[str, int] = {}
    for first, second, degree, *_ in coupled:
        totals[first] = totals.get(first, 0) + degree
        totals[second] = totals.get(second, 0) + degree

    rows = sorted(totals.items(), key=lambda kv: -kv[1])
    return ResultTable(columns=SOC_COLUMNS, rows=tuple(rows))
