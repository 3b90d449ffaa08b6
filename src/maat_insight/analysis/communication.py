"""Communication needs between authors, from the entities they share.

Two authors working on the same modules need to coordinate. Strength is
the shared entity count as a percentage of the pair's average entity count.
``min_shared_revs`` and ``min_revs`` are applied to entity counts here.
"""

from __future__ import annotations

import math
from itertools import combinations

from ..config import AnalysisConfig
from ..dataset import Dataset
from ..math import average, percentage
from ..models import ResultTable

COMMUNICATION_COLUMNS = ("author", "peer", "shared", "average", "strength")


def communication(dataset: Dataset, config: AnalysisConfig) -> ResultTable:
    entities = dataset.entities_by_author()

    rows = []
    for author, peer in combinations(entities, 2):
        shared = len(entities[author] & entities[peer])
        if shared < config.min_shared_revs:
            continue
        avg = average(len(entities[author]), len(entities[peer]))
        if avg < config.min_revs:
            continue
        rows.append((author, peer, shared, math.ceil(avg), percentage(shared, avg)))

    rows.sort(key=lambda r: -r[4])
    return ResultTable(columns=COMMUNICATION_COLUMNS, rows=tuple(rows))
