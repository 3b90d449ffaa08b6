"""Development effort measured in revisions rather than lines."""

from __future__ import annotations

from ..config import AnalysisConfig
from ..dataset import Dataset
from ..math import round_half_up, safe_divide, simpson_diversity
from ..models import ResultTable

EFFORT_COLUMNS = ("entity", "author", "author-revs", "total-revs")
MAIN_DEV_COLUMNS = ("entity", "main-dev", "added", "total-added", "ownership")
FRAGMENTATION_COLUMNS = ("entity", "fractal-value")


def entity_effort(dataset: Dataset, config: AnalysisConfig) -> ResultTable:
    """Revisions per author of each entity, next to the entity's total."""
    rows = []
    for entity, by_author in dataset.revisions_by_entity_author().items():
        total = dataset.revision_count(entity)
        for author, revs in by_author.items():
            rows.append((entity, author, len(revs), total))

    rows.sort(key=lambda r: (r[0], -r[2]))
    return ResultTable(columns=EFFORT_COLUMNS, rows=tuple(rows))


def main_developer_by_revisions(dataset: Dataset, config: AnalysisConfig) -> ResultTable:
    """The author with most revisions per entity; ties go alphabetically first."""
    rows = []
    for entity, by_author in dataset.revisions_by_entity_author().items():
        total = dataset.revision_count(entity)
        if total < config.min_revs:
            continue
        main_dev = min(by_author, key=lambda a: (-len(by_author[a]), a))
        count = len(by_author[main_dev])
        rows.append((entity, main_dev, count, total, safe_divide(count, total)))

    rows.sort(key=lambda r: -r[2])
    return ResultTable(columns=MAIN_DEV_COLUMNS, rows=tuple(rows))


def fragmentation(dataset: Dataset, config: AnalysisConfig) -> ResultTable:
    """Fractal value per entity: 0 for a single author, towards 1 as work spreads.

    Computed as Simpson's diversity over each author's share of the
    entity's revisions.
    """
    rows = []
    for entity, by_author in dataset.revisions_by_entity_author().items():
        if dataset.revision_count(entity) < config.min_revs:
            continue
        value = simpson_diversity([len(revs) for revs in by_author.values()])
        rows.append((entity, round_half_up(value, 3)))

    rows.sort(key=lambda r: -r[1])
    return ResultTable(columns=FRAGMENTATION_COLUMNS, rows=tuple(rows))
