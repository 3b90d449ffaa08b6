"""Authors and revisions per entity.

The number of authors of a module correlates with quality problems; the
number of revisions is the simplest change-frequency hotspot measure.
"""

from ..config import AnalysisConfig
from ..dataset import Dataset
from ..models import ResultTable

AUTHORS_COLUMNS = ("entity", "n-authors", "n-revs")
REVISIONS_COLUMNS = ("entity", "n-revs")


def authors(dataset: Dataset, config: AnalysisConfig) -> ResultTable:
    """Distinct authors and revisions per entity, most authors first."""
    rows = []
    for entity, by_author in dataset.revisions_by_entity_author().items():
        n_revs = dataset.revision_count(entity)
        if n_revs < config.min_revs:
            continue
        rows.append((entity, len(by_author), n_revs))

    rows.sort(key=lambda r: (-r[1], -r[2]))
    return ResultTable(columns=AUTHORS_COLUMNS, rows=tuple(rows))


def revisions(dataset: Dataset, config: AnalysisConfig) -> ResultTable:
    """Distinct revisions per entity, most changed first."""
    rows = [
        (entity, len(revs))
        for entity, revs in dataset.revisions_by_entity().items()
        if len(revs) >= config.min_revs
    ]
    rows.sort(key=lambda r: -r[1])
    return ResultTable(columns=REVISIONS_COLUMNS, rows=tuple(rows))
