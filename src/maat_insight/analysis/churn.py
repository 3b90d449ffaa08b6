"""Code churn: lines added and deleted, over time and per author or entity.

Unknown line counts (binary files, formats without numstat) count as 0
here. Main-developer ownership is measured on added lines only.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date

from ..config import AnalysisConfig
from ..dataset import Dataset
from ..math import safe_divide
from ..models import ResultTable

ABSOLUTE_COLUMNS = ("date", "added", "deleted", "commits")
AUTHOR_COLUMNS = ("author", "added", "deleted", "commits")
ENTITY_COLUMNS = ("entity", "added", "deleted", "commits")
OWNERSHIP_COLUMNS = ("entity", "author", "added", "deleted")
MAIN_DEV_COLUMNS = ("entity", "main-dev", "added", "total-added", "ownership")
REFACTORING_COLUMNS = ("entity", "main-dev", "main-dev-revs")


@dataclass
class _Churn:
    added: int = 0
    deleted: int = 0
    revisions: dict[str, None] = field(default_factory=dict)

    def add(self, loc_added: int | None, loc_deleted: int | None, revision: str) -> None:
        self.added += loc_added or 0
        self.deleted += loc_deleted or 0
        self.revisions[revision] = None

    @property
    def total(self) -> int:
        return self.added + self.deleted


def _churn_by(dataset: Dataset, key) -> dict:
    groups: dict = defaultdict(_Churn)
    for r in dataset:
        groups[key(r)].add(r.loc_added, r.loc_deleted, r.revision)
    return groups


def absolute_churn(dataset: Dataset, config: AnalysisConfig) -> ResultTable:
    """Lines added/deleted and commit count per day, oldest first."""
    groups: dict[date, _Churn] = _churn_by(dataset, lambda r: r.date)
    rows = [(day, c.added, c.deleted, len(c.revisions)) for day, c in sorted(groups.items())]
    return ResultTable(columns=ABSOLUTE_COLUMNS, rows=tuple(rows))


def author_churn(dataset: Dataset, config: AnalysisConfig) -> ResultTable:
    groups: dict[str, _Churn] = _churn_by(dataset, lambda r: r.author)
    ordered = sorted(groups.items(), key=lambda kv: (-kv[1].total, -kv[1].added, kv[0]))
    rows = [(author, c.added, c.deleted, len(c.revisions)) for author, c in ordered]
    return ResultTable(columns=AUTHOR_COLUMNS, rows=tuple(rows))


def entity_churn(dataset: Dataset, config: AnalysisConfig) -> ResultTable:
    groups: dict[str, _Churn] = _churn_by(dataset, lambda r: r.entity)
    kept = [(e, c) for e, c in groups.items() if len(c.revisions) >= config.min_revs]
    kept.sort(key=lambda kv: -kv[1].total)
    rows = [(entity, c.added, c.deleted, len(c.revisions)) for entity, c in kept]
    return ResultTable(columns=ENTITY_COLUMNS, rows=tuple(rows))


def ownership(dataset: Dataset, config: AnalysisConfig) -> ResultTable:
    """Churn per (entity, author); within an entity the biggest contributor first."""
    groups: dict[tuple[str, str], _Churn] = _churn_by(dataset, lambda r: (r.entity, r.author))
    ordered = sorted(groups.items(), key=lambda kv: (kv[0][0], -kv[1].total))
    rows = [(entity, author, c.added, c.deleted) for (entity, author), c in ordered]
    return ResultTable(columns=OWNERSHIP_COLUMNS, rows=tuple(rows))


def main_developer(dataset: Dataset, config: AnalysisConfig) -> ResultTable:
    """The author with most added lines per entity.

    Ties go to the alphabetically first author. ``ownership`` is the
    winner's share of the entity's added lines.
    """
    added: dict[str, dict[str, int]] = defaultdict(lambda: defaultdict(int))
    for r in dataset:
        added[r.entity][r.author] += r.loc_added or 0

    rows = []
    for entity in sorted(added):
        if dataset.revision_count(entity) < config.min_revs:
            continue
        by_author = added[entity]
        main_dev = min(by_author, key=lambda a: (-by_author[a], a))
        total_added = sum(by_author.values())
        rows.append(
            (
                entity,
                main_dev,
                by_author[main_dev],
                total_added,
                safe_divide(by_author[main_dev], total_added),
            )
        )

    return ResultTable(columns=MAIN_DEV_COLUMNS, rows=tuple(rows))


def refactoring_main_developer(dataset: Dataset, config: AnalysisConfig) -> ResultTable:
    """Entities whose main developer (by added lines) also made many of its revisions."""
    revisions = dataset.revisions_by_entity_author()
    leads = main_developer(dataset, config)

    rows = []
    for entity, main_dev in zip(leads.column("entity"), leads.column("main-dev")):
        count = len(revisions[entity][main_dev])
        if count >= config.min_revs:
            rows.append((entity, main_dev, count))

    rows.sort(key=lambda r: -r[2])
    return ResultTable(columns=REFACTORING_COLUMNS, rows=tuple(rows))
