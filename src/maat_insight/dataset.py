"""Immutable dataset of change records with the grouping primitives analyses share."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Iterator
from datetime import date
from functools import cached_property
from itertools import combinations

from .models import ChangeRecord, ResultTable

IDENTITY_COLUMNS = ("entity", "author", "date", "revision", "message", "loc-added", "loc-deleted")


class Dataset:
    """A bulk-loaded, read-only multiset of :class:`ChangeRecord`.

    Indices (distinct revisions per entity, entities per author, entities
    per revision) are computed lazily on first use. Filtering returns a new
    Dataset; nothing here mutates the records or an existing instance.

    Every "distinct" view keeps first-seen order so analyses that break
    remaining ties by input order stay deterministic.
    """

    def __init__(self, records: Iterable[ChangeRecord] = ()):
        self._records: tuple[ChangeRecord, ...] = tuple(records)

    @classmethod
    def from_records(cls, records: Iterable[ChangeRecord]) -> Dataset:
        return cls(records)

    @property
    def records(self) -> tuple[ChangeRecord, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ChangeRecord]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f"Dataset({len(self._records)} records)"

    @property
    def is_empty(self) -> bool:
        return not self._records

    # -- distinct values -----------------------------------------------------

    def entities(self) -> list[str]:
        return list(self._revisions_by_entity)

    def authors(self) -> list[str]:
        return list(self._entities_by_author)

    def revisions(self) -> list[str]:
        return list(self._entities_by_revision)

    # -- indices -------------------------------------------------------------

    @cached_property
    def _revisions_by_entity(self) -> dict[str, dict[str, None]]:
        index: dict[str, dict[str, None]] = defaultdict(dict)
        for r in self._records:
            index[r.entity][r.revision] = None
        return dict(index)

    @cached_property
    def _entities_by_author(self) -> dict[str, dict[str, None]]:
        index: dict[str, dict[str, None]] = defaultdict(dict)
        for r in self._records:
            index[r.author][r.entity] = None
        return dict(index)

    @cached_property
    def _entities_by_revision(self) -> dict[str, dict[str, None]]:
        index: dict[str, dict[str, None]] = defaultdict(dict)
        for r in self._records:
            index[r.revision][r.entity] = None
        return dict(index)

    def revisions_by_entity(self) -> dict[str, frozenset[str]]:
        """Distinct revision ids touching each entity."""
        return {e: frozenset(revs) for e, revs in self._revisions_by_entity.items()}

    def entities_by_author(self) -> dict[str, frozenset[str]]:
        """Distinct entities each author touched."""
        return {a: frozenset(ents) for a, ents in self._entities_by_author.items()}

    def revisions_by_entity_author(self) -> dict[str, dict[str, frozenset[str]]]:
        """entity -> author -> distinct revisions, authors in first-seen order."""
        index: dict[str, dict[str, dict[str, None]]] = defaultdict(lambda: defaultdict(dict))
        for r in self._records:
            index[r.entity][r.author][r.revision] = None
        return {
            entity: {author: frozenset(revs) for author, revs in by_author.items()}
            for entity, by_author in index.items()
        }

    def revision_count(self, entity: str) -> int:
        """Number of distinct revisions touching ``entity`` (0 if unknown)."""
        return len(self._revisions_by_entity.get(entity, ()))

    def latest_date_by_entity(self) -> dict[str, date]:
        latest: dict[str, date] = {}
        for r in self._records:
            current = latest.get(r.entity)
            if current is None or r.date > current:
                latest[r.entity] = r.date
        return latest

    # -- filters -------------------------------------------------------------

    def filter_min_revisions(self, min_revs: int) -> Dataset:
        """Keep records whose entity has at least ``min_revs`` distinct revisions."""
        keep = {e for e, revs in self._revisions_by_entity.items() if len(revs) >= min_revs}
        return Dataset(r for r in self._records if r.entity in keep)

    def filter_date_range(self, start: date, end: date) -> Dataset:
        """Keep records dated within ``[start, end]``."""
        return Dataset(r for r in self._records if start <= r.date <= end)

    # -- coupling ------------------------------------------------------------

    def changesets(self) -> dict[str, tuple[str, ...]]:
        """revision -> distinct entities changed together, in first-seen order."""
        return {rev: tuple(ents) for rev, ents in self._entities_by_revision.items()}

    def coupling_pairs(self, max_changeset_size: int) -> Iterator[tuple[str, str]]:
        """Yield every co-changed entity pair, once per changeset.

        Changesets larger than ``max_changeset_size`` (bulk reformats, mass
        renames) contribute nothing. Each pair is ordered lexicographically.
        """
        for entities in self._entities_by_revision.values():
            if len(entities) > max_changeset_size:
                continue
            yield from combinations(sorted(entities), 2)

    # -- export --------------------------------------------------------------

    def to_table(self) -> ResultTable:
        """Raw tabular form of the records, unfiltered and unsorted."""
        return ResultTable(
            columns=IDENTITY_COLUMNS,
            rows=tuple(
                (r.entity, r.author, r.date, r.revision, r.message, r.loc_added, r.loc_deleted)
                for r in self._records
            ),
        )
