"""Collapse all commits of one day into a single logical change per entity."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace
from datetime import date

from ..models import ChangeRecord

MESSAGE_JOINER = "; "


def group_by_day(records: Iterable[ChangeRecord]) -> list[ChangeRecord]:
    """One record per (date, entity).

    Line counts are summed with unknown counts taken as 0. Distinct messages
    are joined in order; revision and author come from the first record of
    the day.
    """
    groups: dict[tuple[date, str], list[ChangeRecord]] = {}
    for record in records:
        groups.setdefault((record.date, record.entity), []).append(record)

    grouped = []
    for day_records in groups.values():
        messages = list(dict.fromkeys(r.message for r in day_records if r.message))
        grouped.append(
            replace(
                day_records[0],
                message=MESSAGE_JOINER.join(messages) or None,
                loc_added=sum(r.loc_added or 0 for r in day_records),
                loc_deleted=sum(r.loc_deleted or 0 for r in day_records),
            )
        )
    return grouped
