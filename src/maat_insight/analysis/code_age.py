"""Code age: months since each entity was last modified."""

from __future__ import annotations

from datetime import date

from ..config import AnalysisConfig
from ..dataset import Dataset
from ..models import ResultTable

AGE_COLUMNS = ("entity", "age-months")


def months_between(last: date, reference: date) -> int:
    """Whole calendar months from ``last`` to ``reference``, never negative.

    >>> months_between(date(2024, 1, 31), date(2024, 3, 30))
    1
    """
    if last >= reference:
        return 0
    months = (reference.year - last.year) * 12 + (reference.month - last.month)
    if reference.day < last.day:
        months -= 1
    return max(months, 0)


def code_age(dataset: Dataset, config: AnalysisConfig) -> ResultTable:
    """Age of every entity against ``config.reference_date()``, oldest first."""
    reference = config.reference_date()
    rows = [
        (entity, months_between(last, reference))
        for entity, last in dataset.latest_date_by_entity().items()
    ]
    rows.sort(key=lambda r: -r[1])
    return ResultTable(columns=AGE_COLUMNS, rows=tuple(rows))
