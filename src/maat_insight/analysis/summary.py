"""Overview statistics and the raw identity view."""

from ..config import AnalysisConfig
from ..dataset import Dataset
from ..models import ResultTable

SUMMARY_COLUMNS = ("statistic", "value")


def summary(dataset: Dataset, config: AnalysisConfig) -> ResultTable:
    return ResultTable(
        columns=SUMMARY_COLUMNS,
        rows=(
            ("number-of-commits", len(dataset.revisions())),
            ("number-of-entities", len(dataset.entities())),
            ("number-of-entities-changed", len(dataset)),
            ("number-of-authors", len(dataset.authors())),
        ),
    )


def identity(dataset: Dataset, config: AnalysisConfig) -> ResultTable:
    """Every record as parsed, useful for debugging a log format."""
    return dataset.to_table()
