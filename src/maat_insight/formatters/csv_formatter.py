"""CSV formatter: the canonical output of every analysis."""

import csv
import io
import sys
from datetime import date
from typing import Any, Optional

from ..models import ResultTable
from .base import BaseFormatter


def csv_value(value: Any) -> Any:
    """Dates as ISO strings, None as an empty field, everything else as is."""
    if value is None:
        return ""
    if isinstance(value, date):
        return value.isoformat()
    return value


class CsvFormatter(BaseFormatter):
    """Render a table as CSV; the header is written even for empty tables."""

    def render(self, table: ResultTable, max_rows: Optional[int] = None) -> None:
        sys.stdout.write(self.format(table, max_rows))

    def format(self, table: ResultTable, max_rows: Optional[int] = None) -> str:
        output = io.StringIO()
        writer = csv.writer(output, lineterminator="\n")
        writer.writerow(table.columns)
        for row in table.head(max_rows):
            writer.writerow([csv_value(v) for v in row])
        return output.getvalue()
