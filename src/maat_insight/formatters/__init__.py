"""Output formatters for analysis results."""

from pathlib import Path
from typing import Optional, Union

from ..exceptions import InvalidInputError
from ..models import ResultTable
from .base import BaseFormatter
from .csv_formatter import CsvFormatter, csv_value
from .rich_formatter import RichFormatter


def get_formatter(name: str) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "csv", "table"

    Returns:
        Formatter instance

    Raises:
        ValueError: If name is not recognized
    """
    formatters = {
        "csv": CsvFormatter,
        "table": RichFormatter,
    }
    cls = formatters.get(name)
    if cls is None:
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(formatters))}")
    return cls()


def write_table(
    table: ResultTable,
    outfile: Optional[Union[str, Path]] = None,
    fmt: str = "csv",
    max_rows: Optional[int] = None,
) -> None:
    """Render ``table`` to stdout, or write it to ``outfile`` when given."""
    formatter = get_formatter(fmt)
    if outfile is None:
        formatter.render(table, max_rows)
        return
    try:
        Path(outfile).write_text(formatter.format(table, max_rows), encoding="utf-8")
    except OSError as e:
        raise InvalidInputError(f"Cannot write output file: {outfile}", details={"reason": str(e)}) from e


__all__ = [
    "BaseFormatter",
    "CsvFormatter",
    "RichFormatter",
    "csv_value",
    "get_formatter",
    "write_table",
]
