"""Rich terminal formatter for result tables."""

import io
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..models import ResultTable
from .base import BaseFormatter
from .csv_formatter import csv_value


class RichFormatter(BaseFormatter):
    """Result table as a rich Table, numeric columns right-aligned."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def build(self, table: ResultTable, max_rows: Optional[int] = None) -> Table:
        shown = table.head(max_rows)
        numeric = [
            bool(shown.rows) and all(isinstance(row[i], (int, float)) for row in shown.rows)
            for i in range(len(table.columns))
        ]

        out = Table(show_lines=False, header_style="bold")
        for name, is_numeric in zip(table.columns, numeric):
            out.add_column(name, justify="right" if is_numeric else "left")
        for row in shown:
            out.add_row(*(escape(str(csv_value(v))) for v in row))

        if len(shown) < len(table):
            out.caption = f"{len(shown)} of {len(table)} rows"
        return out

    def render(self, table: ResultTable, max_rows: Optional[int] = None) -> None:
        if table.is_empty:
            self.console.print("[dim]No results.[/dim]")
            return
        self.console.print(self.build(table, max_rows))

    def format(self, table: ResultTable, max_rows: Optional[int] = None) -> str:
        buffer = io.StringIO()
        Console(file=buffer, width=self.console.width, no_color=True).print(
            self.build(table, max_rows)
        )
        return buffer.getvalue()
