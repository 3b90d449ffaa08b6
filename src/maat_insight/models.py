"""Core data models: the canonical change record and the result table."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Iterator, Optional


@dataclass(frozen=True)
class ChangeRecord:
    """One (commit x touched entity) fact.

    A commit touching several files becomes several records sharing the same
    ``revision``. Identity is ``(entity, author, date, revision)``; message and
    line counts do not take part in equality. ``None`` line counts mean
    unknown (binary file, or a VCS that does not report them), not zero.
    """

    entity: str
    author: str
    date: date
    revision: str
    message: Optional[str] = field(default=None, compare=False)
    loc_added: Optional[int] = field(default=None, compare=False)
    loc_deleted: Optional[int] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        for name in ("loc_added", "loc_deleted"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    @property
    def churn(self) -> int:
        """Added plus deleted lines, unknown counts taken as 0."""
        return (self.loc_added or 0) + (self.loc_deleted or 0)

    def to_dict(self) -> dict[str, Any]:
        return {
            "entity": self.entity,
            "author": self.author,
            "date": self.date,
            "revision": self.revision,
            "message": self.message,
            "loc_added": self.loc_added,
            "loc_deleted": self.loc_deleted,
        }


@dataclass(frozen=True)
class ResultTable:
    """Ordered rows under a fixed column schema.

    Row order is part of the result: every analysis sorts before building
    the table and formatters never reorder.
    """

    columns: tuple[str, ...]
    rows: tuple[tuple[Any, ...], ...] = ()

    def __post_init__(self) -> None:
        width = len(self.columns)
        for row in self.rows:
            if len(row) != width:
                raise ValueError(f"Row {row!r} does not match columns {self.columns!r}")

    @classmethod
    def from_dicts(cls, columns: tuple[str, ...], rows: list[dict[str, Any]]) -> ResultTable:
        return cls(columns=columns, rows=tuple(tuple(r[c] for c in columns) for r in rows))

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[tuple[Any, ...]]:
        return iter(self.rows)

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def column(self, name: str) -> list[Any]:
        idx = self.columns.index(name)
        return [row[idx] for row in self.rows]

    def as_dicts(self) -> list[dict[str, Any]]:
        return [dict(zip(self.columns, row)) for row in self.rows]

    def head(self, n: Optional[int]) -> ResultTable:
        """First ``n`` rows; ``None`` keeps everything."""
        if n is None:
            return self
        return ResultTable(columns=self.columns, rows=self.rows[:n])
