"""Base formatter interface for result tables."""

from abc import ABC, abstractmethod
from typing import Optional

from ..models import ResultTable


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, table: ResultTable, max_rows: Optional[int] = None) -> None:
        """Write the table to stdout."""

    @abstractmethod
    def format(self, table: ResultTable, max_rows: Optional[int] = None) -> str:
        """Return formatted string representation of the table."""
