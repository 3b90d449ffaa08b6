"""Shared parser machinery: file reading and the two-state line scanner.

Every line-oriented parser is a small state machine over two states:

    AWAITING_HEADER  not inside a file list. A commit header may be pending
                     (Perforce and TFS headers span several lines and only
                     open the file list at a marker line).
    ACCUMULATING     inside a file list; each matching line emits one
                     ChangeRecord carrying the current commit's metadata.

A new header always replaces the current commit and a blank line ends
accumulation. The one exception is a file list opened by a marker line
(Perforce), which may be separated from its first file line by blank lines.
Lines that match no grammar are skipped and counted, never fatal.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from pathlib import Path
from typing import Any, ClassVar, Optional, Union

from ..exceptions import (
    InvalidInputError,
    LogEncodingError,
    LogFileNotFoundError,
    MalformedLogLineError,
)
from ..logging_config import get_logger
from ..models import ChangeRecord

logger = get_logger(__name__)

NULL_DEVICE = "/dev/null"

# Matches one numstat line: "<added|-> <deleted|-> <path>"
NUMSTAT_RE = re.compile(r"^(\d+|-)\s+(\d+|-)\s+(.+)$")


class ParserState(Enum):
    AWAITING_HEADER = "awaiting_header"
    ACCUMULATING = "accumulating"


@dataclass(frozen=True)
class CommitHeader:
    """Metadata shared by every record of one commit."""

    revision: str
    author: str
    date: date
    message: Optional[str] = None


class ParseSession:
    """Mutable state of one parse run. Parsers themselves stay stateless."""

    def __init__(self) -> None:
        self.state = ParserState.AWAITING_HEADER
        self.commit: Optional[CommitHeader] = None
        self.records: list[ChangeRecord] = []
        self.skipped = 0
        self.pending: Optional[dict[str, Any]] = None
        self.message_lines: list[str] = []
        self.awaiting_first_file = False

    def begin(self, header: CommitHeader, until_first_file: bool = False) -> None:
        """Open a file list; ``until_first_file`` keeps it open across blank lines."""
        self.commit = header
        self.state = ParserState.ACCUMULATING
        self.awaiting_first_file = until_first_file

    def end(self) -> None:
        self.commit = None
        self.state = ParserState.AWAITING_HEADER
        self.awaiting_first_file = False

    def hold(self, **fields: Any) -> None:
        """Start a multi-line header whose file list opens at a marker line."""
        self.end()
        self.pending = dict(fields)
        self.message_lines = []

    def release(self, until_first_file: bool = False) -> bool:
        """Open the file list for the pending header; False if it is incomplete."""
        pending, self.pending = self.pending, None
        if not pending or not all(pending.get(k) for k in ("revision", "author", "date")):
            return False
        self.begin(
            CommitHeader(
                revision=pending["revision"],
                author=pending["author"],
                date=pending["date"],
                message=" ".join(self.message_lines) or None,
            ),
            until_first_file=until_first_file,
        )
        return True

    def blank(self) -> None:
        if self.state is ParserState.ACCUMULATING and not self.awaiting_first_file:
            self.end()

    def emit(
        self,
        entity: str,
        loc_added: Optional[int] = None,
        loc_deleted: Optional[int] = None,
    ) -> None:
        assert self.commit is not None
        self.awaiting_first_file = False
        self.records.append(
            ChangeRecord(
                entity=entity,
                author=self.commit.author,
                date=self.commit.date,
                revision=self.commit.revision,
                message=self.commit.message,
                loc_added=loc_added,
                loc_deleted=loc_deleted,
            )
        )

    def skip(self) -> None:
        self.skipped += 1


class LogParser(ABC):
    """Base class for all VCS log parsers.

    Subclasses implement :meth:`parse` over decoded text; :meth:`parse_file`
    adds file access and decoding with the configured encoding.
    """

    vcs: ClassVar[str] = ""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def parse_file(self, path: Union[str, Path]) -> list[ChangeRecord]:
        """Read ``path`` with the configured encoding and parse it."""
        return self.parse(self.read_log(path))

    def read_log(self, path: Union[str, Path]) -> str:
        path = Path(path)
        if not path.exists():
            raise LogFileNotFoundError(path)
        try:
            return path.read_text(encoding=self.encoding)
        except UnicodeDecodeError as e:
            raise LogEncodingError(path, self.encoding, str(e)) from e
        except LookupError as e:
            raise LogEncodingError(path, self.encoding, f"unknown encoding: {e}") from e
        except OSError as e:
            raise InvalidInputError(f"Cannot read log file: {path}", details={"reason": str(e)}) from e

    @abstractmethod
    def parse(self, text: str) -> list[ChangeRecord]:
        """Convert decoded log text into change records."""

    def parse_date(self, value: str, fmt: str = "%Y-%m-%d", line_number: Optional[int] = None) -> date:
        try:
            return datetime.strptime(value.strip(), fmt).date()
        except ValueError as e:
            raise MalformedLogLineError(
                self.vcs,
                f"Invalid date format: {value}",
                line=value,
                line_number=line_number,
            ) from e


class LineLogParser(LogParser):
    """Drives a :class:`ParseSession` over the lines of a log."""

    def parse(self, text: str) -> list[ChangeRecord]:
        session = ParseSession()
        for line_number, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                session.blank()
                continue
            self.step(session, line, line_number)

        logger.debug(
            "%s: parsed %d records, skipped %d unrecognized lines",
            self.vcs,
            len(session.records),
            session.skipped,
        )
        return session.records

    @abstractmethod
    def step(self, session: ParseSession, line: str, line_number: int) -> None:
        """Consume one non-blank line."""


def clean_numstat(value: Optional[str]) -> Optional[int]:
    """Numstat field to int; ``-`` or empty means unknown (binary), not zero."""
    if value is None:
        return None
    value = value.strip()
    if not value or value == "-":
        return None
    return int(value)
