"""Git log parsers: the fast ``git2`` format and the legacy ``git`` format.

fast-Git input::

    git log --all --numstat --date=short --pretty=format:'--%h--%ad--%aN' --no-renames

    --586b4eb--2015-06-15--Adam Tornhill
    35      0       src/code_maat/mining/vcs.clj
    -       -       resources/logo.png

legacy-Git input::

    git log --pretty=format:'[%h] %aN %ad %s' --date=short --numstat

    [586b4eb] Adam Tornhill 2015-06-15 Add new feature
    35      0       src/code_maat/mining/vcs.clj
"""

from __future__ import annotations

import re
from abc import abstractmethod
from typing import Optional

from .base import (
    NULL_DEVICE,
    NUMSTAT_RE,
    CommitHeader,
    LineLogParser,
    ParserState,
    ParseSession,
    clean_numstat,
)


class _NumstatParser(LineLogParser):
    """Shared numstat accumulation; subclasses supply the header grammar."""

    header_re: re.Pattern[str]
    # Binary files report "-\t-"; the fast format drops them entirely
    drop_unknown_counts = False

    def step(self, session: ParseSession, line: str, line_number: int) -> None:
        header = self.header_re.match(line)
        if header:
            session.begin(self.make_header(header, line_number))
            return

        change = NUMSTAT_RE.match(line)
        if session.state is not ParserState.ACCUMULATING or not change:
            session.skip()
            return

        added = clean_numstat(change.group(1))
        deleted = clean_numstat(change.group(2))
        entity = change.group(3).strip()

        if not entity or entity == NULL_DEVICE:
            return
        if self.drop_unknown_counts and added is None and deleted is None:
            return

        session.emit(entity, loc_added=added, loc_deleted=deleted)

    @abstractmethod
    def make_header(self, match: re.Match[str], line_number: int) -> CommitHeader:
        """Build the commit metadata from a matched header line."""


class FastGitParser(_NumstatParser):
    """Preferred Git format: ``--<hash>--<date>--<author>`` headers."""

    vcs = "git2"
    header_re = re.compile(r"^--([a-f0-9]+)--(\d{4}-\d{2}-\d{2})--(.+)$")
    drop_unknown_counts = True

    def make_header(self, match: re.Match[str], line_number: int) -> CommitHeader:
        return CommitHeader(
            revision=match.group(1),
            date=self.parse_date(match.group(2), line_number=line_number),
            author=match.group(3).strip(),
        )


class LegacyGitParser(_NumstatParser):
    """Legacy Git format: ``[<hash>] <author> <date> <subject>`` headers."""

    vcs = "git"
    header_re = re.compile(r"^\[([a-f0-9]+)\]\s+(.+?)\s+(\d{4}-\d{2}-\d{2})(?:\s+(.*))?$")

    def make_header(self, match: re.Match[str], line_number: int) -> CommitHeader:
        message: Optional[str] = (match.group(4) or "").strip()
        return CommitHeader(
            revision=match.group(1),
            author=match.group(2).strip(),
            date=self.parse_date(match.group(3), line_number=line_number),
            message=message or None,
        )
