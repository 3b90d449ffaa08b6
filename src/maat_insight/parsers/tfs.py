"""Team Foundation Server history parser.

Input::

    tf hist /path/to/workspace /noprompt /format:detailed /recursive

    Changeset: 12345
    User: DOMAIN\\jdoe
    Date: Friday, January 15, 2016 1:12:35 PM

    Comment:
      Fix bug in parser

    Items:
      edit $/Project/src/main.cs
      add $/Project/test/test.cs

Dates are en-US locale formatted. A changeset whose date cannot be parsed
is discarded on its own; the rest of the log is still read. TFS logs are
noisier than the single-line-header formats, which fail the whole parse
on a bad date instead.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional

from ..logging_config import get_logger
from .base import LineLogParser, ParserState, ParseSession

logger = get_logger(__name__)

CHANGESET_RE = re.compile(r"^Changeset:\s+(\d+)")
USER_RE = re.compile(r"^User:\s+(.+)")
DATE_RE = re.compile(r"^Date:\s+(.+)")
# Change types "tf hist /format:detailed" prints before each item path
CHANGE_TYPES = (
    "edit",
    "add",
    "delete",
    "rename",
    "branch",
    "merge",
    "encoding",
    "undelete",
    "rollback",
)
_CHANGE = "(?:" + "|".join(CHANGE_TYPES) + ")"
ITEM_RE = re.compile(rf"^\s+({_CHANGE}(?:,\s*{_CHANGE})*)\s+(\S.*)$")
NULL_PATH = "$/null"

DATE_FORMATS = (
    "%A, %B %d, %Y %I:%M:%S %p",
    "%B %d, %Y %I:%M:%S %p",
)


def parse_tfs_date(value: str) -> Optional[date]:
    """Parse an en-US TFS timestamp; None when no known format matches."""
    value = value.strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    return None


class TfsParser(LineLogParser):
    vcs = "tfs"

    def step(self, session: ParseSession, line: str, line_number: int) -> None:
        changeset = CHANGESET_RE.match(line)
        if changeset:
            session.hold(revision=changeset.group(1))
            return

        stripped = line.strip()

        if stripped == "Items:":
            if not session.release():
                session.skip()
            return

        if session.state is ParserState.ACCUMULATING:
            self._item(session, line)
            return

        if session.pending is None:
            session.skip()
            return

        user = USER_RE.match(line)
        if user:
            # DOMAIN\user -> user
            session.pending["author"] = user.group(1).strip().split("\\")[-1]
            return

        when = DATE_RE.match(line)
        if when:
            parsed = parse_tfs_date(when.group(1))
            if parsed is None:
                logger.warning(
                    "tfs: discarding changeset %s, unparsable date %r (line %d)",
                    session.pending.get("revision"),
                    when.group(1).strip(),
                    line_number,
                )
                session.pending = None
                return
            session.pending["date"] = parsed
            return

        if stripped == "Comment:":
            session.pending["in_comment"] = True
            return

        if session.pending.get("in_comment") and line[:1].isspace():
            session.message_lines.append(stripped)
            return

        session.skip()

    def _item(self, session: ParseSession, line: str) -> None:
        item = ITEM_RE.match(line)
        if not item:
            session.skip()
            return
        actions = {a.strip() for a in item.group(1).split(",")}
        entity = item.group(2).strip()
        if "delete" in actions or entity == NULL_PATH:
            return
        session.emit(entity)
