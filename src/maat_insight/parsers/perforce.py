"""Perforce changelist parser.

Input (``p4 describe -s`` per changelist)::

    Change 12345 by jdoe@workspace on 2015/06/15 10:30:45

            Fix bug in parser

    Affected files ...

    ... //depot/project/src/main.java#2 edit
    ... //depot/project/test/test.java#1 add

The header holds a pending changelist; indented description lines become
its message; the ``Affected files`` marker starts accumulation, which
runs past the blank line after the marker until the first file line.
Deleted files are dropped.
"""

import re

from .base import LineLogParser, ParserState, ParseSession

HEADER_RE = re.compile(r"^Change\s+(\d+)\s+by\s+([^@]+)@\S+\s+on\s+(\d{4}/\d{2}/\d{2})")
FILE_RE = re.compile(r"^\.\.\.\s+([^#]+)#\d+\s+(\w+)")
MARKER = "Affected files"


class PerforceParser(LineLogParser):
    vcs = "p4"

    def step(self, session: ParseSession, line: str, line_number: int) -> None:
        header = HEADER_RE.match(line)
        if header:
            session.hold(
                revision=header.group(1),
                author=header.group(2).strip(),
                date=self.parse_date(header.group(3), fmt="%Y/%m/%d", line_number=line_number),
            )
            return

        if line.startswith(MARKER):
            if not session.release(until_first_file=True):
                session.skip()
            return

        if session.state is ParserState.ACCUMULATING:
            change = FILE_RE.match(line)
            if not change:
                session.skip()
                return
            session.awaiting_first_file = False
            entity = change.group(1).strip()
            if change.group(2) == "delete" or not entity:
                return
            session.emit(entity)
            return

        if session.pending is not None and line[:1].isspace():
            session.message_lines.append(line.strip())
            return

        session.skip()
