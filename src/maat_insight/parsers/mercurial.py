"""Mercurial log parser.

Input::

    hg log --template "rev: {rev} author: {author} date: {date|shortdate} files:\n{files %'{file}\n'}\n"

    rev: 123 author: John Doe date: 2015-06-15 files:
    src/main.py
    test/test_main.py

The file list runs until the next blank line. Mercurial reports no line
counts, so every record has unknown ``loc_added``/``loc_deleted``.
"""

import re

from .base import NULL_DEVICE, CommitHeader, LineLogParser, ParserState, ParseSession

HEADER_RE = re.compile(
    r"^rev:\s+(\S+)\s+author:\s+(.+?)\s+date:\s+(\d{4}-\d{2}-\d{2})\s+files:\s*$"
)


class MercurialParser(LineLogParser):
    vcs = "hg"

    def step(self, session: ParseSession, line: str, line_number: int) -> None:
        header = HEADER_RE.match(line)
        if header:
            session.begin(
                CommitHeader(
                    revision=header.group(1),
                    author=header.group(2).strip(),
                    date=self.parse_date(header.group(3), line_number=line_number),
                )
            )
            return

        if session.state is not ParserState.ACCUMULATING:
            session.skip()
            return

        entity = line.strip()
        if entity == NULL_DEVICE:
            return
        session.emit(entity)
