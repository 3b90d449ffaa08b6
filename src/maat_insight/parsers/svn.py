"""Subversion XML log parser.

Input::

    svn log -v --xml > logfile.log -r {YYYYmmDD}:HEAD

    <log>
      <logentry revision="12345">
        <author>jdoe</author>
        <date>2015-06-15T10:30:45.123456Z</date>
        <paths>
          <path action="M">/trunk/src/file.java</path>
        </paths>
        <msg>Fix bug in parser</msg>
      </logentry>
    </log>

Unlike the line-oriented formats this is not tolerant: a document that is
not well-formed XML fails the whole parse.
"""

import re
import xml.etree.ElementTree as ET

from ..exceptions import MalformedLogError
from ..logging_config import get_logger
from ..models import ChangeRecord
from .base import LogParser

logger = get_logger(__name__)

DATE_PREFIX_RE = re.compile(r"^\s*(\d{4}-\d{2}-\d{2})")


class SvnParser(LogParser):
    vcs = "svn"

    def parse(self, text: str) -> list[ChangeRecord]:
        if not text.strip():
            return []

        try:
            root = ET.fromstring(text)
        except ET.ParseError as e:
            raise MalformedLogError(self.vcs, f"Invalid XML format in SVN log file: {e}") from e

        records: list[ChangeRecord] = []
        skipped = 0
        for entry in root.iter("logentry"):
            revision = entry.get("revision")
            date_text = entry.findtext("date")
            if not revision or not date_text:
                skipped += 1
                continue

            author = (entry.findtext("author") or "").strip() or "unknown"
            message = (entry.findtext("msg") or "").strip()
            match = DATE_PREFIX_RE.match(date_text)
            entry_date = self.parse_date(match.group(1) if match else date_text)

            for path in entry.iterfind("paths/path"):
                entity = (path.text or "").strip()
                if not entity:
                    continue
                records.append(
                    ChangeRecord(
                        entity=entity,
                        author=author,
                        date=entry_date,
                        revision=revision.strip(),
                        message=message or None,
                    )
                )

        logger.debug("svn: parsed %d records, skipped %d log entries", len(records), skipped)
        return records
