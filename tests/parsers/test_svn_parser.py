"""Tests for the Subversion XML parser and the parser registry."""

from datetime import date

import pytest

from maat_insight.exceptions import MalformedLogError, UnknownVcsError
from maat_insight.parsers import PARSERS, SvnParser, VcsKind, get_parser

SVN_LOG = """<?xml version="1.0" encoding="UTF-8"?>
<log>
<logentry revision="2">
<author>xyz</author>
<date>2013-02-08T11:46:13.844538Z</date>
<paths>
<path kind="file" action="M">/Infrastrucure/Network/Connection.cs</path>
<path kind="file" action="M">/Presentation/Status/ClientPresenter.cs</path>
</paths>
<msg>[Jir-1234] Fixed the crash</msg>
</logentry>
<logentry revision="1">
<date>2013-01-30T15:12:14.000000Z</date>
<paths>
<path kind="file" action="A">/Infrastrucure/Network/Connection.cs</path>
</paths>
<msg></msg>
</logentry>
</log>
"""


class TestSvnParser:
    def test_one_record_per_path(self):
        """Every changed path of a log entry becomes a record."""
        records = SvnParser().parse(SVN_LOG)
        assert [(r.revision, r.entity) for r in records] == [
            ("2", "/Infrastrucure/Network/Connection.cs"),
            ("2", "/Presentation/Status/ClientPresenter.cs"),
            ("1", "/Infrastrucure/Network/Connection.cs"),
        ]

    def test_fields(self):
        first = SvnParser().parse(SVN_LOG)[0]
        assert first.author == "xyz"
        assert first.date == date(2013, 2, 8)
        assert first.message == "[Jir-1234] Fixed the crash"
        assert first.loc_added is None

    def test_missing_author_and_empty_message(self):
        """A missing author becomes "unknown" and an empty message None."""
        last = SvnParser().parse(SVN_LOG)[-1]
        assert last.author == "unknown"
        assert last.message is None

    def test_malformed_xml(self):
        """Broken XML fails the whole parse."""
        with pytest.raises(MalformedLogError) as exc_info:
            SvnParser().parse("<log><logentry revision='1'>")
        assert "svn" in str(exc_info.value)

    def test_empty_input(self):
        """Whitespace-only input has no records."""
        assert SvnParser().parse("   \n") == []


class TestParserRegistry:
    def test_every_kind_has_a_parser(self):
        """Every VcsKind maps to a parser class."""
        assert set(PARSERS) == set(VcsKind)

    @pytest.mark.parametrize("name", ["git", "git2", "svn", "hg", "p4", "tfs"])
    def test_get_parser(self, name):
        """Parsers are built with the requested encoding."""
        parser = get_parser(name, encoding="latin-1")
        assert parser.vcs == name
        assert parser.encoding == "latin-1"

    def test_unknown_vcs(self):
        with pytest.raises(UnknownVcsError) as exc_info:
            get_parser("cvs")
        assert "Invalid VCS: cvs" in str(exc_info.value)
