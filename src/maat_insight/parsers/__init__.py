"""VCS log parsers.

The set of supported formats is closed: :class:`VcsKind` names every one
and :data:`PARSERS` maps each kind to its parser class.
"""

from enum import Enum
from typing import Union

from ..exceptions import UnknownVcsError
from .base import (
    CommitHeader,
    LineLogParser,
    LogParser,
    ParserState,
    ParseSession,
    clean_numstat,
)
from .git import FastGitParser, LegacyGitParser
from .mercurial import MercurialParser
from .perforce import PerforceParser
from .svn import SvnParser
from .tfs import TfsParser


class VcsKind(str, Enum):
    LEGACY_GIT = "git"
    FAST_GIT = "git2"
    SUBVERSION = "svn"
    MERCURIAL = "hg"
    PERFORCE = "p4"
    TFS = "tfs"


PARSERS: dict[VcsKind, type[LogParser]] = {
    VcsKind.LEGACY_GIT: LegacyGitParser,
    VcsKind.FAST_GIT: FastGitParser,
    VcsKind.SUBVERSION: SvnParser,
    VcsKind.MERCURIAL: MercurialParser,
    VcsKind.PERFORCE: PerforceParser,
    VcsKind.TFS: TfsParser,
}


def resolve_vcs(vcs: Union[str, VcsKind]) -> VcsKind:
    try:
        return VcsKind(vcs)
    except ValueError:
        raise UnknownVcsError(str(vcs), [k.value for k in VcsKind]) from None


def get_parser(vcs: Union[str, VcsKind], encoding: str = "utf-8") -> LogParser:
    """Get a parser instance for a VCS name.

    Args:
        vcs: One of "git", "git2", "svn", "hg", "p4", "tfs"
        encoding: Text encoding used when reading log files

    Raises:
        UnknownVcsError: If the name is not a supported VCS
    """
    return PARSERS[resolve_vcs(vcs)](encoding=encoding)


__all__ = [
    "CommitHeader",
    "FastGitParser",
    "LegacyGitParser",
    "LineLogParser",
    "LogParser",
    "MercurialParser",
    "PARSERS",
    "ParseSession",
    "ParserState",
    "PerforceParser",
    "SvnParser",
    "TfsParser",
    "VcsKind",
    "clean_numstat",
    "get_parser",
    "resolve_vcs",
]
