"""Replace individual authors by the team they belong to."""

from __future__ import annotations

import csv
from collections.abc import Iterable, Mapping
from dataclasses import replace
from pathlib import Path
from typing import Union

from ..exceptions import TransformConfigError
from ..logging_config import get_logger
from ..models import ChangeRecord

logger = get_logger(__name__)


class TeamMapper:
    """Maps authors to teams; authors without a team keep their own name."""

    def __init__(self, teams: Mapping[str, str]):
        self.teams = dict(teams)

    @classmethod
    def from_file(cls, path: Union[str, Path], encoding: str = "utf-8") -> TeamMapper:
        """Load an ``author,team`` CSV file with a header row.

        Columns are looked up by name and fall back to the first two
        positions when the header uses other names.
        """
        path = Path(path)
        try:
            with open(path, newline="", encoding=encoding) as f:
                teams = read_team_rows(csv.reader(f))
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise TransformConfigError(path, str(e)) from e

        logger.debug("Loaded %d author-to-team mappings from %s", len(teams), path)
        return cls(teams)

    def team_of(self, author: str) -> str:
        return self.teams.get(author, author)

    def apply(self, records: Iterable[ChangeRecord]) -> list[ChangeRecord]:
        return [replace(r, author=self.team_of(r.author)) for r in records]


def read_team_rows(rows: Iterable[list[str]]) -> dict[str, str]:
    rows = iter(rows)
    header = [h.strip().lower() for h in next(rows, [])]
    author_idx = header.index("author") if "author" in header else 0
    team_idx = header.index("team") if "team" in header else 1

    teams = {}
    for row in rows:
        if len(row) <= max(author_idx, team_idx):
            continue
        author, team = row[author_idx].strip(), row[team_idx].strip()
        if author and team:
            teams[author] = team
    return teams
