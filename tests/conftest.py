"""Shared test fixtures for maat-insight tests."""

import os
from datetime import date
from typing import Optional

import pytest

from maat_insight.config import AnalysisConfig
from maat_insight.dataset import Dataset
from maat_insight.models import ChangeRecord


def _record(
    entity: str,
    revision: str,
    author: str = "alice",
    day: str = "2024-01-01",
    message: Optional[str] = None,
    added: Optional[int] = None,
    deleted: Optional[int] = None,
) -> ChangeRecord:
    return ChangeRecord(
        entity=entity,
        author=author,
        date=date.fromisoformat(day),
        revision=revision,
        message=message,
        loc_added=added,
        loc_deleted=deleted,
    )


@pytest.fixture
def make_record():
    """Factory: ``make_record(entity, revision, author="alice", day=..., ...)``."""
    return _record


@pytest.fixture
def make_dataset():
    """Factory: Dataset from ``(entity, revision[, author[, day]])`` tuples or records."""

    def build(rows) -> Dataset:
        return Dataset(r if isinstance(r, ChangeRecord) else _record(*r) for r in rows)

    return build


@pytest.fixture
def empty_dataset():
    """A dataset with no records."""
    return Dataset()


@pytest.fixture
def make_config():
    """Factory: AnalysisConfig with every threshold relaxed unless overridden."""

    def build(**overrides) -> AnalysisConfig:
        relaxed = {"min_revs": 1, "min_shared_revs": 1, "min_coupling": 0}
        relaxed.update(overrides)
        return AnalysisConfig(**relaxed)

    return build


FAST_GIT_LOG = """\
--a1b2c3d--2024-01-10--Alice Smith
10\t2\tsrc/app.py
3\t0\tsrc/util.py

--b2c3d4e--2024-01-12--Bob Jones
5\t5\tsrc/app.py
-\t-\tassets/logo.png

--c3d4e5f--2024-02-01--Alice Smith
1\t1\tsrc/app.py
"""


@pytest.fixture
def fast_git_log():
    return FAST_GIT_LOG


@pytest.fixture
def fast_git_file(tmp_path):
    path = tmp_path / "git2.log"
    path.write_text(FAST_GIT_LOG, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user config files and MAAT_* variables out of every test."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr("pathlib.Path.home", lambda: home)
    for key in list(os.environ):
        if key.startswith("MAAT_"):
            monkeypatch.delenv(key)
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
