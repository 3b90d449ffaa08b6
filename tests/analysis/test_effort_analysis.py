"""Tests for entity effort, main developer by revisions and fragmentation."""

import pytest

from maat_insight.analysis.effort import (
    entity_effort,
    fragmentation,
    main_developer_by_revisions,
)


@pytest.fixture
def shared_work(make_dataset):
    return make_dataset(
        [
            ("X", "r1", "alice"),
            ("X", "r2", "alice"),
            ("X", "r3", "alice"),
            ("X", "r4", "bob"),
            ("Y", "r1", "carol"),
        ]
    )


class TestEntityEffort:
    def test_revisions_per_author(self, shared_work, make_config):
        """Revisions per author next to the entity total."""
        table = entity_effort(shared_work, make_config())
        assert table.columns == ("entity", "author", "author-revs", "total-revs")
        assert table.rows == (
            ("X", "alice", 3, 4),
            ("X", "bob", 1, 4),
            ("Y", "carol", 1, 1),
        )


class TestMainDeveloperByRevisions:
    def test_winner_and_ownership(self, shared_work, make_config):
        """The author with the most revisions and their share."""
        table = main_developer_by_revisions(shared_work, make_config())
        assert table.rows == (("X", "alice", 3, 4, 0.75), ("Y", "carol", 1, 1, 1.0))

    def test_tie_goes_to_alphabetically_first(self, make_dataset, make_config):
        """Equal revision counts go to the alphabetically first author."""
        dataset = make_dataset([("X", "r1", "zoe"), ("X", "r2", "adam")])
        assert main_developer_by_revisions(dataset, make_config()).rows[0][1] == "adam"

    def test_min_revs(self, shared_work, make_config):
        table = main_developer_by_revisions(shared_work, make_config(min_revs=2))
        assert table.column("entity") == ["X"]


class TestFragmentation:
    def test_single_author_is_zero(self, shared_work, make_config):
        """One author means no fragmentation."""
        rows = dict(fragmentation(shared_work, make_config()).rows)
        assert rows["Y"] == 0.0

    def test_uneven_split(self, shared_work, make_config):
        """Fractal value is one minus the sum of squared shares."""
        # 1 - (0.75^2 + 0.25^2) = 0.375
        rows = dict(fragmentation(shared_work, make_config()).rows)
        assert rows["X"] == 0.375

    @pytest.mark.parametrize("n_authors, expected", [(2, 0.5), (3, 0.667), (4, 0.75)])
    def test_equal_contributors(self, make_dataset, make_config, n_authors, expected):
        """n equal authors give 1 - 1/n."""
        dataset = make_dataset([("E", f"r{i}", f"dev{i}") for i in range(n_authors)])
        assert fragmentation(dataset, make_config()).rows == (("E", expected),)

    def test_sorted_descending(self, shared_work, make_config):
        assert fragmentation(shared_work, make_config()).column("entity") == ["X", "Y"]
        assert fragmentation(shared_work, make_config()).columns == ("entity", "fractal-value")
