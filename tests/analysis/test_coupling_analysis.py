"""Tests for logical coupling and sum of coupling."""

import pytest

from maat_insight.analysis.coupling import logical_coupling, sum_of_coupling


@pytest.fixture
def coupled(make_dataset):
    """A.cs and B.cs change together once; A.cs changes alone once more."""
    return make_dataset([("A.cs", "c1"), ("B.cs", "c1"), ("A.cs", "c2")])


class TestLogicalCoupling:
    def test_two_commit_scenario(self, coupled, make_config):
        """Shared revisions over the average revision count."""
        table = logical_coupling(coupled, make_config(min_coupling=1))

        assert table.columns == ("entity", "coupled", "degree", "average-revs")
        # average(2, 1) = 1.5; percentage(1, 1.5) = round(0.67 * 100)
        assert table.rows == (("A.cs", "B.cs", 67, 2),)

    def test_order_independent(self, make_dataset, make_config):
        """Record order does not change the result."""
        forward = make_dataset([("A.cs", "c1"), ("B.cs", "c1"), ("A.cs", "c2")])
        backward = make_dataset([("A.cs", "c2"), ("B.cs", "c1"), ("A.cs", "c1")])
        assert logical_coupling(forward, make_config()) == logical_coupling(backward, make_config())

    def test_oversized_changeset_contributes_nothing(self, make_dataset, make_config):
        """Changesets above max_changeset_size are ignored."""
        dataset = make_dataset([(f"file{i:02}.py", "big") for i in range(35)])
        table = logical_coupling(
            dataset,
            make_config(min_revs=0, min_shared_revs=0, min_coupling=0, max_changeset_size=30),
        )
        assert table.is_empty

    def test_changeset_at_limit_is_used(self, make_dataset, make_config):
        """A changeset exactly at the limit still counts."""
        dataset = make_dataset([(f"file{i:02}.py", "c1") for i in range(3)])
        table = logical_coupling(dataset, make_config(max_changeset_size=3))
        assert len(table) == 3

    def test_thresholds(self, make_dataset, make_config):
        """Each threshold bound is inclusive."""
        rows = [("A", f"c{i}") for i in range(4)] + [("B", "c0"), ("B", "c1")]
        dataset = make_dataset(rows)
        # shared=2, avg=3.0, degree=67
        assert len(logical_coupling(dataset, make_config(min_shared_revs=2))) == 1
        assert logical_coupling(dataset, make_config(min_shared_revs=3)).is_empty
        assert logical_coupling(dataset, make_config(min_revs=4)).is_empty
        assert logical_coupling(dataset, make_config(min_coupling=68)).is_empty
        assert logical_coupling(dataset, make_config(max_coupling=66)).is_empty
        assert len(logical_coupling(dataset, make_config(min_coupling=67, max_coupling=67))) == 1

    def test_sorted_by_degree_then_average(self, make_dataset, make_config):
        """Highest degree first, then highest average revisions."""
        dataset = make_dataset(
            [
                ("A", "c1"), ("B", "c1"),
                ("C", "c2"), ("D", "c2"),
                ("C", "c3"), ("D", "c3"),
                ("E", "c4"), ("F", "c4"), ("E", "c5"),
            ]
        )
        table = logical_coupling(dataset, make_config())
        assert [(r[0], r[1], r[2], r[3]) for r in table] == [
            ("C", "D", 100, 2),
            ("A", "B", 100, 1),
            ("E", "F", 67, 2),
        ]

    def test_verbose_results(self, coupled, make_config):
        """Verbose results add per-entity and shared revision counts."""
        table = logical_coupling(coupled, make_config(verbose_results=True))
        assert table.columns[-3:] == (
            "first-entity-revisions",
            "second-entity-revisions",
            "shared-revisions",
        )
        assert table.rows == (("A.cs", "B.cs", 67, 2, 2, 1, 1),)

    def test_default_thresholds_exclude_rare_pairs(self, coupled):
        from maat_insight.config import AnalysisConfig

        assert logical_coupling(coupled, AnalysisConfig()).is_empty

    def test_empty(self, empty_dataset, make_config):
        """Empty input gives an empty table."""
        assert logical_coupling(empty_dataset, make_config()).is_empty


class TestSumOfCoupling:
    def test_sums_degrees_per_entity(self, make_dataset, make_config):
        """Sum of coupling adds every pair degree an entity takes part in."""
        dataset = make_dataset(
            [("A", "c1"), ("B", "c1"), ("A", "c2"), ("C", "c2")]
        )
        # A-B: avg(2,1)=1.5 -> 67; A-C: 67
        table = sum_of_coupling(dataset, make_config())
        assert table.columns == ("entity", "soc")
        assert table.rows[0] == ("A", 134)
        assert sorted(table.rows[1:]) == [("B", 67), ("C", 67)]
