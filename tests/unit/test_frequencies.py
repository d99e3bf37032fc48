"""Tests for pure survey table transforms."""

import polars as pl
import pytest
from polars.testing import assert_frame_equal

from app.errors import UnknownLevelError, UnorderedComparisonError
from app.models.survey import DIFFICULTY, PARTY, DifficultyLevel
from app.services.survey import frequencies

from conftest import make_table


def _freq_by_group(result: pl.DataFrame) -> dict[str, float]:
    return dict(result.group_by(PARTY).agg(pl.col("freq").sum()).select(pl.col(PARTY).cast(pl.String), "freq").rows())


class TestNormalizedFrequencies:
    def test_scenario(self):
        table = make_table(
            [
                ("Democrat", "little"),
                ("Democrat", "little"),
                ("Democrat", "moderate"),
                ("Republican", "little"),
            ]
        )
        result = frequencies.normalized_frequencies(table, PARTY, DIFFICULTY)
        rows = result.rows()

        assert [r[:3] for r in rows] == [
            ("Democrat", "little", 2),
            ("Democrat", "moderate", 1),
            ("Republican", "little", 1),
        ]
        assert [r[3] for r in rows] == pytest.approx([2 / 3, 1 / 3, 1.0])

    def test_columns(self):
        result = frequencies.normalized_frequencies(make_table([("Democrat", "very")]), PARTY, DIFFICULTY)
        assert result.columns == [PARTY, DIFFICULTY, "count", "freq"]
        assert result.schema["count"] == pl.Int64
        assert result.schema["freq"] == pl.Float64

    def test_sums_to_one_per_group(self):
        table = make_table(
            [("Democrat", lvl) for lvl in ["not", "not", "not", "little", "very", "extreme"]]
            + [("Republican", lvl) for lvl in ["not", "moderate", "moderate"]]
        )
        result = frequencies.normalized_frequencies(table, PARTY, DIFFICULTY)

        for total in _freq_by_group(result).values():
            assert abs(total - 1.0) < 1e-9
        assert result.get_column("freq").is_between(0.0, 1.0).all()

    def test_missing_measure_excluded_from_denominator(self):
        rows = [("Democrat", "little")] * 4 + [("Democrat", "very")] * 3 + [("Democrat", None)] * 3
        table = make_table(rows)
        assert table.height == 10

        present = frequencies.drop_missing(table, DIFFICULTY)
        assert present.height == 7

        result = frequencies.normalized_frequencies(table, PARTY, DIFFICULTY)
        assert result.get_column("count").sum() == 7
        assert result.get_column("freq").to_list() == pytest.approx([4 / 7, 3 / 7])

    def test_unobserved_pairs_absent(self):
        table = make_table([("Democrat", "little"), ("Republican", "extreme")])
        result = frequencies.normalized_frequencies(table, PARTY, DIFFICULTY)
        assert result.height == 2
        assert 0 not in result.get_column("count").to_list()

    def test_group_without_measure_contributes_nothing(self):
        table = make_table([("Democrat", "little"), ("Republican", None)])
        result = frequencies.normalized_frequencies(table, PARTY, DIFFICULTY)
        assert result.get_column(PARTY).cast(pl.String).to_list() == ["Democrat"]

    def test_idempotent_on_single_row_groups(self):
        table = make_table([("Democrat", "little"), ("Democrat", "little"), ("Republican", "very")])
        once = frequencies.normalized_frequencies(table, PARTY, DIFFICULTY)
        single = once.group_by(PARTY).first()

        again = frequencies.normalized_frequencies(single, PARTY, DIFFICULTY)
        assert again.get_column("freq").to_list() == [1.0, 1.0]

    def test_does_not_mutate_input(self):
        table = make_table([("Democrat", "little"), ("Democrat", None)])
        before = table.clone()
        frequencies.normalized_frequencies(table, PARTY, DIFFICULTY)
        assert_frame_equal(table, before)

    def test_empty_table(self):
        result = frequencies.normalized_frequencies(make_table([]), PARTY, DIFFICULTY)
        assert result.is_empty()

    def test_sorted_by_level_rank(self):
        table = make_table([("Democrat", "extreme"), ("Democrat", "not"), ("Democrat", "moderate")])
        result = frequencies.normalized_frequencies(table, PARTY, DIFFICULTY)
        assert result.get_column(DIFFICULTY).cast(pl.String).to_list() == ["not", "moderate", "extreme"]


class TestCompleteFrequencies:
    def test_zero_rows_for_every_level(self):
        table = make_table([("Democrat", "little"), ("Democrat", "very"), ("Republican", "not")])
        result = frequencies.normalized_frequencies(table, PARTY, DIFFICULTY, complete=True)

        assert result.height == 2 * len(DifficultyLevel)
        zeros = result.filter(pl.col("count") == 0)
        assert zeros.height == 10 - 3
        assert zeros.get_column("freq").to_list() == [0.0] * 7

    def test_still_sums_to_one(self):
        table = make_table([("Democrat", "little"), ("Democrat", "very"), ("Republican", "not")])
        result = frequencies.normalized_frequencies(table, PARTY, DIFFICULTY, complete=True)
        assert _freq_by_group(result) == pytest.approx({"Democrat": 1.0, "Republican": 1.0})

    def test_unordered_measure_raises(self):
        table = make_table([("Democrat", "little")])
        with pytest.raises(UnorderedComparisonError):
            frequencies.normalized_frequencies(table, DIFFICULTY, PARTY, complete=True)


class TestFilterByThreshold:
    def _table(self) -> pl.DataFrame:
        return make_table(
            [
                ("Democrat", "not"),
                ("Democrat", "little"),
                ("Republican", "moderate"),
                ("Republican", "extreme"),
                ("Republican", None),
            ]
        )

    def test_strictly_greater(self):
        result = frequencies.filter_by_threshold(self._table(), DIFFICULTY, "little")
        assert result.get_column(DIFFICULTY).cast(pl.String).to_list() == ["moderate", "extreme"]

    def test_accepts_level_member(self):
        result = frequencies.filter_by_threshold(self._table(), DIFFICULTY, DifficultyLevel.NOT)
        assert result.height == 3

    def test_no_floor_returns_present_rows(self):
        table = self._table()
        result = frequencies.filter_by_threshold(table, DIFFICULTY, None)
        assert_frame_equal(result, frequencies.drop_missing(table, DIFFICULTY))

    def test_lowest_level_drops_only_that_level(self):
        table = make_table([("Democrat", "little"), ("Democrat", "very")])
        result = frequencies.filter_by_threshold(table, DIFFICULTY, "not")
        assert_frame_equal(result, table)

    def test_max_level_returns_empty(self):
        result = frequencies.filter_by_threshold(self._table(), DIFFICULTY, "extreme")
        assert result.is_empty()
        assert result.schema == self._table().schema

    def test_unordered_column_raises(self):
        with pytest.raises(UnorderedComparisonError):
            frequencies.filter_by_threshold(self._table(), PARTY, "Democrat")

    def test_plain_string_column_raises(self):
        table = self._table().with_columns(pl.col(DIFFICULTY).cast(pl.String))
        with pytest.raises(UnorderedComparisonError):
            frequencies.filter_by_threshold(table, DIFFICULTY, "little")

    def test_unknown_level(self):
        with pytest.raises(UnknownLevelError):
            frequencies.filter_by_threshold(self._table(), DIFFICULTY, "impossible")


class TestOrdered:
    def test_is_ordered(self):
        table = make_table([("Democrat", "little")])
        assert frequencies.is_ordered(table, DIFFICULTY)
        assert not frequencies.is_ordered(table, PARTY)

    def test_require_ordered_returns_labels(self):
        table = make_table([("Democrat", "little")])
        assert frequencies.require_ordered(table, DIFFICULTY) == DifficultyLevel.labels()


class TestTabulate:
    def test_counts_with_missing_last(self):
        table = make_table([("Democrat", "very"), ("Democrat", None), ("Republican", "not"), ("Republican", "very")])
        result = frequencies.tabulate(table, DIFFICULTY)
        assert result.select(pl.col(DIFFICULTY).cast(pl.String), "count").rows() == [
            ("not", 1),
            ("very", 2),
            (None, 1),
        ]

    def test_counts_sum_to_height(self):
        table = make_table([("Democrat", "very"), ("Democrat", None), ("Republican", "not")])
        assert frequencies.tabulate(table, PARTY).get_column("count").sum() == table.height

    def test_cross_tabulation(self):
        table = make_table([("Democrat", "very"), ("Democrat", "very"), ("Republican", "very")])
        result = frequencies.tabulate(table, DIFFICULTY, by=PARTY)
        assert result.select(pl.col(DIFFICULTY).cast(pl.String), pl.col(PARTY).cast(pl.String), "count").rows() == [
            ("very", "Democrat", 2),
            ("very", "Republican", 1),
        ]
