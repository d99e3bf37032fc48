"""Pure table transforms - no I/O, easily testable."""

from enum import Enum

import polars as pl

from app.errors import UnknownLevelError, UnorderedComparisonError


def is_ordered(table: pl.DataFrame, column: str) -> bool:
    """Whether a column carries a total order (pl.Enum)."""
    return isinstance(table.schema[column], pl.Enum)


def require_ordered(table: pl.DataFrame, column: str) -> list[str]:
    """Ordered labels of a column, lowest first."""
    dtype = table.schema[column]
    if not isinstance(dtype, pl.Enum):
        raise UnorderedComparisonError(f"Column {column!r} is {dtype}, not an ordered categorical")
    return dtype.categories.to_list()


def _sort_key(table: pl.DataFrame, column: str) -> pl.Expr:
    # Ordered columns sort by rank, everything else by label
    if is_ordered(table, column):
        return pl.col(column)
    return pl.col(column).cast(pl.String)


def drop_missing(table: pl.DataFrame, column: str) -> pl.DataFrame:
    """Rows where column is not missing."""
    return table.filter(pl.col(column).is_not_null())


def filter_by_threshold(table: pl.DataFrame, measure_col: str, floor_level) -> pl.DataFrame:
    """Rows whose measure ranks strictly above floor_level.

    floor_level=None keeps every row with a measure. Rows with a missing
    measure never pass.
    """
    levels = require_ordered(table, measure_col)
    present = drop_missing(table, measure_col)
    if floor_level is None:
        return present

    label = floor_level.value if isinstance(floor_level, Enum) else floor_level
    if label not in levels:
        raise UnknownLevelError(f"{label!r} is not a level of {measure_col!r}. Expected one of {levels}")

    return present.filter(pl.col(measure_col).to_physical() > levels.index(label))


def normalized_frequencies(
    table: pl.DataFrame,
    group_col: str,
    measure_col: str,
    complete: bool = False,
) -> pl.DataFrame:
    """Count per (group, measure) pair and share of the group total.

    Only observed pairs are returned unless complete=True, which adds a zero
    row for every declared level the group never reached.
    """
    present = table.filter(pl.col(group_col).is_not_null() & pl.col(measure_col).is_not_null())
    counts = present.group_by(group_col, measure_col).agg(pl.len().cast(pl.Int64).alias("count"))

    if complete:
        levels = pl.DataFrame(
            {measure_col: require_ordered(table, measure_col)},
            schema={measure_col: table.schema[measure_col]},
        )
        grid = counts.select(group_col).unique().join(levels, how="cross")
        counts = grid.join(counts, on=[group_col, measure_col], how="left").with_columns(
            pl.col("count").fill_null(0)
        )

    return counts.with_columns(
        (pl.col("count") / pl.col("count").sum().over(group_col)).alias("freq"),
    ).sort(_sort_key(table, group_col), _sort_key(table, measure_col))


def tabulate(table: pl.DataFrame, column: str, by: str | None = None) -> pl.DataFrame:
    """Respondents per level, missing counted as its own level (last)."""
    keys = [column] if by is None else [column, by]
    counts = table.group_by(keys).agg(pl.len().cast(pl.Int64).alias("count"))
    return counts.sort([_sort_key(table, k) for k in keys], nulls_last=True)
