"""Respondent repository - load and clean the persisted survey table."""

import re
from pathlib import Path

import duckdb
import polars as pl
from loguru import logger

from app.errors import DataLoadError
from app.models.survey import (
    DIFFICULTY,
    PARTY,
    REQUIRED_COLUMNS,
    RESPONDENT_SCHEMA,
    DifficultyLevel,
    Party,
)
from app.repositories.base import BaseRepository
from app.repositories.db import read_table
from settings import DATA_PATH, DUCKDB_TABLE, IRRELEVANT_COLUMN_PATTERN

CSV_NULL_VALUES = ["NA", ""]
DUCKDB_SUFFIXES = (".duckdb", ".db")

# Closed label sets checked on load; other categorical columns accept any value
CLOSED_LABELS = {
    PARTY: Party.labels(),
    DIFFICULTY: DifficultyLevel.labels(),
}


def read_source(path: Path) -> pl.DataFrame:
    """Read a parquet, csv or DuckDB file as-is."""
    if not path.exists():
        raise DataLoadError(path, "file not found")

    suffix = path.suffix.lower()
    try:
        if suffix == ".parquet":
            return pl.read_parquet(path)
        if suffix == ".csv":
            return pl.read_csv(path, null_values=CSV_NULL_VALUES, infer_schema_length=None)
        if suffix in DUCKDB_SUFFIXES:
            return read_table(path, DUCKDB_TABLE)
    except (OSError, pl.exceptions.PolarsError, duckdb.Error) as e:
        raise DataLoadError(path, str(e)) from e

    raise DataLoadError(path, f"unsupported format {suffix!r}")


def clean_respondents(df: pl.DataFrame, source: str, pattern: str = IRRELEVANT_COLUMN_PATTERN) -> pl.DataFrame:
    """Drop questionnaire columns and rows without a party, then type the categorical columns."""
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise DataLoadError(source, f"missing required columns: {', '.join(missing)}")

    regex = re.compile(pattern)
    irrelevant = [c for c in df.columns if regex.search(c) and c not in REQUIRED_COLUMNS]
    df = df.drop(irrelevant).with_columns(pl.col(c).cast(pl.String) for c in RESPONDENT_SCHEMA)

    for column, labels in CLOSED_LABELS.items():
        unknown = set(df.get_column(column).drop_nulls().unique().to_list()) - set(labels)
        if unknown:
            raise DataLoadError(source, f"unexpected {column} values: {sorted(unknown)}")

    before = df.height
    df = df.filter(pl.col(PARTY).is_not_null()).with_columns(
        pl.col(c).cast(dtype) for c, dtype in RESPONDENT_SCHEMA.items()
    )
    logger.info(
        "Cleaned {}: dropped {} columns, {} rows without party, {} rows left",
        source,
        len(irrelevant),
        before - df.height,
        df.height,
    )
    return df


class SurveyRepository(BaseRepository):
    """Repository for the cleaned respondent table."""

    def __init__(self, source: str | Path | None = None, irrelevant_pattern: str | None = None):
        super().__init__()
        self._source = Path(source or DATA_PATH)
        self._pattern = irrelevant_pattern or IRRELEVANT_COLUMN_PATTERN

    @property
    def source(self) -> Path:
        return self._source

    def load_and_clean(self, source: str | Path | None = None) -> pl.DataFrame:
        """Cleaned respondent table for a source (default: configured source)."""
        path = Path(source) if source is not None else self._source

        def fetch():
            raw = read_source(path)
            logger.debug("Read {}: {} rows, {} columns", path, raw.height, raw.width)
            try:
                return clean_respondents(raw, str(path), self._pattern)
            except pl.exceptions.PolarsError as e:
                raise DataLoadError(path, str(e)) from e

        return self._cached(f"respondents_{path.resolve()}", fetch)
