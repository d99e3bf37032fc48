"""Survey aggregation service."""

import polars as pl
from loguru import logger

from app.models.survey import DIFFICULTY, PARTY, FrequencyRow, TabulationRow
from app.repositories.survey import SurveyRepository
from app.services.survey import frequencies


class SurveyAggregator:
    """Cleaned respondent table and the tables derived from it."""

    def __init__(self, repo: SurveyRepository):
        self._repo = repo
        logger.debug("SurveyAggregator initialized")

    @property
    def source(self):
        return self._repo.source

    def load_and_clean(self, source=None) -> pl.DataFrame:
        """Cleaned respondent table. Raises DataLoadError."""
        return self._repo.load_and_clean(source)

    def normalized_frequencies(
        self,
        table: pl.DataFrame,
        group_col: str = PARTY,
        measure_col: str = DIFFICULTY,
        complete: bool = False,
    ) -> pl.DataFrame:
        """Within-group shares of each measure level."""
        result = frequencies.normalized_frequencies(table, group_col, measure_col, complete=complete)
        logger.info(
            "Computed {} frequency rows for {} {} groups",
            result.height,
            result.get_column(group_col).n_unique(),
            group_col,
        )
        return result

    def filter_by_threshold(self, table: pl.DataFrame, measure_col: str = DIFFICULTY, floor_level=None) -> pl.DataFrame:
        """Rows ranked strictly above floor_level."""
        result = frequencies.filter_by_threshold(table, measure_col, floor_level)
        logger.debug("Threshold {} on {}: {} of {} rows kept", floor_level, measure_col, result.height, table.height)
        return result

    def tabulate(self, column: str, by: str | None = None, source=None) -> list[TabulationRow]:
        """Respondent counts per level of a column."""
        counts = frequencies.tabulate(self.load_and_clean(source), column, by=by)
        return [
            TabulationRow(
                level=_label(r[column]),
                count=r["count"],
                by=_label(r[by]) if by else None,
            )
            for r in counts.iter_rows(named=True)
        ]

    def difficulty_by_party(self, floor_level=None, complete: bool = False, source=None) -> list[FrequencyRow]:
        """Party-normalized voting difficulty, optionally above a floor level."""
        table = self.load_and_clean(source)
        if floor_level is not None:
            table = self.filter_by_threshold(table, DIFFICULTY, floor_level)

        result = self.normalized_frequencies(table, PARTY, DIFFICULTY, complete=complete)
        if floor_level is not None and complete:
            # zero rows at or below the floor carry no share
            result = frequencies.filter_by_threshold(result, DIFFICULTY, floor_level)

        if result.is_empty():
            logger.warning("No difficulty answers above {}", floor_level)
            return []

        return [
            FrequencyRow(
                party=str(r[PARTY]),
                difficulty_level=str(r[DIFFICULTY]),
                count=r["count"],
                freq=r["freq"],
            )
            for r in result.iter_rows(named=True)
        ]


def _label(value) -> str | None:
    return None if value is None else str(value)
