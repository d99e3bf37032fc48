"""Respondent table layout."""

import polars as pl

from app.models.survey.levels import DifficultyLevel

PARTY = "party"
DIFFICULTY = "voted_difficulty_level"
REASON = "presumed_reason"

REQUIRED_COLUMNS = (PARTY, DIFFICULTY, REASON)

# pl.Enum marks a column as ordered; pl.Categorical columns have no order
RESPONDENT_SCHEMA = {
    PARTY: pl.Categorical,
    DIFFICULTY: pl.Enum(DifficultyLevel.labels()),
    REASON: pl.Categorical,
}
