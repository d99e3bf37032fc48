"""Survey domain models - levels, table layout, and computed entities."""

from app.models.survey.entities import FrequencyRow, TabulationRow
from app.models.survey.levels import DifficultyLevel, Party
from app.models.survey.respondent import (
    DIFFICULTY,
    PARTY,
    REASON,
    REQUIRED_COLUMNS,
    RESPONDENT_SCHEMA,
)

__all__ = [
    "DIFFICULTY",
    "PARTY",
    "REASON",
    "REQUIRED_COLUMNS",
    "RESPONDENT_SCHEMA",
    "DifficultyLevel",
    "Party",
    "FrequencyRow",
    "TabulationRow",
]
