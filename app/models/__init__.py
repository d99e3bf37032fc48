"""Models package - entities and table layout for all domains."""

from app.models.common import BaseEntity
from app.models.survey import (
    DIFFICULTY,
    PARTY,
    REASON,
    REQUIRED_COLUMNS,
    RESPONDENT_SCHEMA,
    DifficultyLevel,
    FrequencyRow,
    Party,
    TabulationRow,
)

__all__ = [
    # Common
    "BaseEntity",
    # Survey
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
