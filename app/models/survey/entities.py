"""Survey domain entities - computed tables as rows."""

from dataclasses import dataclass

from app.models.common import BaseEntity


@dataclass
class FrequencyRow(BaseEntity):
    """Share of a party's respondents at one difficulty level."""

    party: str
    difficulty_level: str
    count: int
    freq: float


@dataclass
class TabulationRow(BaseEntity):
    """Respondent count for one level (None = missing)."""

    level: str | None
    count: int
    by: str | None = None
