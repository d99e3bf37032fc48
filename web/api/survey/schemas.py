"""Survey API response schemas."""

from pydantic import BaseModel, Field


class FrequencyItem(BaseModel):
    """Share of a party at one difficulty level."""

    party: str
    difficulty_level: str
    count: int = Field(ge=0)
    freq: float = Field(ge=0.0, le=1.0)


class FrequencyTableResponse(BaseModel):
    """Party-normalized difficulty table."""

    floor_level: str | None
    complete: bool
    items: list[FrequencyItem]
    total: int


class TabulationItem(BaseModel):
    """Respondent count for one level."""

    level: str | None
    by: str | None = None
    count: int = Field(ge=0)


class TabulationResponse(BaseModel):
    """Tabulation of one column, optionally crossed with another."""

    column: str
    by: str | None
    items: list[TabulationItem]
    total: int
