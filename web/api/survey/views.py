"""Survey API views - thin layer over services."""

from app.container import container
from web.api.errors import validate_column, validate_level

from .schemas import (
    FrequencyItem,
    FrequencyTableResponse,
    TabulationItem,
    TabulationResponse,
)


def get_difficulty_by_party(floor_level: str | None = None, complete: bool = False) -> FrequencyTableResponse:
    """Get voting difficulty shares per party."""
    if floor_level is not None:
        validate_level(floor_level)
    data = container.survey_aggregator.difficulty_by_party(floor_level=floor_level, complete=complete)

    items = [
        FrequencyItem(
            party=r.party,
            difficulty_level=r.difficulty_level,
            count=r.count,
            freq=r.freq,
        )
        for r in data
    ]

    return FrequencyTableResponse(
        floor_level=floor_level,
        complete=complete,
        items=items,
        total=sum(r.count for r in data),
    )


def get_tabulation(column: str, by: str | None = None) -> TabulationResponse:
    """Get respondent counts per level of a column."""
    columns = container.survey_aggregator.load_and_clean().columns
    validate_column(column, columns)
    if by is not None:
        validate_column(by, columns)

    data = container.survey_aggregator.tabulate(column, by=by)
    items = [TabulationItem(level=r.level, by=r.by, count=r.count) for r in data]

    return TabulationResponse(column=column, by=by, items=items, total=sum(r.count for r in data))
