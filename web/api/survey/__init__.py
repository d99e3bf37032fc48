"""Survey API."""

from web.api.survey.views import (
    get_difficulty_by_party,
    get_tabulation,
)

__all__ = [
    "get_difficulty_by_party",
    "get_tabulation",
]
