"""Survey services."""

from app.services.survey import charts, frequencies
from app.services.survey.aggregator import SurveyAggregator

__all__ = [
    "SurveyAggregator",
    "charts",
    "frequencies",
]
