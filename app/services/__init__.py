"""Services package - service class exports."""

from app.services.survey.aggregator import SurveyAggregator

__all__ = [
    "SurveyAggregator",
]
