"""Survey repositories."""

from app.repositories.survey.respondent import SurveyRepository, clean_respondents, read_source

__all__ = [
    "SurveyRepository",
    "clean_respondents",
    "read_source",
]
