"""Repositories package - data access layer for survey sources."""

from app.repositories.base import BaseRepository
from app.repositories.db import read_table
from app.repositories.survey import SurveyRepository

__all__ = [
    # DB
    "read_table",
    # Base
    "BaseRepository",
    # Survey
    "SurveyRepository",
]
