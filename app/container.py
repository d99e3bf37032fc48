"""Dependency Injection container - initialized at app startup."""

from app.repositories.survey import SurveyRepository
from app.services.survey.aggregator import SurveyAggregator


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self, source: str | None = None) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        # Repositories (singletons)
        self._survey_repo = SurveyRepository(source)

        # Services (with injected repos)
        self.survey_aggregator = SurveyAggregator(repo=self._survey_repo)

        self._initialized = True


# Global container instance
container = Container()
