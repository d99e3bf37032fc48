"""Domain errors for survey loading and categorical comparisons."""


class SurveyError(Exception):
    """Base class for survey errors."""

    def __init__(self, message: str = "Survey error"):
        self.message = message
        super().__init__(self.message)


class DataLoadError(SurveyError):
    """Source unreadable, malformed, or missing required columns."""

    def __init__(self, source: str, reason: str):
        self.source = str(source)
        self.reason = reason
        super().__init__(f"Cannot load {self.source}: {reason}")


class UnorderedComparisonError(SurveyError, TypeError):
    """Ordering applied to a categorical without a defined total order."""


class UnknownLevelError(SurveyError, ValueError):
    """Level label not present in the column's ordering."""
