"""API errors and validation helpers."""

from app.models.survey import DifficultyLevel


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


def validate_level(level: str) -> None:
    """Validate level is a known difficulty label."""
    if level not in DifficultyLevel.labels():
        raise ValidationError(f"Invalid difficulty level: {level}. Must be one of {DifficultyLevel.labels()}")


def validate_column(column: str, columns: list[str]) -> None:
    """Validate column exists in the loaded table."""
    if column not in columns:
        raise ValidationError(f"Unknown column: {column}. Must be one of {columns}")
