"""Categorical answer levels.

Difficulty levels carry an explicit rank, so ordering never falls back to
string comparison. Party labels are a closed set with equality only.
"""

from enum import Enum

from app.errors import UnknownLevelError, UnorderedComparisonError


class Party(Enum):
    """Self-reported party. Unordered."""

    DEMOCRAT = "Democrat"
    REPUBLICAN = "Republican"

    @classmethod
    def labels(cls) -> list[str]:
        return [m.value for m in cls]

    def _no_order(self, other):
        raise UnorderedComparisonError(f"Party has no order: cannot compare {self.value!r} with {other!r}")

    __lt__ = __le__ = __gt__ = __ge__ = _no_order


class DifficultyLevel(Enum):
    """How difficult voting was, lowest first."""

    NOT = "not"
    LITTLE = "little"
    MODERATE = "moderate"
    VERY = "very"
    EXTREME = "extreme"

    @classmethod
    def labels(cls) -> list[str]:
        """Labels in rank order."""
        return [m.value for m in cls]

    @classmethod
    def parse(cls, label: "str | DifficultyLevel") -> "DifficultyLevel":
        """Level for a label, or the level itself."""
        if isinstance(label, cls):
            return label
        try:
            return cls(label)
        except ValueError:
            raise UnknownLevelError(f"Unknown difficulty level: {label!r}. Expected one of {cls.labels()}") from None

    @property
    def rank(self) -> int:
        return list(type(self)).index(self)

    def _other_rank(self, other) -> int:
        if not isinstance(other, DifficultyLevel):
            raise UnorderedComparisonError(f"Cannot order {self.value!r} against {other!r}: not a DifficultyLevel")
        return other.rank

    def __lt__(self, other):
        return self.rank < self._other_rank(other)

    def __le__(self, other):
        return self.rank <= self._other_rank(other)

    def __gt__(self, other):
        return self.rank > self._other_rank(other)

    def __ge__(self, other):
        return self.rank >= self._other_rank(other)
