"""Base entity class for computed table rows."""

from dataclasses import asdict, dataclass, fields
from typing import Any

import polars as pl


@dataclass
class BaseEntity:
    """A row of a computed table."""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def columns(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def frame(cls, rows: list["BaseEntity"]) -> pl.DataFrame:
        """Rows back as a table, one column per field (empty rows keep the columns)."""
        return pl.DataFrame([r.to_dict() for r in rows], schema=cls.columns())
