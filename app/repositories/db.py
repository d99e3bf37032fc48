"""DuckDB access for survey sources stored as a database file."""

from pathlib import Path

import duckdb
import polars as pl
from loguru import logger


def read_table(path: Path, table: str) -> pl.DataFrame:
    """Read a whole table from a DuckDB file into polars."""
    conn = duckdb.connect(str(path), read_only=True)
    logger.debug("DB connected: {} (read_only=True)", path)
    try:
        return conn.execute(f'SELECT * FROM "{table}"').pl()
    finally:
        conn.close()
        logger.debug("DB connection closed")
