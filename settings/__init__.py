"""Application settings."""

import os
from pathlib import Path

# Data
DATA_PATH = os.getenv("SURVEY_DATA_PATH", "data/voters.parquet")
DUCKDB_TABLE = os.getenv("SURVEY_DUCKDB_TABLE", "respondent")

# Columns matching this pattern are questionnaire items not used by the charts
IRRELEVANT_COLUMN_PATTERN = os.getenv("SURVEY_IRRELEVANT_PATTERN", r"^Q\d+")

# Logging
LOG_DIR = Path(os.getenv("SURVEY_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("SURVEY_LOG_LEVEL", "INFO")
LOG_FILE_LEVEL = os.getenv("SURVEY_LOG_FILE_LEVEL", "DEBUG")
LOG_FILE_NAME = "survey_{time:YYYY-MM-DD}.log"
LOG_RETENTION = os.getenv("SURVEY_LOG_RETENTION", "7 days")
