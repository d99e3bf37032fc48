"""Shared survey fixtures."""

import polars as pl
import pytest

from app.models.survey import DIFFICULTY, PARTY, RESPONDENT_SCHEMA

SURVEY_CSV = """\
Q1,Q2_1,party,voted_difficulty_level,presumed_reason,age
1,2,Democrat,little,NA,34
1,3,Democrat,little,NA,51
2,1,Democrat,moderate,NA,29
1,1,Republican,little,NA,62
2,2,Republican,not,NA,45
1,2,NA,very,NA,38
2,1,Democrat,NA,Lines too long,23
1,1,Republican,NA,Could not get off work,70
"""


@pytest.fixture
def survey_csv(tmp_path):
    path = tmp_path / "voters.csv"
    path.write_text(SURVEY_CSV)
    return path


def make_table(rows: list[tuple]) -> pl.DataFrame:
    """(party, difficulty) rows typed like a cleaned respondent table."""
    return pl.DataFrame(
        rows,
        schema={PARTY: pl.String, DIFFICULTY: pl.String},
        orient="row",
    ).with_columns(
        pl.col(PARTY).cast(RESPONDENT_SCHEMA[PARTY]),
        pl.col(DIFFICULTY).cast(RESPONDENT_SCHEMA[DIFFICULTY]),
    )
