"""Voter Survey Dashboard."""

import sys
from pathlib import Path

# Add project root to path (for streamlit which runs this file directly)
_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(_root))

import polars as pl  # noqa: E402
import streamlit as st  # noqa: E402
from loguru import logger  # noqa: E402

from app.container import container  # noqa: E402
from app.errors import DataLoadError  # noqa: E402
from app.models.survey import DIFFICULTY, PARTY, REASON, DifficultyLevel, FrequencyRow  # noqa: E402
from app.services.survey import charts, frequencies  # noqa: E402
from settings.logging import setup_logging  # noqa: E402
from web.api import survey  # noqa: E402


@st.cache_resource(show_spinner=False)
def init_app():
    """Configure logging and the container once per server process."""
    setup_logging()
    container.init()
    logger.info("Dashboard started on {}", container.survey_aggregator.source)


st.set_page_config(page_title="Voter Survey", page_icon="🗳️", layout="wide")
init_app()


@st.cache_data(ttl=3600, show_spinner=False)
def get_respondents() -> pl.DataFrame:
    """Cleaned respondent table."""
    logger.info("Loading respondents")
    return container.survey_aggregator.load_and_clean()


@st.cache_data(ttl=3600, show_spinner=False)
def get_tabulation(column: str):
    """Tabulation of a column via views."""
    return [t.model_dump() for t in survey.get_tabulation(column).items]


@st.cache_data(ttl=3600, show_spinner=False)
def get_frequencies(floor_level: str | None, complete: bool) -> pl.DataFrame:
    """Party-normalized difficulty table via views."""
    resp = survey.get_difficulty_by_party(floor_level=floor_level, complete=complete)
    return FrequencyRow.frame([FrequencyRow(**i.model_dump()) for i in resp.items])


def tables_tab(respondents: pl.DataFrame):
    """Raw tabulations."""
    st.subheader("📋 Respondents")
    cols = st.columns(3)
    cols[0].metric("Respondents", respondents.height)
    cols[1].metric("With difficulty answer", frequencies.drop_missing(respondents, DIFFICULTY).height)
    cols[2].metric("Presumed voters", frequencies.drop_missing(respondents, REASON).height)

    for column in (PARTY, DIFFICULTY, REASON):
        st.markdown(f"**{column}**")
        st.dataframe(get_tabulation(column), width="stretch")


def counts_tab(respondents: pl.DataFrame):
    """Count charts: stacked, dodged, relabeled."""
    answered = frequencies.drop_missing(respondents, DIFFICULTY)
    style = charts.ChartStyle(title="Difficulty voting", x_label="Difficulty", y_label="Respondents")

    col1, col2 = st.columns(2)
    with col1:
        st.plotly_chart(charts.count_bar_chart(answered, DIFFICULTY, PARTY, mode="stack", style=style), width="stretch")
    with col2:
        st.plotly_chart(charts.count_bar_chart(answered, DIFFICULTY, PARTY, mode="group", style=style), width="stretch")


def percent_tab(floor_level: str | None, complete: bool):
    """Within-party shares."""
    freq = get_frequencies(floor_level, complete)
    if freq.is_empty():
        st.info("No difficulty answers above the selected floor.")
        return

    style = charts.ChartStyle(
        title="Share of party respondents",
        x_label="Difficulty",
        y_label="Share",
        y_range=(0, 1),
        category_order=DifficultyLevel.labels(),
    )
    st.plotly_chart(charts.percent_bar_chart(freq, "difficulty_level", PARTY, style=style), width="stretch")
    st.dataframe(freq, width="stretch")


def panels_tab(respondents: pl.DataFrame):
    """Difficulty above 'not' next to presumed-voter reasons."""
    difficult = frequencies.filter_by_threshold(respondents, DIFFICULTY, DifficultyLevel.NOT)
    presumed = frequencies.drop_missing(respondents, REASON)

    fig = charts.compose_panels(
        [
            charts.count_bar_chart(difficult, DIFFICULTY, PARTY, mode="group"),
            charts.count_bar_chart(presumed, REASON, PARTY, mode="group"),
        ],
        cols=2,
        titles=["Some difficulty voting", "Presumed voters: reason"],
    )
    st.plotly_chart(fig, width="stretch")


def main():
    st.title("🗳️ Voter Survey")
    st.markdown("*How difficult was voting, by party*")

    floor = st.sidebar.selectbox("Difficulty above", ["(all)"] + DifficultyLevel.labels(), index=0)
    floor_level = None if floor == "(all)" else floor
    complete = st.sidebar.checkbox("Show empty levels", value=False)

    try:
        respondents = get_respondents()
    except DataLoadError as e:
        st.error(e.message)
        return

    tab1, tab2, tab3, tab4 = st.tabs(["📋 Tables", "📊 Counts", "📈 Percent", "🧩 Panels"])

    with tab1:
        tables_tab(respondents)

    with tab2:
        counts_tab(respondents)

    with tab3:
        percent_tab(floor_level, complete)

    with tab4:
        panels_tab(respondents)

    st.sidebar.markdown("---")
    st.sidebar.markdown(f"**Data Source:** `{container.survey_aggregator.source}`")


if __name__ == "__main__":
    main()
