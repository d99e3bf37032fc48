"""Bar charts over survey tables (plotly figures, rendering left to the caller)."""

import math
from dataclasses import dataclass, field, replace

import plotly.graph_objects as go
import polars as pl
from plotly.subplots import make_subplots

from app.services.survey.frequencies import tabulate

COLORS = {
    "Democrat": "#2563EB",
    "Republican": "#DC2626",
}

MISSING_LABEL = "NA"
BAR_MODES = ("stack", "group")


def color(name: str, palette: dict[str, str] | None = None) -> str:
    return (palette or COLORS).get(name, "#6B7280")


@dataclass
class ChartStyle:
    """Labels, colors and axis limits for a bar chart."""

    title: str | None = None
    x_label: str | None = None
    y_label: str | None = None
    colors: dict[str, str] = field(default_factory=lambda: dict(COLORS))
    y_range: tuple[float, float] | None = None
    percent: bool = False
    # x labels lowest first, for columns that lost their pl.Enum order
    category_order: list[str] | None = None


def _labels(values: pl.Series) -> list[str]:
    return [MISSING_LABEL if v is None else str(v) for v in values.to_list()]


def _category_order(counts: pl.DataFrame, x: str, style: ChartStyle) -> list[str]:
    present = _labels(counts.get_column(x).unique(maintain_order=True))
    if style.category_order is not None:
        known = [c for c in style.category_order if c in present]
        return known + [c for c in present if c not in known]
    if isinstance(counts.schema[x], pl.Enum):
        return _labels(counts.get_column(x).unique().sort(nulls_last=True))
    return present


def bar_chart(
    counts: pl.DataFrame,
    x: str,
    color_by: str,
    y: str = "count",
    mode: str = "stack",
    style: ChartStyle | None = None,
) -> go.Figure:
    """One bar trace per color_by level; x levels in rank order when known."""
    if mode not in BAR_MODES:
        raise ValueError(f"Unknown bar mode: {mode}. Must be one of {BAR_MODES}")
    style = style or ChartStyle()

    fig = go.Figure()
    for key in counts.get_column(color_by).unique(maintain_order=True).to_list():
        part = counts.filter(pl.col(color_by).is_null() if key is None else pl.col(color_by) == key)
        name = MISSING_LABEL if key is None else str(key)
        fig.add_trace(
            go.Bar(
                x=_labels(part.get_column(x)),
                y=part.get_column(y).to_list(),
                name=name,
                marker_color=color(name, style.colors),
            )
        )

    fig.update_layout(
        barmode=mode,
        title=style.title,
        xaxis_title=style.x_label or x,
        yaxis_title=style.y_label or y,
        legend_title_text=color_by,
    )
    fig.update_xaxes(categoryorder="array", categoryarray=_category_order(counts, x, style))
    if style.y_range is not None:
        fig.update_yaxes(range=list(style.y_range))
    if style.percent:
        fig.update_yaxes(tickformat=".0%")
    return fig


def count_bar_chart(
    table: pl.DataFrame,
    x: str,
    color_by: str,
    mode: str = "stack",
    style: ChartStyle | None = None,
) -> go.Figure:
    """Respondent counts per x level, split by color_by."""
    return bar_chart(tabulate(table, x, by=color_by), x, color_by, mode=mode, style=style)


def percent_bar_chart(
    freq_table: pl.DataFrame,
    x: str,
    color_by: str,
    mode: str = "group",
    style: ChartStyle | None = None,
) -> go.Figure:
    """Within-group shares from a normalized frequency table."""
    style = replace(style or ChartStyle(), percent=True)
    return bar_chart(freq_table, x, color_by, y="freq", mode=mode, style=style)


def compose_panels(figures: list[go.Figure], cols: int = 2, titles: list[str] | None = None) -> go.Figure:
    """Lay figures out side by side, sharing one legend."""
    if not figures:
        raise ValueError("No figures to compose")

    rows = math.ceil(len(figures) / cols)
    out = make_subplots(rows=rows, cols=cols, subplot_titles=titles)

    seen = set()
    for i, fig in enumerate(figures):
        row, col = i // cols + 1, i % cols + 1
        for trace in fig.data:
            out.add_trace(type(trace)(trace, showlegend=trace.name not in seen), row=row, col=col)
            seen.add(trace.name)

        xaxis, yaxis = fig.layout.xaxis, fig.layout.yaxis
        out.update_xaxes(
            categoryorder=xaxis.categoryorder,
            categoryarray=xaxis.categoryarray,
            title_text=xaxis.title.text,
            row=row,
            col=col,
        )
        out.update_yaxes(
            range=yaxis.range,
            tickformat=yaxis.tickformat,
            title_text=yaxis.title.text,
            row=row,
            col=col,
        )

    out.update_layout(barmode=figures[0].layout.barmode)
    return out
