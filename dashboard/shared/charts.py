"""Plotly figure builders for standings progression charts (no Streamlit dependency)."""

from __future__ import annotations

from enum import Enum

import plotly.graph_objects as go

from .constants import GRID_COLOR, PLOTLY_LAYOUT_DEFAULTS, SERIES_COLORS
from .formatters import format_points, format_rank, format_wins
from .services.series_builder import DataPoint, SeasonStandings, Series


class ChartScale(str, Enum):
    """Y axis of the standings chart."""

    RANK = "rank"
    POINTS = "points"


def series_color(index: int) -> str:
    return SERIES_COLORS[index % len(SERIES_COLORS)]


def _hover_point(name: str, point: DataPoint) -> str:
    if point.is_gap:
        return f"{name}<br>{point.event_name}: no standings"
    return (
        f"{name}<br>{format_rank(point.rank)} | "
        f"{format_points(point.points)} pts | {format_wins(point.wins)} wins"
    )


def _hover_text(series: Series) -> list[str]:
    return [_hover_point(series.display_name, p) for p in series.points]


def _plottable_points(point: DataPoint, log_scale: bool) -> float | None:
    # Zero cannot be placed on a log axis
    if point.points is None or (log_scale and point.points <= 0):
        return None
    return point.points


def _last_value(xs: list[int], ys: list[float | int | None]) -> tuple[int, float] | None:
    for x, y in zip(reversed(xs), reversed(ys)):
        if y is not None:
            return x, y
    return None


def _base_figure(standings: SeasonStandings) -> go.Figure:
    fig = go.Figure()
    fig.update_layout(
        **PLOTLY_LAYOUT_DEFAULTS,
        hovermode="closest",
        showlegend=False,
        height=max(420, 28 * len(standings.series) + 120),
    )
    fig.update_xaxes(
        tickmode="array",
        tickvals=[race["round"] for race in standings.races],
        ticktext=[race["name"].replace(" Grand Prix", " GP") for race in standings.races],
        tickangle=-45,
        gridcolor=GRID_COLOR,
    )
    fig.update_yaxes(gridcolor=GRID_COLOR)
    return fig


def _add_series_trace(
    fig: go.Figure,
    series: Series,
    ys: list[float | int | None],
    color: str,
    width: int,
) -> None:
    xs = [p.event_round for p in series.points]
    fig.add_trace(go.Scatter(
        x=xs,
        y=ys,
        mode="lines+markers",
        name=series.display_name,
        line=dict(color=color, width=width),
        marker=dict(size=7, color=color),
        connectgaps=False,
        text=_hover_text(series),
        hovertemplate="%{text}<extra></extra>",
    ))
    last = _last_value(xs, ys)
    if last is not None:
        fig.add_annotation(
            x=last[0], y=last[1], text=series.display_name,
            showarrow=False, xanchor="left", xshift=8,
            font=dict(color=color, size=11),
        )


def build_rank_figure(standings: SeasonStandings) -> go.Figure:
    """Bump chart: championship position per round, P1 at the top."""
    fig = _base_figure(standings)
    for i, series in enumerate(standings.series):
        _add_series_trace(fig, series, [p.rank for p in series.points], series_color(i), 3)
    fig.update_yaxes(autorange="reversed", dtick=1, title_text="Position")
    return fig


def build_points_figure(standings: SeasonStandings, log_scale: bool = False) -> go.Figure:
    """Cumulative points per round, optionally on a logarithmic axis."""
    fig = _base_figure(standings)
    for i, series in enumerate(standings.series):
        ys = [_plottable_points(p, log_scale) for p in series.points]
        _add_series_trace(fig, series, ys, series_color(i), 2)
    fig.update_yaxes(
        type="log" if log_scale else "linear",
        title_text="Points (log)" if log_scale else "Points",
    )
    return fig


def build_standings_figure(
    standings: SeasonStandings, scale: ChartScale, log_scale: bool = False,
) -> go.Figure:
    if ChartScale(scale) is ChartScale.RANK:
        return build_rank_figure(standings)
    return build_points_figure(standings, log_scale=log_scale)
