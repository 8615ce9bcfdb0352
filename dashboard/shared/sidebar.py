"""Shared sidebar rendering for standings chart controls."""

from __future__ import annotations

from dataclasses import dataclass

import streamlit as st

from jolpica_f1 import StandingsType

from .charts import ChartScale
from .constants import ENTITY_TYPE_LABELS


@dataclass(frozen=True)
class StandingsSelection:
    """Result of the sidebar controls."""

    season: int
    kind: StandingsType
    scale: ChartScale
    log_scale: bool


def render_standings_sidebar(seasons: tuple[int, ...]) -> StandingsSelection:
    """Render season / championship / scale controls in the sidebar."""
    selected_season = st.sidebar.selectbox("Season", list(seasons))

    kind_value = st.sidebar.radio(
        "Championship",
        [k.value for k in StandingsType],
        format_func=lambda v: ENTITY_TYPE_LABELS.get(v, v),
        horizontal=True,
    )

    scale_value = st.sidebar.radio(
        "Scale",
        [s.value for s in ChartScale],
        format_func=str.capitalize,
        horizontal=True,
    )
    scale = ChartScale(scale_value)

    # Log axis only applies to points
    log_scale = False
    if scale is ChartScale.POINTS:
        log_scale = st.sidebar.checkbox("Logarithmic scale", value=False)

    return StandingsSelection(
        season=int(selected_season),
        kind=StandingsType(kind_value),
        scale=scale,
        log_scale=log_scale,
    )
