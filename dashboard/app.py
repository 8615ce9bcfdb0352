"""F1 Standings Visualizer — Streamlit + Plotly + Jolpica (Ergast) API."""

from __future__ import annotations

import asyncio
import logging

import streamlit as st

from jolpica_f1 import AsyncJolpicaClient

from shared import (
    ENTITY_TYPE_LABELS,
    F1DataError,
    ScheduleProvider,
    SeasonStandings,
    SeasonStandingsService,
    SnapshotCache,
    StandingsQueryTracker,
    StandingsResultCache,
    StandingsSource,
    build_standings_figure,
    country_to_flag_asset,
    format_points,
    format_rank,
    load_settings,
)
from shared.sidebar import StandingsSelection, render_standings_sidebar

logging.basicConfig(level=logging.INFO, format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")

# ── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="F1 Standings Visualizer",
    page_icon="\U0001f3c1",
    layout="wide",
)

settings = load_settings()


@st.cache_resource
def get_snapshot_cache(path: str) -> SnapshotCache:
    return SnapshotCache.from_file(path)


def get_query_tracker() -> StandingsQueryTracker:
    if "standings_tracker" not in st.session_state:
        st.session_state["standings_tracker"] = StandingsQueryTracker()
    return st.session_state["standings_tracker"]


def get_result_cache() -> StandingsResultCache:
    if "standings_results" not in st.session_state:
        st.session_state["standings_results"] = StandingsResultCache()
    return st.session_state["standings_results"]


async def _run_query(selection: StandingsSelection, cache: SnapshotCache) -> SeasonStandings | None:
    async with AsyncJolpicaClient(base_url=settings.api_url, timeout=settings.timeout) as client:
        service = SeasonStandingsService(
            ScheduleProvider(cache, client),
            StandingsSource(cache, client),
            tracker=get_query_tracker(),
            results=get_result_cache(),
        )
        return await service.query(selection.season, selection.kind)


try:
    cache = get_snapshot_cache(settings.cache_file)
except F1DataError as exc:
    st.warning(f"Ignoring standings cache: {exc}")
    cache = SnapshotCache()

# ── Sidebar ──────────────────────────────────────────────────────────────────

st.sidebar.title("F1 Standings")
seasons = tuple(sorted(set(settings.seasons) | set(cache.seasons()), reverse=True))
selection = render_standings_sidebar(seasons)

st.title("F1 Standings Visualizer")
st.caption("Championship battles round by round")

# ── Query ────────────────────────────────────────────────────────────────────

label = ENTITY_TYPE_LABELS[selection.kind.value]
with st.spinner(f"Loading {selection.season} {label.lower()} standings..."):
    try:
        standings = asyncio.run(_run_query(selection, cache))
    except F1DataError as exc:
        st.error(f"Error loading data: {exc}")
        st.stop()

if standings is None:
    # A newer selection superseded this run
    st.stop()

if not standings.races:
    st.info(f"No completed races yet in {selection.season}.")
    st.stop()

# ── Chart ────────────────────────────────────────────────────────────────────

st.subheader(f"{selection.season} {label} Championship")

fig = build_standings_figure(standings, selection.scale, log_scale=selection.log_scale)
st.plotly_chart(fig, use_container_width=True)

# Race flags along the x axis
st.image(
    [country_to_flag_asset(race["country"]) for race in standings.races],
    caption=[f"R{race['round']}" for race in standings.races],
    width=32,
)

# ── Latest standings table ───────────────────────────────────────────────────

st.subheader(f"After round {standings.races[-1]['round']}: {standings.races[-1]['name']}")

latest = sorted(
    standings.series,
    key=lambda s: (s.points[-1].rank is None, s.points[-1].rank or 0),
)
st.dataframe(
    [
        {
            "Pos": format_rank(s.points[-1].rank),
            label[:-1]: s.display_name,
            "Points": format_points(s.points[-1].points),
            "Wins": s.points[-1].wins,
        }
        for s in latest
    ],
    hide_index=True,
    use_container_width=True,
)

st.caption("Data provided by the Jolpica F1 API (Ergast-compatible).")
