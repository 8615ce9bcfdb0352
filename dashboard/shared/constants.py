"""Shared constants for the standings dashboard."""

from __future__ import annotations

PLOTLY_LAYOUT_DEFAULTS = dict(
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    font_color="#F0F0F0",
    margin=dict(l=40, r=20, t=40, b=40),
)

GRID_COLOR = "#334155"

# Line colors assigned by series order; cycles when there are more entities
SERIES_COLORS: list[str] = [
    "#E10600",  # red
    "#00D2BE",  # teal
    "#FF8700",  # orange
    "#0600EF",  # blue
    "#BF00FF",  # purple
    "#FFD700",  # gold
    "#39B54A",  # green
    "#FF69B4",  # pink
    "#9B9B9B",  # grey
    "#00A3FF",  # sky
    "#8B4513",  # brown
    "#F0F0F0",  # white
]

ENTITY_TYPE_LABELS = {"driver": "Drivers", "constructor": "Constructors"}
