"""Formatting helpers for the standings dashboard."""

from __future__ import annotations


def format_points(points: float | None) -> str:
    """Format a points tally, dropping a trailing .0; '\u2014' if None."""
    if points is None:
        return "\u2014"
    if float(points).is_integer():
        return f"{int(points)}"
    return f"{points:g}"


def format_rank(rank: int | None) -> str:
    """Format a championship position as P1, P2, ... or '\u2014' if None."""
    if rank is None:
        return "\u2014"
    return f"P{rank}"


def format_wins(wins: int | None) -> str:
    """Format a win count or '\u2014' if None."""
    if wins is None:
        return "\u2014"
    return str(wins)
