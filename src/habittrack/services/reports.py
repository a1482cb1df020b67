"""Chart figures for the dashboard and stats views.

Figures are built without pyplot and never select a backend; views pick
the canvas they draw on.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from matplotlib.figure import Figure

from ..models.habit import Habit
from .habits import chart_rows

_FALLBACK_COLOR = "#9CA3AF"


def _placeholder(message: str, *, figsize: tuple[float, float] = (6, 4)) -> Figure:
    fig = Figure(figsize=figsize)
    ax = fig.add_subplot()
    ax.text(0.5, 0.5, message, ha="center", va="center", fontsize=12, color="#999")
    ax.axis("off")
    return fig


def build_weekly_chart(rows: Sequence[dict[str, object]], habits: Iterable[Habit]) -> Figure:
    """Grouped bars of each habit's daily value, from ``weekly_series`` rows."""

    series = [h for h in habits if rows and h.name in rows[0]]
    if not rows or not series:
        return _placeholder("No habits to chart yet")

    days = [str(row["day"]) for row in rows]
    width = 0.8 / len(series)
    fig = Figure(figsize=(8, 4.5), layout="tight")
    ax = fig.add_subplot()
    for offset, habit in enumerate(series):
        xs = [i + offset * width for i in range(len(days))]
        values = [float(row[habit.name]) for row in rows]  # type: ignore[arg-type]
        ax.bar(xs, values, width=width, label=habit.name, color=habit.color or _FALLBACK_COLOR)

    ax.set_xticks([i + width * (len(series) - 1) / 2 for i in range(len(days))])
    ax.set_xticklabels(days)
    ax.set_title("This Week", fontsize=13, fontweight="bold")
    ax.legend(loc="upper left", frameon=False)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    return fig


def build_completion_chart(habits: Iterable[Habit]) -> Figure:
    """Donut of today's value per habit; labels under 5% of the total are hidden."""

    rows = [r for r in chart_rows(habits) if float(r["value"]) > 0]  # type: ignore[arg-type]
    if not rows:
        return _placeholder("No progress recorded today")

    sizes = [float(r["value"]) for r in rows]  # type: ignore[arg-type]
    labels = [str(r["name"]) for r in rows]
    colors = [str(r["color"]) or _FALLBACK_COLOR for r in rows]

    fig = Figure(figsize=(6, 6))
    ax = fig.add_subplot()
    ax.pie(
        sizes,
        labels=labels,
        autopct=lambda pct: f"{pct:.0f}%" if pct > 5 else "",
        wedgeprops=dict(width=0.45, edgecolor="white", linewidth=1.5),
        startangle=90,
        colors=colors,
        pctdistance=0.78,
    )
    ax.set_title("Time Distribution", fontsize=13, fontweight="bold")
    ax.axis("equal")
    return fig


def build_streak_chart(habits: Iterable[Habit]) -> Figure:
    """Horizontal bars of each habit's current streak."""

    rows = chart_rows(habits)
    if not rows:
        return _placeholder("No habits to chart yet")

    names = [str(r["name"]) for r in rows]
    streaks = [int(r["current_streak"]) for r in rows]  # type: ignore[arg-type]
    colors = [str(r["color"]) or _FALLBACK_COLOR for r in rows]

    fig = Figure(figsize=(7, 0.6 * len(rows) + 1.5), layout="tight")
    ax = fig.add_subplot()
    ax.barh(names, streaks, color=colors)
    ax.invert_yaxis()
    ax.set_xlabel("Current streak (days)")
    ax.set_title("Current Streaks", fontsize=13, fontweight="bold")
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    return fig


__all__ = ["build_completion_chart", "build_streak_chart", "build_weekly_chart"]
