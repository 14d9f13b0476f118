"""Utility helpers for drawing displays onto matplotlib axes."""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt

from ..core.pipeline import Display
from .styles import LINE_COLOR, SNAPPED_COLOR


def plot_display(ax: plt.Axes, display: Display, *, title: str = "", time_label: str = "Time (s)") -> None:
    """Draw *display* on ``ax`` including its precomputed ticks."""

    ax.set_title(title)
    ax.set_xlabel(time_label)
    ax.set_ylabel(display.value_label)

    if not display.ready:
        ax.text(0.5, 0.5, display.message, ha="center", va="center", transform=ax.transAxes)
        ax.set_xticks([])
        ax.set_yticks([])
        return

    times = [p.time for p in display.points]
    values = [p.value for p in display.points]
    ax.plot(times, values, color=LINE_COLOR)

    positions = [t.position for t in display.value_ticks]
    if positions:
        ax.set_yticks(positions)
        ax.set_yticklabels([t.label for t in display.value_ticks])
    if display.value_range is not None:
        # swara ticks may sit up to 50 cents outside the data range
        lo, hi = display.value_range
        ax.set_ylim(min([lo, *positions]), max([hi, *positions]))
    if display.time_ticks:
        ax.set_xticks([t.position for t in display.time_ticks])
        ax.set_xticklabels([t.label for t in display.time_ticks])
    if display.snapped:
        ax.text(
            0.98,
            0.02,
            "Rounded to nearest points",
            ha="right",
            va="bottom",
            color=SNAPPED_COLOR,
            transform=ax.transAxes,
        )


def save_or_show(fig: plt.Figure, save: str | Path | None = None, show: bool = False) -> None:
    """Save ``fig`` to ``save`` and/or display it interactively.

    Unlike a one-off inspection script the figure is never shown implicitly;
    the CLI runs headless unless ``show`` is requested.
    """
    if save:
        fig.savefig(save, bbox_inches="tight")
    if show:
        plt.show()
