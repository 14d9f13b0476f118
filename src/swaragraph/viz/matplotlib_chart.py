"""Matplotlib chart adapter: one line-chart panel per card."""

from __future__ import annotations

from pathlib import Path
from typing import Dict

import matplotlib.pyplot as plt

from ..core.pipeline import Display
from .base import register_chart
from .helpers import plot_display, save_or_show
from .styles import apply_style


class MatplotlibChart:
    name = "matplotlib"

    def render(
        self,
        displays: Dict[str, Display],
        *,
        title: str = "",
        time_label: str = "Time (s)",
        save: str | Path | None = None,
        show: bool = False,
    ) -> plt.Figure:
        if not displays:
            raise ValueError("nothing to render")
        apply_style()
        n = len(displays)
        width, height = plt.rcParams["figure.figsize"]
        fig, axes = plt.subplots(n, 1, squeeze=False, figsize=(width, height * n))
        for ax, (card_title, display) in zip(axes[:, 0], displays.items()):
            plot_display(ax, display, title=card_title, time_label=time_label)
        if title:
            fig.suptitle(title)
        fig.tight_layout()
        save_or_show(fig, save, show)
        return fig


register_chart(MatplotlibChart())
