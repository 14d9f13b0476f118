"""Plain-text chart adapter for terminals and logs."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List

from ..core.pipeline import Display
from .base import register_chart


def format_display(display: Display, *, time_label: str = "time", precision: int = 2) -> List[str]:
    """Return the lines describing a single display."""

    if not display.ready:
        lines = [f"({display.message})"]
        if display.snapped:
            lines.append("Rounded to nearest points")
        return lines

    lines = [f"{time_label:>12}  {display.value_label:>12}"]
    for p in display.points:
        lines.append(f"{p.time:>12.{precision}f}  {p.value:>12.{precision}f}")
    if display.snapped:
        lines.append("Rounded to nearest points")
    ticks = ", ".join(f"{t.label}@{t.position:g}" for t in display.value_ticks)
    lines.append(f"ticks: {ticks}")
    return lines


class TableChart:
    name = "table"

    def render(
        self,
        displays: Dict[str, Display],
        *,
        title: str = "",
        time_label: str = "Time (s)",
        save: str | Path | None = None,
        show: bool = False,
    ) -> str:
        blocks: List[str] = [title] if title else []
        for card_title, display in displays.items():
            blocks.append(f"== {card_title}")
            blocks.extend(format_display(display, time_label=time_label))
        text = "\n".join(blocks)
        if save:
            Path(save).write_text(text + "\n", encoding="utf8")
        return text


register_chart(TableChart())
