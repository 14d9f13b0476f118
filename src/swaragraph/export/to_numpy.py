from __future__ import annotations

"""Utilities for converting derived displays into NumPy arrays."""

from pathlib import Path
from typing import Sequence

import numpy as np

from ..core.pipeline import Display
from ..types import DisplayPoint


def points_to_numpy(points: Sequence[DisplayPoint]) -> tuple[np.ndarray, np.ndarray]:
    """Return ``(time, value)`` arrays for *points*."""

    t = np.asarray([p.time for p in points], dtype=float)
    v = np.asarray([p.value for p in points], dtype=float)
    return t, v


def display_to_numpy(
    display: Display,
    *,
    save_csv: str | Path | None = None,
    save_npz: str | Path | None = None,
) -> tuple[np.ndarray, np.ndarray]:
    """Return the display points as ``(time, value)`` NumPy arrays.

    Parameters
    ----------
    display:
        Derived display; a non-ready display yields empty arrays.
    save_csv, save_npz:
        Optional paths.  If provided the points are persisted either as a CSV
        file with a ``time,<unit>`` header or an ``.npz`` archive with
        ``time``, ``value`` and ``unit`` entries.
    """

    t, v = points_to_numpy(display.points)

    if save_csv:
        path = Path(save_csv)
        np.savetxt(
            path,
            np.column_stack([t, v]) if t.size else np.empty((0, 2)),
            delimiter=",",
            header=f"time,{display.unit}",
            comments="",
        )

    if save_npz:
        path = Path(save_npz)
        np.savez(path, time=t, value=v, unit=np.array(display.unit))

    return t, v
