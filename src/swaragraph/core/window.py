from __future__ import annotations

"""Time-window selection over a pitch :class:`~swaragraph.types.Series`."""

import logging

import numpy as np

from ..types import Series, TimeWindow, WindowSelection

logger = logging.getLogger(__name__)


def nearest_index(times: np.ndarray, target: float) -> int:
    """Return the index of the element of *times* closest to *target*.

    Ties resolve to the first occurrence.  ``ValueError`` is raised for an
    empty array.
    """

    times = np.asarray(times, dtype=float)
    if times.size == 0:
        raise ValueError("times must not be empty")
    return int(np.argmin(np.abs(times - target)))


def filter_window(
    series: Series,
    window: TimeWindow,
    *,
    snap_to_nearest: bool = True,
) -> WindowSelection:
    """Select the samples of *series* falling inside *window*.

    Parameters
    ----------
    series:
        Time-sorted samples.  It is never modified.
    window:
        Inclusive ``[start, end]`` bounds.  An invalid window (non-finite
        bounds or ``start >= end``) selects nothing.
    snap_to_nearest:
        When the inclusive selection is empty but *series* is not, return
        the contiguous run between the samples nearest to ``start`` and to
        ``end`` instead, and flag the selection as snapped.

    Returns
    -------
    WindowSelection
        The selected sub-series and whether snapping was applied.
    """

    if not window.is_valid or not series:
        return WindowSelection(Series.empty())

    times = series.times
    hits = np.flatnonzero((times >= window.start) & (times <= window.end))
    if hits.size:
        # sorted input, so matches are contiguous
        return WindowSelection(series[int(hits[0]) : int(hits[-1]) + 1])

    if not snap_to_nearest:
        return WindowSelection(Series.empty())

    i_start = nearest_index(times, window.start)
    i_end = nearest_index(times, window.end)
    lo, hi = min(i_start, i_end), max(i_start, i_end)
    logger.debug(
        "window [%g, %g] holds no samples; snapped to indices %d..%d",
        window.start,
        window.end,
        lo,
        hi,
    )
    return WindowSelection(series[lo : hi + 1], snapped=True)
