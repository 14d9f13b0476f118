from __future__ import annotations

"""Series to display derivation.

:class:`PitchSeriesPipeline` turns a loaded :class:`~swaragraph.types.Series`
plus the user-editable window and tonic into everything a chart adapter
needs: the filtered points, the value-axis ticks and the time-axis ticks.
Invalid inputs never raise; they resolve to a :class:`Display` whose
``status`` explains the neutral state.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal, Optional, Tuple

from ..config import Settings
from ..types import DisplayPoint, Series, TickLabel, TimeWindow
from ..utils.timeparse import coerce_number
from .cents import series_to_cents
from .ticks import numeric_tick_labels, swara_ticks, widen_domain
from .window import filter_window

logger = logging.getLogger(__name__)

YAxis = Literal["numeric", "swaras"]


class DisplayStatus(str, Enum):
    """Outcome of a derivation pass."""

    READY = "ready"
    NO_DATA = "no_data"
    INVALID_WINDOW = "invalid_window"
    INVALID_TONIC = "invalid_tonic"
    EMPTY = "empty"


STATUS_MESSAGES = {
    DisplayStatus.READY: "",
    DisplayStatus.NO_DATA: "Load a pitch file to begin",
    DisplayStatus.INVALID_WINDOW: "Enter a valid time range",
    DisplayStatus.INVALID_TONIC: "Enter a valid tonic",
    DisplayStatus.EMPTY: "No pitch data in the selected range",
}


@dataclass(frozen=True)
class Display:
    """Derived, immutable view of a series for one window and tonic.

    Attributes
    ----------
    points:
        Filtered samples, in Hz or cents depending on ``unit``.
    value_ticks:
        Labels for the value axis (numeric or swara names).
    time_ticks:
        Labels for the time axis spanning the window.
    unit:
        ``"Hz"`` without a tonic, ``"cents"`` with one.
    y_axis:
        Requested value-axis flavour.
    status:
        :class:`DisplayStatus` describing whether there is anything to draw.
    snapped:
        ``True`` when the window held no samples and the nearest samples were
        used instead.
    value_range:
        ``(lo, hi)`` value domain used for the ticks, already widened when
        all points share one value.
    """

    points: Tuple[DisplayPoint, ...] = ()
    value_ticks: Tuple[TickLabel, ...] = ()
    time_ticks: Tuple[TickLabel, ...] = ()
    unit: str = "Hz"
    y_axis: YAxis = "numeric"
    status: DisplayStatus = DisplayStatus.NO_DATA
    snapped: bool = False
    value_range: Optional[Tuple[float, float]] = None
    message: str = field(default="")

    def __post_init__(self) -> None:
        if not self.message:
            object.__setattr__(self, "message", STATUS_MESSAGES[self.status])

    @property
    def ready(self) -> bool:
        return self.status is DisplayStatus.READY

    @property
    def value_label(self) -> str:
        if self.y_axis == "swaras":
            return "Swaras"
        return "Cents" if self.unit == "cents" else "Pitch (Hz)"


class PitchSeriesPipeline:
    """Parse-free half of the pitch pipeline: window, convert, tick.

    Parameters
    ----------
    settings:
        Optional :class:`~swaragraph.config.Settings`; the ``window`` and
        ``axis`` sections supply the snapping policy and tick parameters.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()

    def derive(
        self,
        series: Series | None,
        window: TimeWindow,
        tonic: Any = None,
        y_axis: YAxis | None = None,
    ) -> Display:
        """Derive the :class:`Display` for *series* seen through *window*.

        ``tonic`` may be a number, a numeric string or ``None``.  A present
        tonic switches the unit to cents; a present but unusable tonic, or a
        swara axis without any tonic, yields ``INVALID_TONIC``.
        """

        axis = self.settings.axis
        y_axis = y_axis or axis.y_axis
        if y_axis not in ("numeric", "swaras"):
            raise ValueError(f"unknown y_axis: {y_axis!r}")

        if series is None or not series:
            return Display(y_axis=y_axis, status=DisplayStatus.NO_DATA)
        if not window.is_valid:
            return Display(y_axis=y_axis, status=DisplayStatus.INVALID_WINDOW)

        tonic_given = tonic is not None and not (isinstance(tonic, str) and not tonic.strip())
        tonic_hz = coerce_number(tonic) if tonic_given else None
        if tonic_given and (tonic_hz is None or tonic_hz <= 0):
            return Display(y_axis=y_axis, unit="cents", status=DisplayStatus.INVALID_TONIC)
        if y_axis == "swaras" and tonic_hz is None:
            return Display(y_axis=y_axis, unit="cents", status=DisplayStatus.INVALID_TONIC)

        selection = filter_window(
            series, window, snap_to_nearest=self.settings.window.snap_to_nearest
        )
        if tonic_hz is not None:
            unit = "cents"
            points = tuple(series_to_cents(selection.series, tonic_hz))
        else:
            unit = "Hz"
            points = tuple(DisplayPoint(s.time, s.value) for s in selection.series)

        time_ticks = tuple(
            numeric_tick_labels(
                window.start, window.end, axis.time_tick_count, axis.time_precision
            )
        )
        if not points:
            return Display(
                unit=unit,
                y_axis=y_axis,
                time_ticks=time_ticks,
                status=DisplayStatus.EMPTY,
                snapped=selection.snapped,
            )

        values = [p.value for p in points]
        lo, hi = widen_domain(min(values), max(values), axis.epsilon)
        if y_axis == "swaras":
            value_ticks = swara_ticks(lo, hi, axis.min_pixel_spacing, axis.pixel_height)
        else:
            value_ticks = numeric_tick_labels(lo, hi, axis.numeric_tick_count, axis.value_precision)

        logger.debug(
            "derived %d points (%s, snapped=%s) for window [%g, %g]",
            len(points),
            unit,
            selection.snapped,
            window.start,
            window.end,
        )
        return Display(
            points=points,
            value_ticks=tuple(value_ticks),
            time_ticks=time_ticks,
            unit=unit,
            y_axis=y_axis,
            status=DisplayStatus.READY,
            snapped=selection.snapped,
            value_range=(lo, hi),
        )


def derive_display(
    series: Series | None,
    window: TimeWindow,
    tonic: Any = None,
    *,
    y_axis: YAxis | None = None,
    settings: Settings | None = None,
) -> Display:
    """Functional wrapper around :meth:`PitchSeriesPipeline.derive`."""

    return PitchSeriesPipeline(settings).derive(series, window, tonic, y_axis=y_axis)
