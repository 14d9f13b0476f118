"""Common type helpers for swaragraph.

This module defines the lightweight containers exchanged between the
parser, the window filter, the cents converter and the chart adapters.
Every container is immutable; derivations always build fresh values.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterator, Sequence, overload

import numpy as np

from .utils.timeparse import coerce_time


@dataclass(frozen=True)
class Sample:
    """A single pitch sample: ``time`` in seconds, ``value`` in hertz."""

    time: float
    value: float


@dataclass(frozen=True)
class DisplayPoint:
    """A filtered sample ready for drawing, in Hz or cents."""

    time: float
    value: float


@dataclass(frozen=True)
class TickLabel:
    """Labelled position on the value axis."""

    position: float
    label: str


@dataclass(frozen=True)
class TimeWindow:
    """Visible time range expressed in seconds."""

    start: float
    end: float

    @property
    def is_valid(self) -> bool:
        """Return ``True`` when both bounds are finite and ``start < end``."""

        return (
            math.isfinite(self.start)
            and math.isfinite(self.end)
            and self.start < self.end
        )

    @property
    def duration(self) -> float:
        """Return the window length in seconds."""

        return self.end - self.start

    @classmethod
    def coerce(cls, start: Any, end: Any) -> "TimeWindow":
        """Build a window from loosely typed user input.

        Numbers, numeric strings and ``HH:MM:SS`` style strings are accepted.
        Anything else becomes NaN, which yields an invalid window rather than
        an exception.
        """

        return cls(coerce_time(start), coerce_time(end))


class Series:
    """Time-ordered pitch samples backed by read-only numpy arrays.

    Instances are built once per file load and never mutated.  Inputs are
    copied, so callers may keep modifying the arrays they passed in.
    """

    __slots__ = ("_times", "_values")

    def __init__(self, times: Sequence[float] | np.ndarray, values: Sequence[float] | np.ndarray) -> None:
        t = np.array(times, dtype=float).reshape(-1)
        v = np.array(values, dtype=float).reshape(-1)
        if t.shape != v.shape:
            raise ValueError("times and values must have the same length")
        t.setflags(write=False)
        v.setflags(write=False)
        self._times = t
        self._values = v

    @classmethod
    def empty(cls) -> "Series":
        return cls([], [])

    @property
    def times(self) -> np.ndarray:
        return self._times

    @property
    def values(self) -> np.ndarray:
        return self._values

    def __len__(self) -> int:
        return int(self._times.size)

    def __bool__(self) -> bool:
        return self._times.size > 0

    def __iter__(self) -> Iterator[Sample]:
        for t, v in zip(self._times.tolist(), self._values.tolist()):
            yield Sample(t, v)

    @overload
    def __getitem__(self, index: int) -> Sample: ...

    @overload
    def __getitem__(self, index: slice) -> "Series": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Series(self._times[index], self._values[index])
        return Sample(float(self._times[index]), float(self._values[index]))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Series):
            return NotImplemented
        return np.array_equal(self._times, other._times) and np.array_equal(
            self._values, other._values
        )

    def __hash__(self) -> int:
        return hash((self._times.tobytes(), self._values.tobytes()))

    def __repr__(self) -> str:
        if not self:
            return "Series(empty)"
        return (
            f"Series(n={len(self)}, t=[{self._times[0]:g}, {self._times[-1]:g}])"
        )

    @property
    def time_range(self) -> tuple[float, float] | None:
        """Return ``(first, last)`` time or ``None`` for an empty series."""

        if not self:
            return None
        return float(self._times[0]), float(self._times[-1])


@dataclass(frozen=True)
class WindowSelection:
    """Samples selected by a time window.

    ``snapped`` is set when the window contained no samples and the
    selection fell back to the samples nearest its bounds.
    """

    series: Series
    snapped: bool = False
