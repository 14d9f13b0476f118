from __future__ import annotations

"""Pitch to cents conversion.

Cents measure an interval on a logarithmic scale where one octave spans
1200 cents:

.. math::

   c = 1200 \\log_2 (f / f_0)

with :math:`f_0` the tonic frequency.  Pitch is undefined in cents for
non-positive or non-finite frequencies.
"""

import math
from typing import List

import numpy as np

from ..types import DisplayPoint, Series

CENTS_PER_OCTAVE = 1200.0


def hz_to_cents(hz: float, tonic_hz: float) -> float | None:
    """Return *hz* in cents above *tonic_hz*, or ``None`` when undefined."""

    if not (math.isfinite(hz) and math.isfinite(tonic_hz)):
        return None
    if hz <= 0 or tonic_hz <= 0:
        return None
    # difference of logs; the ratio itself can underflow to zero
    cents = CENTS_PER_OCTAVE * (math.log2(hz) - math.log2(tonic_hz))
    return cents if math.isfinite(cents) else None


def cents_to_hz(cents: float, tonic_hz: float) -> float:
    """Inverse of :func:`hz_to_cents`."""

    if tonic_hz <= 0 or not math.isfinite(tonic_hz):
        raise ValueError("tonic_hz must be a positive finite frequency")
    return tonic_hz * 2.0 ** (cents / CENTS_PER_OCTAVE)


def series_to_cents(series: Series, tonic_hz: float) -> List[DisplayPoint]:
    """Map every sample of *series* to cents relative to *tonic_hz*.

    Samples without a defined cents value are dropped rather than kept as
    gaps or zeros.
    """

    if not series or hz_to_cents(1.0, tonic_hz) is None:
        return []
    values = series.values
    with np.errstate(divide="ignore", invalid="ignore"):
        cents = CENTS_PER_OCTAVE * (np.log2(values) - math.log2(tonic_hz))
    keep = (values > 0) & np.isfinite(cents)
    return [
        DisplayPoint(t, c)
        for t, c in zip(series.times[keep].tolist(), cents[keep].tolist())
    ]
