from __future__ import annotations

"""Value-axis tick generation.

Two flavours are provided: evenly spaced numeric ticks and named swara
ticks laid out at fixed cent offsets within each octave.  Swara ticks are
thinned so that labels keep a minimum pixel distance on the drawn axis.
"""

import math
from typing import List, NamedTuple, Sequence, Tuple

import numpy as np

from ..types import TickLabel
from .cents import CENTS_PER_OCTAVE


class Swara(NamedTuple):
    name: str
    cents: float


# Scale degrees relative to the tonic Sa; both ends name the tonic.
SWARA_LABELS: Tuple[Swara, ...] = (
    Swara("Sa", 0.0),
    Swara("Re", 204.0),
    Swara("Re♯/Ga♭", 316.0),
    Swara("Ga", 386.0),
    Swara("Ma", 498.0),
    Swara("Ma♯/Pa♭", 610.0),
    Swara("Pa", 702.0),
    Swara("Dha", 906.0),
    Swara("Dha♯/Ni♭", 1018.0),
    Swara("Ni", 1088.0),
    Swara("Sa'", 1200.0),
)

SWARA_MARGIN = 50.0
UPPER_OCTAVE_MARK = "'"
LOWER_OCTAVE_MARK = ","


def numeric_ticks(lo: float, hi: float, count: int) -> List[float]:
    """Return ``count + 1`` evenly spaced values from *lo* to *hi*.

    A degenerate domain (``lo == hi``) or a non-finite bound gives an empty
    list; widen the domain with :func:`widen_domain` first.
    """

    if not (math.isfinite(lo) and math.isfinite(hi)) or lo == hi or count < 1:
        return []
    return np.linspace(lo, hi, count + 1).tolist()


def widen_domain(lo: float, hi: float, epsilon: float = 1.0) -> Tuple[float, float]:
    """Pad a single-valued domain by ``epsilon`` on both sides."""

    if lo == hi:
        return lo - epsilon, hi + epsilon
    return lo, hi


def numeric_tick_labels(lo: float, hi: float, count: int, precision: int = 1) -> List[TickLabel]:
    """Numeric ticks labelled with *precision* decimals."""

    return [TickLabel(v, f"{v:.{precision}f}") for v in numeric_ticks(lo, hi, count)]


def octave_label(name: str, octave: int) -> str:
    """Append one octave mark per octave away from the reference octave."""

    if octave > 0:
        return name + UPPER_OCTAVE_MARK * octave
    if octave < 0:
        return name + LOWER_OCTAVE_MARK * -octave
    return name


def swara_candidates(
    min_cents: float,
    max_cents: float,
    table: Sequence[Swara] = SWARA_LABELS,
) -> List[TickLabel]:
    """All swara positions within ``SWARA_MARGIN`` cents of the range."""

    if not (math.isfinite(min_cents) and math.isfinite(max_cents)):
        return []
    lo = min_cents - SWARA_MARGIN
    hi = max_cents + SWARA_MARGIN
    out: List[TickLabel] = []
    first = math.floor(min_cents / CENTS_PER_OCTAVE)
    last = math.ceil(max_cents / CENTS_PER_OCTAVE)
    for octave in range(first, last + 1):
        for swara in table:
            cents = swara.cents + octave * CENTS_PER_OCTAVE
            if lo <= cents <= hi:
                out.append(TickLabel(cents, octave_label(swara.name, octave)))
    return out


def cents_to_pixel(cents: float, min_cents: float, max_cents: float, pixel_height: float) -> float:
    """Map *cents* onto an inverted pixel axis (``max_cents`` at row 0)."""

    span = (max_cents - min_cents) or 1.0
    return pixel_height - (cents - min_cents) / span * pixel_height


def swara_ticks(
    min_cents: float,
    max_cents: float,
    min_pixel_spacing: float = 40.0,
    pixel_height: float = 280.0,
) -> List[TickLabel]:
    """Swara ticks for ``[min_cents, max_cents]`` thinned for legibility.

    Candidates are visited in ascending order and kept only when at least
    *min_pixel_spacing* pixels away from the previously kept tick.  The
    first candidate is always kept.
    """

    kept: List[TickLabel] = []
    last_px: float | None = None
    for tick in swara_candidates(min_cents, max_cents):
        px = cents_to_pixel(tick.position, min_cents, max_cents, pixel_height)
        if last_px is None or abs(px - last_px) >= min_pixel_spacing:
            kept.append(tick)
            last_px = px
    return kept
