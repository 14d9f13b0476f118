import math

import pytest

from swaragraph.core import (
    SWARA_LABELS,
    numeric_tick_labels,
    numeric_ticks,
    octave_label,
    swara_ticks,
    widen_domain,
)
from swaragraph.core.ticks import cents_to_pixel, swara_candidates


def test_numeric_tick_count():
    assert numeric_ticks(0, 100, 5) == pytest.approx([0, 20, 40, 60, 80, 100])


def test_numeric_degenerate_domain():
    assert numeric_ticks(5, 5, 5) == []
    assert numeric_ticks(0, math.inf, 5) == []
    assert numeric_ticks(math.nan, 1, 5) == []


def test_widen_domain():
    assert widen_domain(5, 5) == (4, 6)
    assert widen_domain(5, 5, 0.5) == (4.5, 5.5)
    assert widen_domain(1, 2) == (1, 2)
    assert len(numeric_ticks(*widen_domain(5, 5), 4)) == 5


def test_numeric_tick_labels_precision():
    labels = numeric_tick_labels(0, 1, 2, precision=2)
    assert [t.label for t in labels] == ["0.00", "0.50", "1.00"]
    assert [t.position for t in labels] == pytest.approx([0.0, 0.5, 1.0])


def test_swara_table():
    assert len(SWARA_LABELS) == 11
    assert SWARA_LABELS[0].cents == 0 and SWARA_LABELS[-1].cents == 1200
    offsets = [s.cents for s in SWARA_LABELS]
    assert offsets == sorted(offsets)


def test_octave_label():
    assert octave_label("Pa", 0) == "Pa"
    assert octave_label("Pa", 2) == "Pa''"
    assert octave_label("Pa", -1) == "Pa,"


def test_swara_candidates_single_octave():
    ticks = swara_candidates(0, 1200)
    labels = [t.label for t in ticks]
    assert labels[:2] == ["Sa", "Re"]
    assert labels[-2:] == ["Sa'", "Sa'"]
    assert [t.position for t in ticks][:11] == [s.cents for s in SWARA_LABELS]


def test_swara_candidates_lower_octave():
    ticks = swara_candidates(-1200, 0)
    assert ticks[0].label == "Sa,"
    assert ticks[0].position == -1200
    assert ticks[-1].label == "Sa"
    assert ticks[-1].position == 0


def test_swara_candidates_margin():
    # Pa (702) is within 50 cents of 660, Dha (906) is not
    ticks = swara_candidates(600, 660)
    assert [t.label for t in ticks] == ["Ma♯/Pa♭", "Pa"]


def test_swara_thinning():
    ticks = swara_ticks(0, 1200, 40, 280)
    assert [t.label for t in ticks] == ["Sa", "Re", "Ga", "Ma♯/Pa♭", "Dha", "Ni"]


def test_swara_no_thinning_with_zero_spacing():
    assert len(swara_ticks(0, 1200, 0, 280)) == len(swara_candidates(0, 1200))


@pytest.mark.parametrize("spacing", [10.0, 25.0, 60.0, 120.0])
def test_swara_spacing_property(spacing):
    lo, hi, height = -700.0, 2500.0, 400.0
    ticks = swara_ticks(lo, hi, spacing, height)
    assert ticks
    pixels = [cents_to_pixel(t.position, lo, hi, height) for t in ticks]
    for a, b in zip(pixels, pixels[1:]):
        assert abs(a - b) >= spacing


def test_swara_degenerate_range_does_not_divide_by_zero():
    ticks = swara_ticks(350, 350, 40, 280)
    assert ticks[0].label == "Re♯/Ga♭"
