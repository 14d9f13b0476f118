"""Core algorithms and data structures for swaragraph."""

from .cards import CardBoard, PitchCard
from .cents import cents_to_hz, hz_to_cents, series_to_cents
from .pipeline import Display, DisplayStatus, PitchSeriesPipeline, derive_display
from .ticks import (
    SWARA_LABELS,
    numeric_tick_labels,
    numeric_ticks,
    octave_label,
    swara_ticks,
    widen_domain,
)
from .uploads import UploadSlot, UploadState, UploadStatus
from .window import filter_window, nearest_index

__all__ = [
    "CardBoard",
    "PitchCard",
    "cents_to_hz",
    "hz_to_cents",
    "series_to_cents",
    "Display",
    "DisplayStatus",
    "PitchSeriesPipeline",
    "derive_display",
    "SWARA_LABELS",
    "numeric_tick_labels",
    "numeric_ticks",
    "octave_label",
    "swara_ticks",
    "widen_domain",
    "UploadSlot",
    "UploadState",
    "UploadStatus",
    "filter_window",
    "nearest_index",
]
