from __future__ import annotations

"""Multi-card board.

Each card is an immutable :class:`PitchCard` referenced by a stable id.
Edits replace the whole card value.  Cards either own an upload slot or,
in shared mode, all read from one board-level slot.
"""

import itertools
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterator, List, Optional

from ..config import Settings
from ..types import Series, TimeWindow
from .pipeline import Display, PitchSeriesPipeline, YAxis
from .ticks import widen_domain
from .uploads import UploadSlot


@dataclass(frozen=True)
class PitchCard:
    """User-editable state of one chart card."""

    card_id: str
    window: TimeWindow = TimeWindow(float("nan"), float("nan"))
    tonic: Any = None
    y_axis: Optional[YAxis] = None
    title: str = ""


class CardBoard:
    """Cards keyed by id together with their file slots."""

    def __init__(self, settings: Settings | None = None, *, shared: bool = False) -> None:
        self.settings = settings or Settings()
        self.shared = shared
        self.shared_slot = UploadSlot(self.settings)
        self._cards: Dict[str, PitchCard] = {}
        self._slots: Dict[str, UploadSlot] = {}
        self._ids = itertools.count(1)
        self._pipeline = PitchSeriesPipeline(self.settings)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[PitchCard]:
        return iter(list(self._cards.values()))

    def __contains__(self, card_id: object) -> bool:
        return card_id in self._cards

    @property
    def card_ids(self) -> List[str]:
        return list(self._cards)

    def add(self, card_id: Optional[str] = None, **fields: Any) -> PitchCard:
        """Create a card; ``ValueError`` if the board is full or the id is taken."""

        if len(self._cards) >= self.settings.cards.max_cards:
            raise ValueError(f"at most {self.settings.cards.max_cards} cards are supported")
        if card_id is None:
            card_id = f"card-{next(self._ids)}"
            while card_id in self._cards:
                card_id = f"card-{next(self._ids)}"
        elif card_id in self._cards:
            raise ValueError(f"duplicate card id: {card_id}")
        if "window" not in fields and self.settings.window.start is not None:
            fields["window"] = TimeWindow.coerce(
                self.settings.window.start, self.settings.window.end
            )
        if "tonic" not in fields and self.settings.tonic.hz is not None:
            fields["tonic"] = self.settings.tonic.hz
        card = PitchCard(card_id, **fields)
        self._cards[card_id] = card
        self._slots[card_id] = UploadSlot(self.settings)
        return card

    def remove(self, card_id: str) -> None:
        del self._cards[card_id]
        del self._slots[card_id]

    def get(self, card_id: str) -> PitchCard:
        return self._cards[card_id]

    def update(self, card_id: str, **changes: Any) -> PitchCard:
        """Replace the card with a copy carrying *changes*."""

        if "card_id" in changes:
            raise ValueError("card_id cannot be changed")
        card = replace(self._cards[card_id], **changes)
        self._cards[card_id] = card
        return card

    def set_window(self, card_id: str, start: Any, end: Any) -> PitchCard:
        return self.update(card_id, window=TimeWindow.coerce(start, end))

    def fit_window(self, card_id: str, start: Any = None, end: Any = None) -> PitchCard:
        """Set the window, filling missing bounds from the loaded series.

        A missing (``None`` or blank) bound becomes the first or last sample
        time.  When both bounds come from the series and coincide, the window
        is widened by ``axis.epsilon`` so a single-instant series stays
        viewable.
        """

        series = self.series(card_id)
        span = series.time_range if series is not None else None
        if span is None:
            return self.set_window(card_id, start, end)
        missing_start = start is None or (isinstance(start, str) and not start.strip())
        missing_end = end is None or (isinstance(end, str) and not end.strip())
        if missing_start and missing_end:
            start, end = widen_domain(span[0], span[1], self.settings.axis.epsilon)
        else:
            start = span[0] if missing_start else start
            end = span[1] if missing_end else end
        return self.set_window(card_id, start, end)

    def slot(self, card_id: str) -> UploadSlot:
        """Slot feeding *card_id*; the shared slot in shared mode."""

        if card_id not in self._cards:
            raise KeyError(card_id)
        return self.shared_slot if self.shared else self._slots[card_id]

    def series(self, card_id: str) -> Optional[Series]:
        return self.slot(card_id).series

    def derive(self, card_id: str) -> Display:
        card = self._cards[card_id]
        return self._pipeline.derive(
            self.series(card_id), card.window, card.tonic, y_axis=card.y_axis
        )

    def derive_all(self) -> Dict[str, Display]:
        return {card_id: self.derive(card_id) for card_id in self._cards}
