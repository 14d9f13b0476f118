from __future__ import annotations

"""Upload lifecycle for a single pitch file slot.

A slot moves between ``IDLE``, ``READING``, ``READY`` and ``REJECTED``.
Every read is tagged with a monotonically increasing request id and only
the latest request may settle the slot; late completions of superseded
reads are discarded.  A rejected upload keeps the previously loaded series.
"""

import logging
import pathlib
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union

from ..config import Settings
from ..ingest import EMPTY_FILE_REASON, PitchFileError, check_extension, parse_pitch_text
from ..types import Series

logger = logging.getLogger(__name__)


class UploadStatus(str, Enum):
    IDLE = "idle"
    READING = "reading"
    READY = "ready"
    REJECTED = "rejected"


@dataclass(frozen=True)
class UploadState:
    """Snapshot of a slot.

    ``series`` is the last successfully loaded series, which survives a
    subsequent rejection or an in-flight read.
    """

    status: UploadStatus = UploadStatus.IDLE
    request_id: int = 0
    file_name: Optional[str] = None
    series: Optional[Series] = None
    reason: Optional[str] = None


class UploadSlot:
    """Holds the current :class:`UploadState` of one file input."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()
        self._state = UploadState()
        self._next_id = 0

    @property
    def state(self) -> UploadState:
        return self._state

    @property
    def series(self) -> Optional[Series]:
        return self._state.series

    def begin(self, file_name: str) -> int:
        """Start a read of *file_name* and return its request id.

        Unsupported extensions are rejected immediately, before any read.
        """

        self._next_id += 1
        request_id = self._next_id
        try:
            check_extension(file_name, self.settings.ingest.extensions)
        except PitchFileError as exc:
            self._settle(request_id, file_name, UploadStatus.REJECTED, reason=exc.reason)
            return request_id
        self._state = replace(
            self._state,
            status=UploadStatus.READING,
            request_id=request_id,
            file_name=file_name,
            reason=None,
        )
        return request_id

    def is_current(self, request_id: int) -> bool:
        return request_id == self._next_id

    def complete(self, request_id: int, text: str) -> bool:
        """Parse *text* for *request_id*; return ``False`` if it was stale."""

        if not self._accepts(request_id):
            return False
        series = parse_pitch_text(text)
        if not series:
            self._settle(
                request_id, self._state.file_name, UploadStatus.REJECTED, reason=EMPTY_FILE_REASON
            )
        else:
            self._settle(request_id, self._state.file_name, UploadStatus.READY, series=series)
        return True

    def fail(self, request_id: int, reason: str) -> bool:
        """Record a read failure for *request_id*; stale failures are ignored."""

        if not self._accepts(request_id):
            return False
        self._settle(request_id, self._state.file_name, UploadStatus.REJECTED, reason=reason)
        return True

    def load(self, path: Union[str, pathlib.Path]) -> UploadState:
        """Read *path* to completion and settle the slot synchronously."""

        p = pathlib.Path(path)
        request_id = self.begin(p.name)
        if self._state.status is UploadStatus.REJECTED:
            return self._state
        try:
            text = p.read_text(encoding=self.settings.ingest.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            self.fail(request_id, f"Could not read file: {exc}")
        else:
            self.complete(request_id, text)
        return self._state

    def _accepts(self, request_id: int) -> bool:
        if not self.is_current(request_id) or self._state.status is not UploadStatus.READING:
            logger.debug("discarding stale upload result %d", request_id)
            return False
        return True

    def _settle(
        self,
        request_id: int,
        file_name: Optional[str],
        status: UploadStatus,
        *,
        series: Optional[Series] = None,
        reason: Optional[str] = None,
    ) -> None:
        if status is UploadStatus.REJECTED:
            logger.info("rejected upload %s: %s", file_name, reason)
            series = self._state.series
        self._state = UploadState(
            status=status,
            request_id=request_id,
            file_name=file_name,
            series=series,
            reason=reason,
        )
