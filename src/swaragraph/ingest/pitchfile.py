# src/swaragraph/ingest/pitchfile.py
"""Parser for two-column pitch files.

Each line holds a time in seconds followed by a pitch in hertz::

   0.00 261.63
   0.01,523.26
   0.02\t392.00

Tokens are separated by runs of spaces, commas or tabs; extra tokens are
ignored.  Lines that are blank, have fewer than two tokens, or whose first
two tokens are not finite numbers are dropped silently.  The extension
(``.txt`` or ``.csv``) is informational only: ``.csv`` files are not read
with a CSV dialect.
"""

from __future__ import annotations

import logging
import math
import pathlib
import re
from typing import Iterable, Iterator, Optional, Tuple, Union

import numpy as np

from ..config import Settings
from ..types import Series

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".txt", ".csv")
EMPTY_FILE_REASON = "No valid pitch data found in the file."

_LINE_RE = re.compile(r"\r?\n")
_TOKEN_RE = re.compile(r"[ ,\t]+")


class PitchFileError(ValueError):
    """Raised when a pitch file upload must be rejected."""

    def __init__(self, reason: str, *, path: Union[str, pathlib.Path]):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class UnsupportedFileError(PitchFileError):
    """The file extension is not one of the accepted pitch formats."""


class EmptyPitchFileError(PitchFileError):
    """The file contained no valid ``time pitch`` rows."""


def _parse_row(line: str) -> Optional[Tuple[float, float]]:
    tokens = [t for t in _TOKEN_RE.split(line.strip()) if t]
    if len(tokens) < 2:
        return None
    try:
        t = float(tokens[0])
        v = float(tokens[1])
    except ValueError:
        return None
    if not (math.isfinite(t) and math.isfinite(v)):
        return None
    return t, v


def iter_rows(lines: Iterable[str]) -> Iterator[Tuple[float, float]]:
    """Yield ``(time, value)`` pairs for every valid line in *lines*."""

    for line in lines:
        if not line.strip():
            continue
        row = _parse_row(line)
        if row is not None:
            yield row


def parse_pitch_text(text: str) -> Series:
    """Parse pitch file contents into a time-sorted :class:`Series`.

    The sort is stable, so samples sharing a timestamp keep their input
    order.  Duplicate times, negative times and non-positive pitches are
    kept.  An input without any valid row gives an empty series; deciding
    whether that is a failure is up to the caller.
    """

    lines = _LINE_RE.split(text)
    rows = list(iter_rows(lines))
    dropped = sum(1 for line in lines if line.strip()) - len(rows)
    if dropped:
        logger.debug("dropped %d malformed pitch rows", dropped)
    if not rows:
        return Series.empty()
    data = np.asarray(rows, dtype=float)
    order = np.argsort(data[:, 0], kind="stable")
    return Series(data[order, 0], data[order, 1])


def check_extension(
    path: Union[str, pathlib.Path],
    extensions: Iterable[str] = SUPPORTED_EXTENSIONS,
) -> None:
    """Raise :class:`UnsupportedFileError` unless *path* has an accepted suffix."""

    p = pathlib.Path(path)
    allowed = {ext.lower() for ext in extensions}
    if p.suffix.lower() not in allowed:
        accepted = " or ".join(sorted(allowed))
        raise UnsupportedFileError(
            f"Unsupported file format. Please upload {accepted} files only.",
            path=p,
        )


def read_pitch_file(
    path: Union[str, pathlib.Path],
    *,
    settings: Settings | None = None,
) -> Series:
    """Load and parse the pitch file at *path*.

    The extension is checked before the file is opened.  A file yielding
    no valid rows raises :class:`EmptyPitchFileError`.
    """

    if settings is None:
        settings = Settings()
    p = pathlib.Path(path)
    check_extension(p, settings.ingest.extensions)
    text = p.read_text(encoding=settings.ingest.encoding)
    series = parse_pitch_text(text)
    if not series:
        raise EmptyPitchFileError(EMPTY_FILE_REASON, path=p)
    logger.info("loaded %d pitch samples from %s", len(series), p.name)
    return series
