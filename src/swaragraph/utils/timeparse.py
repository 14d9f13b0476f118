"""Utilities for parsing human friendly time expressions."""

from __future__ import annotations

import math
from typing import Any


def parse_time(text: str) -> float:
    """Parse ``text`` as a time value in seconds.

    Accepted formats are:

    * ``HH:MM:SS``
    * ``MM:SS``
    * ``SS``

    Fractional seconds are supported.  ``ValueError`` is raised on
    malformed input.
    """

    parts = text.strip().split(":")
    if not parts or not parts[0]:
        raise ValueError("empty time string")

    try:
        parts_f = [float(p) for p in parts]
    except ValueError as exc:
        raise ValueError(f"invalid time value: {text!r}") from exc

    if len(parts_f) == 1:
        seconds = parts_f[0]
    elif len(parts_f) == 2:
        minutes, seconds = parts_f
        seconds += minutes * 60
    elif len(parts_f) == 3:
        hours, minutes, seconds = parts_f
        seconds += minutes * 60 + hours * 3600
    else:
        raise ValueError("too many components in time string")
    return seconds


def coerce_time(value: Any) -> float:
    """Return ``value`` as seconds, or NaN when it cannot be interpreted.

    Used for form-like inputs (time fields, tonic fields) where a bad entry
    is a neutral state rather than an error.
    """

    if value is None or isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return parse_time(value)
        except ValueError:
            return math.nan
    return math.nan


def coerce_number(value: Any) -> float | None:
    """Return ``value`` as a finite float or ``None``."""

    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None
