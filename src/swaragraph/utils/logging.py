"""Logging helpers shared by the library and the command line."""

from __future__ import annotations

import logging

DEFAULT_FORMAT = "%(levelname)s:%(name)s:%(message)s"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def resolve_level(level: int | str) -> int:
    """Translate a level name such as ``"debug"`` into a logging constant."""

    if isinstance(level, int):
        return level
    try:
        return _LEVELS[level.strip().lower()]
    except KeyError:
        raise ValueError(f"unknown log level: {level!r}") from None


def get_logger(
    name: str = "swaragraph",
    level: int | str = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Return a configured :class:`logging.Logger` instance.

    A ``StreamHandler`` is attached only once per logger so repeated calls
    (one per CLI invocation in tests, for instance) do not duplicate lines.
    Library modules use ``logging.getLogger(__name__)`` and inherit the
    handler installed on the ``swaragraph`` logger.
    """

    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)
    logger.setLevel(resolve_level(level))
    return logger
