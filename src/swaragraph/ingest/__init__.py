"""Utility modules for ingesting pitch files."""

from .pitchfile import (
    EMPTY_FILE_REASON,
    SUPPORTED_EXTENSIONS,
    EmptyPitchFileError,
    PitchFileError,
    UnsupportedFileError,
    check_extension,
    parse_pitch_text,
    read_pitch_file,
)

__all__ = [
    "EMPTY_FILE_REASON",
    "SUPPORTED_EXTENSIONS",
    "PitchFileError",
    "UnsupportedFileError",
    "EmptyPitchFileError",
    "check_extension",
    "parse_pitch_text",
    "read_pitch_file",
]
