"""
Constants and enums for the scale system.

No magic strings - use enums for constrained values.
"""

from __future__ import annotations

from enum import Enum

# Number of pitch classes in a chromatic table
CHROMATIC_SIZE = 12


class IntervalCode(str, Enum):
    """
    Symbolic step sizes used in scale patterns.

    A major scale is the pattern MMmMMMm.
    """

    MINOR = "m"  # Minor second (half step)
    MAJOR = "M"  # Major second (whole step)
    AUGMENTED = "A"  # Augmented second

    @property
    def semitones(self) -> int:
        """Number of semitones this code advances."""
        return _SEMITONES[self]


_SEMITONES: dict[IntervalCode, int] = {
    IntervalCode.MINOR: 1,
    IntervalCode.MAJOR: 2,
    IntervalCode.AUGMENTED: 3,
}


class Spelling(str, Enum):
    """Which chromatic table a note sequence is spelled with."""

    SHARP = "sharp"
    FLAT = "flat"


# Tonics that are spelled with the flat table.
# Exact-string match: the flat major keys, their lower-case forms, and minor d, g, c.
FLAT_PREFERRED_TONICS: frozenset[str] = frozenset(
    ["F", "Bb", "Eb", "Ab", "Db", "Gb", "f", "bb", "eb", "ab", "db", "gb", "d", "g", "c"]
)


class ErrorMessages:
    """Standardized error messages."""

    INVALID_NOTE = "Invalid note: '{note}'. Expected a letter A-G with optional '#' or 'b'."
    INVALID_INTERVAL_CODE = "Invalid interval code: '{code}'. Expected one of 'm', 'M', 'A'."
    NOTE_NOT_FOUND = "Note '{note}' not found in chromatic table {table}."
    INVALID_TABLE = "Chromatic table must have at least 12 notes, got {size}."
    UNKNOWN_SCALE = "Scale '{name}' not found in catalog."
    UNKNOWN_SPELLING = "Invalid spelling: '{spelling}'. Expected 'sharp' or 'flat'."
