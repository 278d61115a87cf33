"""
Pitch primitives - chromatic tables, PitchClass and interval codes.

These are the foundational types for all spelling-related operations.
PitchClass represents the 12 chromatic pitches (octave-independent).
The two chromatic tables are positionally aligned: index i in either
table names the same pitch class.
"""

from __future__ import annotations

from enum import IntEnum

from chuk_mcp_scales.constants import CHROMATIC_SIZE, IntervalCode
from chuk_mcp_scales.core.errors import InvalidIntervalCodeError, InvalidNoteError

SHARP_CHROMATIC: tuple[str, ...] = (
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
)
FLAT_CHROMATIC: tuple[str, ...] = (
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
)

# Natural letters and their position in the tables
_LETTER_VALUES: dict[str, int] = {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11}
_ACCIDENTALS: dict[str, int] = {"": 0, "#": 1, "b": -1}


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Enharmonic equivalents share the same value (C# == Db == 1).
    Spelling is a display concern, handled by spell().
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % CHROMATIC_SIZE)

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        names = FLAT_CHROMATIC if prefer_flats else SHARP_CHROMATIC
        return names[self.value]

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """
        Parse a pitch class from a note name like 'C', 'c#', 'Db' or 'bb'.

        The letter is case-insensitive; the accidental is '#' or 'b'.
        Spellings outside both tables resolve to their neighbour,
        so 'Cb' is B and 'E#' is F.

        Raises:
            InvalidNoteError: If the letter is not A-G or the accidental is unknown
        """
        name = name.strip()
        if not name:
            raise InvalidNoteError(name)

        letter, accidental = name[0].upper(), name[1:].lower()
        if letter not in _LETTER_VALUES or accidental not in _ACCIDENTALS:
            raise InvalidNoteError(name)

        return cls((_LETTER_VALUES[letter] + _ACCIDENTALS[accidental]) % CHROMATIC_SIZE)


def parse_interval_code(code: str) -> IntervalCode:
    """Parse a single pattern character into an IntervalCode."""
    try:
        return IntervalCode(code)
    except ValueError:
        raise InvalidIntervalCodeError(code) from None


def parse_pattern(pattern: str) -> tuple[IntervalCode, ...]:
    """
    Parse a whole pattern string, e.g. 'MMmMMMm'.

    Every character is checked before anything is returned, so a bad
    pattern never yields a partial result.
    """
    return tuple(parse_interval_code(code) for code in pattern)
