"""
Scale engine - chromatic table selection, stepping and pattern expansion.

A scale is an interval pattern walked from a tonic through one chromatic
table. The walk is lookup, offset, modulo 12 over a fixed tuple, and a
single table is used for the whole walk so every note is spelled the same way.
"""

from __future__ import annotations

from collections.abc import Sequence

from chuk_mcp_scales.constants import (
    CHROMATIC_SIZE,
    FLAT_PREFERRED_TONICS,
    IntervalCode,
    Spelling,
)
from chuk_mcp_scales.core.errors import InvalidTableError, NoteNotFoundError
from chuk_mcp_scales.core.pitch import (
    FLAT_CHROMATIC,
    SHARP_CHROMATIC,
    PitchClass,
    parse_interval_code,
    parse_pattern,
)

# Twelve semitone steps, one full octave
CHROMATIC_PATTERN = IntervalCode.MINOR.value * CHROMATIC_SIZE


def normalize_tonic(raw_tonic: str) -> str:
    """
    Normalize a tonic to its capitalized, sharp-or-natural spelling.

    'c' -> 'C', 'db' -> 'C#', 'Bb' -> 'A#'
    """
    return PitchClass.parse(raw_tonic).spell()


def spell_in_table(note: str, table: Sequence[str]) -> str:
    """
    Spell a note the way the given chromatic table spells its pitch class.

    The table may start on any note, e.g. chromatic_scale('D').

    Raises:
        NoteNotFoundError: If no entry in table has the note's pitch class
    """
    pitch = PitchClass.parse(note)
    for entry in table:
        if PitchClass.parse(entry) == pitch:
            return entry
    raise NoteNotFoundError(note, table)


def select_chromatic_table(tonic: str) -> tuple[str, ...]:
    """
    Pick the chromatic table for a tonic as the caller wrote it.

    The match is on the raw string, so 'F' and 'f' select flats
    while 'BB' does not.
    """
    if tonic in FLAT_PREFERRED_TONICS:
        return FLAT_CHROMATIC
    return SHARP_CHROMATIC


def table_spelling(table: Sequence[str]) -> Spelling:
    """Which spelling a chromatic table uses."""
    return Spelling.FLAT if tuple(table) == FLAT_CHROMATIC else Spelling.SHARP


def chromatic_table(spelling: Spelling | str) -> tuple[str, ...]:
    """Get the chromatic table for a spelling."""
    return FLAT_CHROMATIC if Spelling(spelling) == Spelling.FLAT else SHARP_CHROMATIC


def _check_table(table: Sequence[str]) -> None:
    if len(table) < CHROMATIC_SIZE:
        raise InvalidTableError(table)


def step(table: Sequence[str], current_note: str, interval_code: IntervalCode | str) -> str:
    """
    Find the note one interval above current_note in table.

    Given the tonic 'D' in the C chromatic scale:
        'm' -> 'D#', 'M' -> 'E', 'A' -> 'F'

    The table needs at least 12 notes. The offset always wraps at 12,
    so a 13-note chromatic scale (octave included) works as a table too.

    Raises:
        InvalidIntervalCodeError: If interval_code is not m, M or A
        InvalidTableError: If table has fewer than 12 notes
        NoteNotFoundError: If current_note is not spelled as in table
    """
    code = parse_interval_code(interval_code)
    _check_table(table)
    try:
        index = list(table).index(current_note)
    except ValueError:
        raise NoteNotFoundError(current_note, table) from None
    return table[(index + code.semitones) % CHROMATIC_SIZE]


def build_chromatic_scale(tonic: str, table: Sequence[str]) -> list[str]:
    """
    The 12 notes of table starting at tonic, then the tonic an octave up.

    The tonic is re-spelled to match the table first.
    """
    _check_table(table)
    start_note = spell_in_table(tonic, table)
    start = list(table).index(start_note)
    notes = [table[(start + offset) % CHROMATIC_SIZE] for offset in range(CHROMATIC_SIZE)]
    notes.append(start_note)
    return notes


def build_scale(tonic: str, pattern: str) -> list[str]:
    """
    Walk pattern from tonic and collect the notes.

    The table is chosen from the tonic as written, the whole pattern is
    always consumed, and the tonic closes the scale. It is appended only
    if the walk did not already land on it.

    Args:
        tonic: Starting note, any case, sharp or flat
        pattern: Interval codes, e.g. 'MMmMMMm'

    Returns:
        len(pattern) + 1 notes when the walk ends on the tonic,
        len(pattern) + 2 otherwise
    """
    codes = parse_pattern(pattern)
    table = select_chromatic_table(tonic)
    start_note = spell_in_table(tonic, table)

    notes = [start_note]
    current = start_note
    for code in codes:
        current = step(table, current, code)
        notes.append(current)

    if notes[-1] != start_note:
        notes.append(start_note)
    return notes


def chromatic_scale(tonic: str = "C") -> list[str]:
    """Sharp-spelled chromatic scale from tonic: 'C' -> C C# D ... B C."""
    return build_chromatic_scale(tonic, SHARP_CHROMATIC)


def flat_chromatic_scale(tonic: str = "C") -> list[str]:
    """Flat-spelled chromatic scale from tonic: 'C' -> C Db D ... B C."""
    return build_chromatic_scale(tonic, FLAT_CHROMATIC)


def find_chromatic_scale(tonic: str) -> list[str]:
    """Chromatic scale from tonic, flat-spelled for flat-preferred tonics."""
    return build_chromatic_scale(tonic, select_chromatic_table(tonic))


def scale(tonic: str, pattern: str) -> list[str]:
    """
    Build the scale for tonic and pattern.

    scale('C', 'MMmMMMm') -> C D E F G A B C
    """
    return build_scale(tonic, pattern)
