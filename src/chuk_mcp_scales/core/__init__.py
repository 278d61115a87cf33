"""
Core scale primitives.

These are the pure building blocks everything else composes on:
- SHARP_CHROMATIC / FLAT_CHROMATIC: The two aligned 12-note tables
- PitchClass: The 12 chromatic pitch classes (0-11)
- step: One interval up from a note within a table
- chromatic_scale / flat_chromatic_scale / find_chromatic_scale: 13-note chromatic scales
- scale: A tonic walked through an interval pattern
"""

from chuk_mcp_scales.core.errors import (
    InvalidIntervalCodeError,
    InvalidNoteError,
    InvalidTableError,
    NoteNotFoundError,
    ScaleError,
    UnknownScaleError,
)
from chuk_mcp_scales.core.pitch import (
    FLAT_CHROMATIC,
    SHARP_CHROMATIC,
    PitchClass,
    parse_interval_code,
    parse_pattern,
)
from chuk_mcp_scales.core.scale import (
    CHROMATIC_PATTERN,
    build_chromatic_scale,
    build_scale,
    chromatic_scale,
    chromatic_table,
    find_chromatic_scale,
    flat_chromatic_scale,
    normalize_tonic,
    scale,
    select_chromatic_table,
    spell_in_table,
    step,
    table_spelling,
)

__all__ = [
    # Pitch
    "SHARP_CHROMATIC",
    "FLAT_CHROMATIC",
    "PitchClass",
    "parse_interval_code",
    "parse_pattern",
    # Scale
    "CHROMATIC_PATTERN",
    "normalize_tonic",
    "spell_in_table",
    "select_chromatic_table",
    "table_spelling",
    "chromatic_table",
    "step",
    "build_chromatic_scale",
    "build_scale",
    "chromatic_scale",
    "flat_chromatic_scale",
    "find_chromatic_scale",
    "scale",
    # Errors
    "ScaleError",
    "InvalidNoteError",
    "InvalidIntervalCodeError",
    "InvalidTableError",
    "NoteNotFoundError",
    "UnknownScaleError",
]
