"""
CHUK Scales - musical scales from a tonic and an interval pattern.

    >>> from chuk_mcp_scales import scale
    >>> scale("D", "MMmMMMm")
    ['D', 'E', 'F#', 'G', 'A', 'B', 'C#', 'D']
"""

from chuk_mcp_scales.core import (
    FLAT_CHROMATIC,
    SHARP_CHROMATIC,
    InvalidIntervalCodeError,
    InvalidNoteError,
    InvalidTableError,
    NoteNotFoundError,
    ScaleError,
    UnknownScaleError,
    chromatic_scale,
    find_chromatic_scale,
    flat_chromatic_scale,
    normalize_tonic,
    scale,
    select_chromatic_table,
    step,
)

__version__ = "0.1.0"

__all__ = [
    "SHARP_CHROMATIC",
    "FLAT_CHROMATIC",
    "normalize_tonic",
    "select_chromatic_table",
    "step",
    "chromatic_scale",
    "flat_chromatic_scale",
    "find_chromatic_scale",
    "scale",
    "ScaleError",
    "InvalidNoteError",
    "InvalidIntervalCodeError",
    "InvalidTableError",
    "NoteNotFoundError",
    "UnknownScaleError",
]
