"""
Scale errors.

All errors derive from ScaleError, which is a ValueError so callers that
already handle bad musical input as ValueError keep working.
"""

from __future__ import annotations

from collections.abc import Sequence

from chuk_mcp_scales.constants import ErrorMessages


class ScaleError(ValueError):
    """Base class for scale computation errors."""


class InvalidNoteError(ScaleError):
    """A note name whose letter or accidental is not recognised."""

    def __init__(self, note: str) -> None:
        self.note = note
        super().__init__(ErrorMessages.INVALID_NOTE.format(note=note))


class InvalidIntervalCodeError(ScaleError):
    """A pattern character that is not one of m, M, A."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(ErrorMessages.INVALID_INTERVAL_CODE.format(code=code))


class NoteNotFoundError(ScaleError, LookupError):
    """
    A note is missing from the chromatic table being stepped through.

    This means a note was spelled for one table and looked up in the other,
    which is a bug in the caller rather than bad user input.
    """

    def __init__(self, note: str, table: Sequence[str]) -> None:
        self.note = note
        self.table = tuple(table)
        super().__init__(ErrorMessages.NOTE_NOT_FOUND.format(note=note, table=list(table)))


class UnknownScaleError(ScaleError, LookupError):
    """A scale name that is not in the catalog."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(ErrorMessages.UNKNOWN_SCALE.format(name=name))


class InvalidTableError(ScaleError):
    """A chromatic table too short to step through."""

    def __init__(self, table: Sequence[str]) -> None:
        self.table = tuple(table)
        super().__init__(ErrorMessages.INVALID_TABLE.format(size=len(table)))
