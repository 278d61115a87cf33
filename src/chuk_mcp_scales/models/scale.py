"""
Scale models - named interval patterns and computed scales.

A ScaleDefinition is what lives in the catalog YAML files.
A ScaleResult is one definition (or raw pattern) applied to a tonic.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_scales.constants import CHROMATIC_SIZE, Spelling
from chuk_mcp_scales.core.pitch import parse_pattern


class ScaleDefinition(BaseModel):
    """
    A named interval pattern.

    The pattern is a string of interval codes from one degree to the next:
    m = half step, M = whole step, A = augmented second.
    """

    name: str = Field(description="Scale name (e.g., 'major', 'harmonic-minor')")
    pattern: str = Field(description="Interval codes, e.g. 'MMmMMMm'")
    description: str = Field(default="", description="Human-readable description")
    aliases: list[str] = Field(
        default_factory=list,
        description="Alternative names (e.g., 'ionian' for major)",
    )
    tags: list[str] = Field(
        default_factory=list,
        description="Grouping tags (e.g., 'mode', 'pentatonic')",
    )

    model_config = {"frozen": True}

    @field_validator("pattern")
    @classmethod
    def validate_pattern(cls, v: str) -> str:
        """Every character must be a known interval code."""
        parse_pattern(v)
        return v

    @property
    def semitones(self) -> int:
        """Total span of the pattern in semitones."""
        return sum(code.semitones for code in parse_pattern(self.pattern))

    @property
    def closes_octave(self) -> bool:
        """Whether walking the pattern lands back on the tonic."""
        return self.semitones % CHROMATIC_SIZE == 0

    def matches(self, name: str) -> bool:
        """Check a name against this scale's name and aliases, ignoring case."""
        wanted = name.strip().lower()
        return wanted == self.name.lower() or wanted in (a.lower() for a in self.aliases)

    def to_summary(self) -> dict[str, Any]:
        """Short JSON-friendly view for listings."""
        return {
            "name": self.name,
            "pattern": self.pattern,
            "description": self.description,
            "aliases": self.aliases,
            "tags": self.tags,
        }


class ScaleResult(BaseModel):
    """A computed scale."""

    tonic: str = Field(description="Tonic as the caller wrote it")
    pattern: str = Field(description="Interval codes that were walked")
    name: str | None = Field(default=None, description="Catalog name, if any")
    spelling: Spelling = Field(description="Chromatic table the notes are spelled with")
    notes: list[str] = Field(description="Note names, first and last are the tonic")

    model_config = {"frozen": True}
