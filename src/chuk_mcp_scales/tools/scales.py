"""
Scale tools - MCP tools for building and browsing scales.

Tools for chromatic scales, single interval steps, scales from raw
patterns, and named scales from the catalog.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_scales.catalog import ScaleCatalog
from chuk_mcp_scales.constants import ErrorMessages, Spelling
from chuk_mcp_scales.core.errors import UnknownScaleError
from chuk_mcp_scales.core.scale import (
    build_chromatic_scale,
    build_scale,
    chromatic_table,
    select_chromatic_table,
    spell_in_table,
    step,
    table_spelling,
)
from chuk_mcp_scales.models.scale import ScaleResult

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _parse_spelling(spelling: str) -> Spelling:
    try:
        return Spelling(spelling.lower())
    except ValueError:
        raise ValueError(ErrorMessages.UNKNOWN_SPELLING.format(spelling=spelling)) from None


def register_scale_tools(
    mcp: ChukMCPServer,
    catalog: ScaleCatalog,
) -> dict[str, Any]:
    """
    Register scale tools with the MCP server.

    Args:
        mcp: The MCP server instance
        catalog: The scale catalog

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_chromatic_scale(tonic: str = "C", spelling: str | None = None) -> str:
        """
        Get the 13-note chromatic scale starting from a tonic.

        Args:
            tonic: Starting note (e.g., 'C', 'f#', 'Bb')
            spelling: 'sharp' or 'flat'. Omit to pick from the tonic
                (F, Bb, Eb, Ab, Db, Gb, their lower-case forms and d, g, c use flats)

        Returns:
            JSON string with the notes and the spelling used

        Example:
            music_chromatic_scale(tonic="Eb")
        """
        try:
            if spelling is None:
                table = select_chromatic_table(tonic)
            else:
                table = chromatic_table(_parse_spelling(spelling))

            return json.dumps(
                {
                    "status": "success",
                    "tonic": tonic,
                    "spelling": table_spelling(table).value,
                    "notes": build_chromatic_scale(tonic, table),
                }
            )
        except Exception as e:
            logger.exception("Failed to build chromatic scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_chromatic_scale"] = music_chromatic_scale

    @mcp.tool  # type: ignore[arg-type]
    async def music_step(note: str, interval: str, spelling: str = "sharp") -> str:
        """
        Get the note one interval above another.

        Args:
            note: Starting note (re-spelled to match the spelling)
            interval: 'm' (half step), 'M' (whole step) or 'A' (augmented second)
            spelling: 'sharp' or 'flat'

        Returns:
            JSON string with the resulting note

        Example:
            music_step(note="D", interval="A")
        """
        try:
            table = chromatic_table(_parse_spelling(spelling))
            current = spell_in_table(note, table)
            return json.dumps(
                {
                    "status": "success",
                    "from": current,
                    "interval": interval,
                    "note": step(table, current, interval),
                }
            )
        except Exception as e:
            logger.exception("Failed to step")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_step"] = music_step

    @mcp.tool  # type: ignore[arg-type]
    async def music_scale(tonic: str, pattern: str) -> str:
        """
        Build a scale from a tonic and an interval pattern.

        Each pattern character is one step: 'm' half step, 'M' whole step,
        'A' augmented second. The scale starts and ends on the tonic.

        Args:
            tonic: Starting note (e.g., 'C', 'd', 'Bb')
            pattern: Interval codes (e.g., 'MMmMMMm' for major)

        Returns:
            JSON string with the scale

        Example:
            music_scale(tonic="D", pattern="MMmMMMm")
        """
        try:
            result = ScaleResult(
                tonic=tonic,
                pattern=pattern,
                spelling=table_spelling(select_chromatic_table(tonic)),
                notes=build_scale(tonic, pattern),
            )
            return json.dumps({"status": "success", "scale": result.model_dump(mode="json")})
        except Exception as e:
            logger.exception("Failed to build scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_scale"] = music_scale

    @mcp.tool  # type: ignore[arg-type]
    async def music_named_scale(tonic: str, name: str) -> str:
        """
        Build a named scale from the catalog.

        Args:
            tonic: Starting note (e.g., 'A', 'g')
            name: Scale name or alias (e.g., 'major', 'dorian', 'harmonic-minor')

        Returns:
            JSON string with the scale

        Example:
            music_named_scale(tonic="A", name="harmonic-minor")
        """
        try:
            result = catalog.build(tonic, name)
            return json.dumps({"status": "success", "scale": result.model_dump(mode="json")})
        except UnknownScaleError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to build named scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_named_scale"] = music_named_scale

    @mcp.tool  # type: ignore[arg-type]
    async def music_list_scales(tag: str | None = None) -> str:
        """
        List available named scales.

        Args:
            tag: Optional filter by tag ('mode', 'pentatonic', 'minor', ...)

        Returns:
            JSON string with list of scale summaries

        Example:
            music_list_scales(tag="mode")
        """
        try:
            scales = catalog.list_scales(tag=tag)
            return json.dumps(
                {
                    "status": "success",
                    "scales": [s.to_summary() for s in scales],
                    "count": len(scales),
                }
            )
        except Exception as e:
            logger.exception("Failed to list scales")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_list_scales"] = music_list_scales

    @mcp.tool  # type: ignore[arg-type]
    async def music_describe_scale(name: str) -> str:
        """
        Get detailed information about a named scale.

        Args:
            name: Scale name or alias

        Returns:
            JSON string with the pattern, span and an example on C

        Example:
            music_describe_scale(name="lydian")
        """
        try:
            definition = catalog.get_scale(name)
            if definition is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.UNKNOWN_SCALE.format(name=name)}
                )

            return json.dumps(
                {
                    "status": "success",
                    "scale": {
                        **definition.to_summary(),
                        "steps": len(definition.pattern),
                        "semitones": definition.semitones,
                        "closes_octave": definition.closes_octave,
                        "example": build_scale("C", definition.pattern),
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to describe scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_describe_scale"] = music_describe_scale

    return tools
