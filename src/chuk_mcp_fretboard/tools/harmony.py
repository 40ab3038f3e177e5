"""
Harmony tools - MCP tools for diatonic chords.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_fretboard.catalog import CatalogLoader
from chuk_mcp_fretboard.constants import HARMONY_LEVELS, ErrorMessages
from chuk_mcp_fretboard.core.chord import ChordQuality
from chuk_mcp_fretboard.core.pitch import PitchClass
from chuk_mcp_fretboard.fretboard import ordered_notes
from chuk_mcp_fretboard.harmony import harmonize
from chuk_mcp_fretboard.voicings import generate_voicings

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_harmony_tools(
    mcp: ChukMCPServer,
    catalog: CatalogLoader,
) -> dict[str, Any]:
    """
    Register harmonization tools with the MCP server.

    Args:
        mcp: The MCP server instance
        catalog: The chord/scale catalog

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_harmonize_scale(
        root: str,
        scale: str,
        level: str = "triad",
        include_voicings: bool = False,
    ) -> str:
        """
        Build the chord on every degree of a scale.

        Chords are stacked in thirds from the scale's own notes. With
        include_voicings, each chord also gets its top-ranked guitar
        shape (qualities missing from the catalog preview as Major).

        Args:
            root: Root note ('C', 'F#', 'Bb')
            scale: Scale name from fretboard_list_scales
            level: 'triad', '7th', '9th', '11th' or '13th'
            include_voicings: Attach a preview voicing per degree

        Returns:
            JSON string with one chord per scale degree

        Example:
            fretboard_harmonize_scale(root="G", scale="Major (Ionian)", level="7th")
        """
        try:
            if PitchClass.lookup(root) is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.UNKNOWN_ROOT.format(root=root)}
                )
            scale_type = catalog.get_scale(scale)
            if scale_type is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.SCALE_NOT_FOUND.format(name=scale)}
                )
            if level not in HARMONY_LEVELS:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.INVALID_LEVEL.format(
                            level=level, levels=", ".join(HARMONY_LEVELS)
                        ),
                    }
                )

            chords = harmonize(ordered_notes(root, scale_type.intervals), level)

            results: list[dict[str, Any]] = []
            for chord in chords:
                entry: dict[str, Any] = chord.model_dump()
                if include_voicings:
                    quality = catalog.get_chord(chord.quality) or ChordQuality.MAJOR
                    voicings = generate_voicings(
                        chord.root, quality.intervals, quality.name, symbol=quality.symbol
                    )
                    entry["voicing"] = voicings[0].model_dump() if voicings else None
                results.append(entry)

            return json.dumps(
                {
                    "status": "success",
                    "root": root,
                    "scale": scale_type.name,
                    "level": level,
                    "chords": results,
                    "count": len(results),
                }
            )
        except Exception as e:
            logger.exception("Failed to harmonize scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_harmonize_scale"] = fretboard_harmonize_scale

    return tools
