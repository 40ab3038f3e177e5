"""
Fretboard tools - MCP tools for catalog discovery and note positions.

Tools for listing chord qualities and scales and for mapping a scale or
chord onto the neck.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_fretboard.catalog import CatalogLoader
from chuk_mcp_fretboard.constants import ErrorMessages
from chuk_mcp_fretboard.core.pitch import PitchClass, interval_name
from chuk_mcp_fretboard.fretboard import ordered_notes, project_notes

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_fretboard_tools(
    mcp: ChukMCPServer,
    catalog: CatalogLoader,
) -> dict[str, Any]:
    """
    Register catalog and note-position tools with the MCP server.

    Args:
        mcp: The MCP server instance
        catalog: The chord/scale catalog

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_list_scales() -> str:
        """
        List available scales.

        Returns:
            JSON string with scale names and intervals

        Example:
            fretboard_list_scales()
        """
        try:
            scales = catalog.list_scales()
            return json.dumps(
                {
                    "status": "success",
                    "scales": [{"name": s.name, "intervals": list(s.intervals)} for s in scales],
                    "count": len(scales),
                }
            )
        except Exception as e:
            logger.exception("Failed to list scales")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_list_scales"] = fretboard_list_scales

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_list_chords() -> str:
        """
        List available chord qualities.

        Returns:
            JSON string with chord quality names, symbols and intervals

        Example:
            fretboard_list_chords()
        """
        try:
            chords = catalog.list_chords()
            return json.dumps(
                {
                    "status": "success",
                    "chords": [
                        {"name": c.name, "symbol": c.symbol, "intervals": list(c.intervals)}
                        for c in chords
                    ],
                    "count": len(chords),
                }
            )
        except Exception as e:
            logger.exception("Failed to list chords")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_list_chords"] = fretboard_list_chords

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_scale_notes(root: str, scale: str) -> str:
        """
        Map a scale onto the fretboard.

        Returns the scale's notes in order plus every position up to
        fret 15 where one of them sounds.

        Args:
            root: Root note ('C', 'F#', 'Bb')
            scale: Scale name from fretboard_list_scales

        Returns:
            JSON string with ordered notes and fretboard positions

        Example:
            fretboard_scale_notes(root="A", scale="Minor Pentatonic")
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

            positions = project_notes(root, scale_type.intervals)
            return json.dumps(
                {
                    "status": "success",
                    "root": root,
                    "scale": scale_type.name,
                    "notes": ordered_notes(root, scale_type.intervals),
                    "intervals": [interval_name(i % 12) for i in scale_type.intervals],
                    "positions": [p.model_dump() for p in positions],
                    "count": len(positions),
                }
            )
        except Exception as e:
            logger.exception("Failed to map scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_scale_notes"] = fretboard_scale_notes

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_chord_notes(root: str, chord: str) -> str:
        """
        Map every chord tone onto the fretboard.

        Args:
            root: Root note ('C', 'F#', 'Bb')
            chord: Chord quality name from fretboard_list_chords

        Returns:
            JSON string with chord tones and fretboard positions

        Example:
            fretboard_chord_notes(root="E", chord="Dominant 7")
        """
        try:
            if PitchClass.lookup(root) is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.UNKNOWN_ROOT.format(root=root)}
                )
            quality = catalog.get_chord(chord)
            if quality is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.CHORD_NOT_FOUND.format(name=chord)}
                )

            positions = project_notes(root, quality.intervals)
            return json.dumps(
                {
                    "status": "success",
                    "root": root,
                    "chord": quality.name,
                    "notes": ordered_notes(root, quality.intervals),
                    "positions": [p.model_dump() for p in positions],
                    "count": len(positions),
                }
            )
        except Exception as e:
            logger.exception("Failed to map chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_chord_notes"] = fretboard_chord_notes

    return tools
