"""
Voicing tools - MCP tools for chord shapes.

Tools for searching playable voicings and exporting them as MIDI.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_mcp_fretboard.catalog import CatalogLoader
from chuk_mcp_fretboard.compiler import voicing_to_midi
from chuk_mcp_fretboard.constants import MAX_VOICINGS, ErrorMessages
from chuk_mcp_fretboard.core.pitch import PitchClass
from chuk_mcp_fretboard.voicings import generate_voicings

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_voicing_tools(
    mcp: ChukMCPServer,
    catalog: CatalogLoader,
    output_dir: Path,
) -> dict[str, Any]:
    """
    Register chord voicing tools with the MCP server.

    Args:
        mcp: The MCP server instance
        catalog: The chord/scale catalog
        output_dir: Directory for MIDI output files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_chord_voicings(
        root: str,
        chord: str,
        limit: int = MAX_VOICINGS,
    ) -> str:
        """
        Find playable guitar shapes for a chord.

        Voicings are ranked with the root in the bass first, then by
        position on the neck. Each string reports its fret (-1 muted,
        0 open), note, interval and suggested finger.

        Args:
            root: Root note ('C', 'F#', 'Bb')
            chord: Chord quality name from fretboard_list_chords
            limit: Maximum voicings to return (1-12)

        Returns:
            JSON string with ranked voicings

        Example:
            fretboard_chord_voicings(root="F", chord="Major", limit=4)
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

            voicings = generate_voicings(
                root, quality.intervals, quality.name, symbol=quality.symbol
            )
            voicings = voicings[: max(1, min(limit, MAX_VOICINGS))]
            return json.dumps(
                {
                    "status": "success",
                    "chord": quality.chord_name(PitchClass.parse(root)),
                    "voicings": [v.model_dump() for v in voicings],
                    "count": len(voicings),
                }
            )
        except Exception as e:
            logger.exception("Failed to generate voicings")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_chord_voicings"] = fretboard_chord_voicings

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_export_voicing_midi(
        root: str,
        chord: str,
        voicing_id: str | None = None,
        output_name: str | None = None,
        tempo: int = 120,
    ) -> str:
        """
        Export a strummed voicing as a MIDI file.

        Args:
            root: Root note ('C', 'F#', 'Bb')
            chord: Chord quality name from fretboard_list_chords
            voicing_id: Voicing id from fretboard_chord_voicings (default: top ranked)
            output_name: Optional output filename (without .mid extension)
            tempo: Tempo in BPM

        Returns:
            JSON string with the output path

        Example:
            fretboard_export_voicing_midi(root="G", chord="Major", voicing_id="3-0-0-0-2-3")
        """
        try:
            root_pc = PitchClass.lookup(root)
            if root_pc is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.UNKNOWN_ROOT.format(root=root)}
                )
            quality = catalog.get_chord(chord)
            if quality is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.CHORD_NOT_FOUND.format(name=chord)}
                )

            chord_name = quality.chord_name(root_pc)
            voicings = generate_voicings(
                root, quality.intervals, quality.name, symbol=quality.symbol
            )
            if not voicings:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.NO_VOICINGS.format(chord=chord_name)}
                )

            if voicing_id is None:
                voicing = voicings[0]
            else:
                match = next((v for v in voicings if v.id == voicing_id), None)
                if match is None:
                    return json.dumps(
                        {
                            "status": "error",
                            "message": ErrorMessages.VOICING_NOT_FOUND.format(
                                voicing_id=voicing_id, chord=chord_name
                            ),
                        }
                    )
                voicing = match

            filename = f"{output_name or chord_name.replace('/', '_')}.mid"
            output_path = output_dir / filename
            output_dir.mkdir(parents=True, exist_ok=True)
            voicing_to_midi(voicing, tempo_bpm=tempo).save(str(output_path))

            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_path),
                    "voicing": {"id": voicing.id, "name": voicing.name},
                    "message": f"Exported {voicing.name} to {output_path}",
                }
            )
        except Exception as e:
            logger.exception("Failed to export voicing")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_export_voicing_midi"] = fretboard_export_voicing_midi

    return tools
