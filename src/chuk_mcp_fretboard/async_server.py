#!/usr/bin/env python3
"""
Async Fretboard MCP Server using chuk-mcp-server

This server provides MCP tools for exploring the guitar fretboard:
- Listing chord qualities and scales (built-in plus project catalog)
- Mapping scales and chords onto the neck
- Searching playable chord voicings with fingering
- Harmonizing scales into diatonic chords
- Exporting strummed voicings to MIDI files
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_fretboard.catalog import CatalogLoader
from chuk_mcp_fretboard.tools import (
    register_fretboard_tools,
    register_harmony_tools,
    register_voicing_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-fretboard")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
CATALOG_DIR = BASE_PATH / "catalog"
OUTPUT_DIR = BASE_PATH / "output"

catalog = CatalogLoader(project_path=CATALOG_DIR)

# Register all tools
fretboard_tools = register_fretboard_tools(mcp, catalog)
voicing_tools = register_voicing_tools(mcp, catalog, OUTPUT_DIR)
harmony_tools = register_harmony_tools(mcp, catalog)

# Export tool functions for direct access
fretboard_list_scales = fretboard_tools["fretboard_list_scales"]
fretboard_list_chords = fretboard_tools["fretboard_list_chords"]
fretboard_scale_notes = fretboard_tools["fretboard_scale_notes"]
fretboard_chord_notes = fretboard_tools["fretboard_chord_notes"]

fretboard_chord_voicings = voicing_tools["fretboard_chord_voicings"]
fretboard_export_voicing_midi = voicing_tools["fretboard_export_voicing_midi"]

fretboard_harmonize_scale = harmony_tools["fretboard_harmonize_scale"]

logger.info("CHUK Fretboard MCP Server initialized")
logger.info(f"  Catalog dir: {CATALOG_DIR}")
logger.info(f"  Output dir: {OUTPUT_DIR}")
