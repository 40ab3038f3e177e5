"""
Tests for MCP tools.

Tests the MCP tool implementations for catalog discovery, note
positions, voicings, MIDI export and harmonization.
"""

import json
from pathlib import Path

import pytest
from mido import MidiFile

from chuk_mcp_fretboard.catalog import CatalogLoader
from chuk_mcp_fretboard.tools import (
    register_fretboard_tools,
    register_harmony_tools,
    register_voicing_tools,
)


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def catalog() -> CatalogLoader:
    return CatalogLoader()


class TestFretboardTools:
    """Tests for catalog and note-position tools."""

    def test_registration(self, catalog: CatalogLoader) -> None:
        """All tools reach the server."""
        mcp = MockMCPServer("test")
        tools = register_fretboard_tools(mcp, catalog)
        assert set(tools) == set(mcp.tools) == {
            "fretboard_list_scales",
            "fretboard_list_chords",
            "fretboard_scale_notes",
            "fretboard_chord_notes",
        }

    @pytest.mark.asyncio
    async def test_list_scales(self, catalog: CatalogLoader) -> None:
        tools = register_fretboard_tools(MockMCPServer("test"), catalog)
        data = json.loads(await tools["fretboard_list_scales"]())
        assert data["status"] == "success"
        assert data["count"] == 12
        assert data["scales"][0] == {"name": "Major (Ionian)", "intervals": [0, 2, 4, 5, 7, 9, 11]}

    @pytest.mark.asyncio
    async def test_list_chords(self, catalog: CatalogLoader) -> None:
        tools = register_fretboard_tools(MockMCPServer("test"), catalog)
        data = json.loads(await tools["fretboard_list_chords"]())
        assert data["status"] == "success"
        assert data["count"] == 32
        minor7 = next(c for c in data["chords"] if c["name"] == "Minor 7")
        assert minor7["symbol"] == "m7"

    @pytest.mark.asyncio
    async def test_scale_notes(self, catalog: CatalogLoader) -> None:
        tools = register_fretboard_tools(MockMCPServer("test"), catalog)
        data = json.loads(await tools["fretboard_scale_notes"](root="A", scale="Minor Pentatonic"))
        assert data["status"] == "success"
        assert data["notes"] == ["A", "C", "D", "E", "G"]
        assert data["intervals"] == ["R", "b3", "4", "5", "b7"]
        assert data["count"] == len(data["positions"])
        open_a = {"string": 5, "fret": 0, "note": "A", "interval": 0, "is_root": True}
        assert open_a in data["positions"]

    @pytest.mark.asyncio
    async def test_scale_notes_errors(self, catalog: CatalogLoader) -> None:
        tools = register_fretboard_tools(MockMCPServer("test"), catalog)
        data = json.loads(await tools["fretboard_scale_notes"](root="H", scale="Dorian"))
        assert data["status"] == "error"
        assert "Unknown root" in data["message"]

        data = json.loads(await tools["fretboard_scale_notes"](root="C", scale="Nope"))
        assert data["status"] == "error"
        assert "not found" in data["message"]

    @pytest.mark.asyncio
    async def test_chord_notes(self, catalog: CatalogLoader) -> None:
        tools = register_fretboard_tools(MockMCPServer("test"), catalog)
        data = json.loads(await tools["fretboard_chord_notes"](root="E", chord="Dominant 7"))
        assert data["status"] == "success"
        assert data["notes"] == ["E", "G#", "B", "D"]
        assert all(p["interval"] in (0, 4, 7, 10) for p in data["positions"])

    @pytest.mark.asyncio
    async def test_chord_notes_unknown_chord(self, catalog: CatalogLoader) -> None:
        tools = register_fretboard_tools(MockMCPServer("test"), catalog)
        data = json.loads(await tools["fretboard_chord_notes"](root="E", chord="Nope"))
        assert data["status"] == "error"


class TestVoicingTools:
    """Tests for voicing search and MIDI export tools."""

    @pytest.mark.asyncio
    async def test_chord_voicings(self, catalog: CatalogLoader, temp_dir: Path) -> None:
        tools = register_voicing_tools(MockMCPServer("test"), catalog, temp_dir)
        data = json.loads(await tools["fretboard_chord_voicings"](root="C", chord="Major"))
        assert data["status"] == "success"
        assert data["chord"] == "C"
        assert 0 < data["count"] <= 12
        first = data["voicings"][0]
        assert first["id"] == "0-1-0-2-3--1"
        assert first["name"] == "C (Open)"
        assert len(first["strings"]) == 6

    @pytest.mark.asyncio
    async def test_chord_voicings_limit(self, catalog: CatalogLoader, temp_dir: Path) -> None:
        tools = register_voicing_tools(MockMCPServer("test"), catalog, temp_dir)
        data = json.loads(
            await tools["fretboard_chord_voicings"](root="A", chord="Minor 7", limit=2)
        )
        assert data["chord"] == "Am7"
        assert data["count"] <= 2

    @pytest.mark.asyncio
    async def test_chord_voicings_errors(self, catalog: CatalogLoader, temp_dir: Path) -> None:
        tools = register_voicing_tools(MockMCPServer("test"), catalog, temp_dir)
        data = json.loads(await tools["fretboard_chord_voicings"](root="Zz", chord="Major"))
        assert data["status"] == "error"
        data = json.loads(await tools["fretboard_chord_voicings"](root="C", chord="Nope"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_export_top_voicing(self, catalog: CatalogLoader, temp_dir: Path) -> None:
        """Default export writes the top-ranked shape."""
        tools = register_voicing_tools(MockMCPServer("test"), catalog, temp_dir)
        data = json.loads(await tools["fretboard_export_voicing_midi"](root="C", chord="Major"))
        assert data["status"] == "success"
        assert data["voicing"]["id"] == "0-1-0-2-3--1"

        path = Path(data["path"])
        assert path == temp_dir / "C.mid"
        assert path.exists()
        loaded = MidiFile(str(path))
        note_ons = [m for m in loaded.tracks[0] if m.type == "note_on" and m.velocity > 0]
        assert len(note_ons) == 5

    @pytest.mark.asyncio
    async def test_export_named_voicing(self, catalog: CatalogLoader, temp_dir: Path) -> None:
        tools = register_voicing_tools(MockMCPServer("test"), catalog, temp_dir)
        listing = json.loads(await tools["fretboard_chord_voicings"](root="F", chord="Major"))
        target = listing["voicings"][-1]["id"]

        data = json.loads(
            await tools["fretboard_export_voicing_midi"](
                root="F", chord="Major", voicing_id=target, output_name="f_shape"
            )
        )
        assert data["status"] == "success"
        assert data["voicing"]["id"] == target
        assert (temp_dir / "f_shape.mid").exists()

    @pytest.mark.asyncio
    async def test_export_unknown_voicing(self, catalog: CatalogLoader, temp_dir: Path) -> None:
        tools = register_voicing_tools(MockMCPServer("test"), catalog, temp_dir)
        data = json.loads(
            await tools["fretboard_export_voicing_midi"](
                root="C", chord="Major", voicing_id="9-9-9-9-9-9"
            )
        )
        assert data["status"] == "error"
        assert "not found" in data["message"]


class TestHarmonyTools:
    """Tests for harmonization tools."""

    @pytest.mark.asyncio
    async def test_harmonize(self, catalog: CatalogLoader) -> None:
        tools = register_harmony_tools(MockMCPServer("test"), catalog)
        data = json.loads(
            await tools["fretboard_harmonize_scale"](root="C", scale="Major (Ionian)", level="7th")
        )
        assert data["status"] == "success"
        assert data["count"] == 7
        assert data["chords"][4]["quality"] == "Dominant 7"
        assert data["chords"][6]["degree"] == "viiø"
        assert "voicing" not in data["chords"][0]

    @pytest.mark.asyncio
    async def test_harmonize_with_voicings(self, catalog: CatalogLoader) -> None:
        tools = register_harmony_tools(MockMCPServer("test"), catalog)
        data = json.loads(
            await tools["fretboard_harmonize_scale"](
                root="C", scale="Major (Ionian)", include_voicings=True
            )
        )
        assert data["status"] == "success"
        first = data["chords"][0]["voicing"]
        assert first["id"] == "0-1-0-2-3--1"
        assert data["chords"][1]["voicing"]["name"].startswith("Dm")

    @pytest.mark.asyncio
    async def test_harmonize_alt_previews_as_major(self, catalog: CatalogLoader) -> None:
        """Pentatonic stacks outside the catalog still get a shape."""
        tools = register_harmony_tools(MockMCPServer("test"), catalog)
        data = json.loads(
            await tools["fretboard_harmonize_scale"](
                root="C", scale="Major Pentatonic", include_voicings=True
            )
        )
        assert data["chords"][0]["quality"] == "Alt"
        assert data["chords"][0]["voicing"] is not None

    @pytest.mark.asyncio
    async def test_harmonize_errors(self, catalog: CatalogLoader) -> None:
        tools = register_harmony_tools(MockMCPServer("test"), catalog)
        data = json.loads(
            await tools["fretboard_harmonize_scale"](root="C", scale="Major (Ionian)", level="15th")
        )
        assert data["status"] == "error"
        assert "Invalid harmony level" in data["message"]

        data = json.loads(await tools["fretboard_harmonize_scale"](root="C", scale="Nope"))
        assert data["status"] == "error"
