"""
Catalog loader - chord qualities and scales available to callers.

Definitions can come from:
1. Built-in catalog (shipped with the package)
2. Project catalog (chords.yaml / scales.yaml in the user's catalog directory)

Project entries override built-ins with the same name.

File format (both files are a list under one key):

    chords:
      - name: Minor 7 Add 11
        symbol: m7add11
        intervals: [0, 3, 7, 10, 17]
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from chuk_mcp_fretboard.core.chord import CHORD_QUALITIES, ChordQuality
from chuk_mcp_fretboard.core.scale import SCALE_TYPES, ScaleType

logger = logging.getLogger(__name__)

CHORDS_FILE = "chords.yaml"
SCALES_FILE = "scales.yaml"


class CatalogLoader:
    """
    Looks up chord qualities and scales by name.

    Project files are read lazily and cached; call clear_cache() after
    editing them.
    """

    def __init__(self, project_path: Path | None = None):
        """
        Initialize the catalog loader.

        Args:
            project_path: Directory holding project chords.yaml / scales.yaml
        """
        self.project_path = project_path
        self._chords: dict[str, ChordQuality] | None = None
        self._scales: dict[str, ScaleType] | None = None

    def list_chords(self) -> list[ChordQuality]:
        """All chord qualities, built-ins first in catalog order."""
        return list(self._chord_index().values())

    def list_scales(self) -> list[ScaleType]:
        """All scales, built-ins first in catalog order."""
        return list(self._scale_index().values())

    def get_chord(self, name: str) -> ChordQuality | None:
        """
        Get a chord quality by name.

        Args:
            name: Quality name, e.g. 'Minor 7'

        Returns:
            ChordQuality if found, None otherwise
        """
        return self._chord_index().get(name)

    def get_scale(self, name: str) -> ScaleType | None:
        """
        Get a scale by name.

        Args:
            name: Scale name, e.g. 'Dorian'

        Returns:
            ScaleType if found, None otherwise
        """
        return self._scale_index().get(name)

    def clear_cache(self) -> None:
        """Forget loaded project definitions."""
        self._chords = None
        self._scales = None

    def _chord_index(self) -> dict[str, ChordQuality]:
        if self._chords is None:
            chords = dict(CHORD_QUALITIES)
            for entry in self._load_entries(CHORDS_FILE, "chords"):
                quality = self._parse_chord(entry)
                if quality is not None:
                    chords[quality.name] = quality
            self._chords = chords
        return self._chords

    def _scale_index(self) -> dict[str, ScaleType]:
        if self._scales is None:
            scales = dict(SCALE_TYPES)
            for entry in self._load_entries(SCALES_FILE, "scales"):
                scale = self._parse_scale(entry)
                if scale is not None:
                    scales[scale.name] = scale
            self._scales = scales
        return self._scales

    def _load_entries(self, filename: str, key: str) -> list[dict[str, Any]]:
        """Load the list of entries from a project file, or nothing."""
        if not self.project_path:
            return []
        path = self.project_path / filename
        if not path.exists():
            return []

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError):
            logger.warning("Skipping unreadable catalog file %s", path, exc_info=True)
            return []

        entries = data.get(key, []) if isinstance(data, dict) else []
        if not isinstance(entries, list):
            logger.warning("Catalog file %s: '%s' is not a list", path, key)
            return []
        logger.debug("Loaded %d %s from %s", len(entries), key, path)
        return [e for e in entries if isinstance(e, dict)]

    def _parse_chord(self, data: dict[str, Any]) -> ChordQuality | None:
        """Parse a chord quality from YAML data."""
        try:
            return ChordQuality(
                name=str(data["name"]),
                intervals=tuple(int(i) for i in data.get("intervals", [])),
                symbol=str(data.get("symbol", data["name"])),
            )
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Skipping chord entry %r: %s", data, e)
            return None

    def _parse_scale(self, data: dict[str, Any]) -> ScaleType | None:
        """Parse a scale from YAML data."""
        try:
            return ScaleType(
                name=str(data["name"]),
                intervals=tuple(int(i) for i in data.get("intervals", [])),
            )
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Skipping scale entry %r: %s", data, e)
            return None
