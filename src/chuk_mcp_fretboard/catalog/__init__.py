"""
Catalog - named chord qualities and scales.

The engines only need intervals; the catalog maps the names a user
picks ('Minor 7', 'Dorian') to those intervals.
"""

from chuk_mcp_fretboard.catalog.loader import CatalogLoader

__all__ = [
    "CatalogLoader",
]
