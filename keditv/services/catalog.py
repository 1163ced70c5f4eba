"""
Catalog service.
Holds the catalog built from the most recently loaded playlist.
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional
import logging

from keditv.config import get_settings
from keditv.models.content import ContentItem, GroupedSeries
from keditv.services.m3u_parser import M3UParser, is_valid_playlist, read_playlist_file
from keditv.services.series_grouping import group_series

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Base error for playlists the catalog refuses to load."""


class InvalidPlaylistError(CatalogError):
    """The text is not an M3U playlist."""


class EmptyPlaylistError(CatalogError):
    """The playlist is valid but contains no entries."""


@dataclass(frozen=True)
class Catalog:
    """One loaded playlist: its records and the groups built from them."""
    items: list[ContentItem] = field(default_factory=list)
    groups: dict[str, GroupedSeries] = field(default_factory=dict)
    source_name: Optional[str] = None
    loaded_at: Optional[datetime] = None
    by_id: dict[int, ContentItem] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # Frozen dataclass, so the index is set through object.__setattr__
        object.__setattr__(self, "by_id", {item.id: item for item in self.items})

    def get_item(self, item_id: int) -> Optional[ContentItem]:
        return self.by_id.get(item_id)


class CatalogService:
    """
    Loads playlists into an in-memory catalog.

    Every load builds a complete new Catalog and replaces the previous one
    in a single assignment.
    """

    def __init__(self, source: Optional[str] = None):
        self.parser = M3UParser(source or get_settings().content_source)
        self._catalog = Catalog()

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def load_text(self, text: str, source_name: Optional[str] = None) -> Catalog:
        """
        Parse playlist text and replace the current catalog.

        Raises:
            InvalidPlaylistError: text is not an M3U playlist
            EmptyPlaylistError: no entries were found; the current catalog is kept
        """
        if not is_valid_playlist(text):
            logger.warning(f"Rejected invalid playlist: {source_name or '<text>'}")
            raise InvalidPlaylistError("Not a valid M3U playlist")

        items = self.parser.parse_text(text)
        if not items:
            logger.warning(f"Playlist has no content: {source_name or '<text>'}")
            raise EmptyPlaylistError("Playlist contains no entries")

        groups = group_series(items)
        self._catalog = Catalog(
            items=items,
            groups=groups,
            source_name=source_name,
            loaded_at=datetime.now(timezone.utc),
        )
        logger.info(f"Catalog loaded: {len(items)} items in {len(groups)} groups")
        return self._catalog

    def load_file(self, filepath: str | Path) -> Catalog:
        """Load a local M3U file into the catalog."""
        filepath = Path(filepath)
        text = read_playlist_file(filepath)
        return self.load_text(text, source_name=filepath.name)

    def stats(self) -> dict:
        """Record counts per content type."""
        catalog = self._catalog
        by_type: dict[str, int] = {}
        for item in catalog.items:
            key = item.type or "unknown"
            by_type[key] = by_type.get(key, 0) + 1

        return {
            "total_items": len(catalog.items),
            "total_groups": len(catalog.groups),
            "by_type": by_type,
            "source": catalog.source_name,
            "loaded_at": catalog.loaded_at.isoformat() if catalog.loaded_at else None,
        }


# Singleton
_catalog_service: Optional[CatalogService] = None


def get_catalog_service() -> CatalogService:
    """Get or create catalog service singleton."""
    global _catalog_service
    if _catalog_service is None:
        _catalog_service = CatalogService()
    return _catalog_service
