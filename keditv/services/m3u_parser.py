"""
M3U Parser Service.
Turns raw M3U playlist text into classified ContentItem records.
"""
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import logging

from keditv.models.content import ContentItem, SOURCE_IPTV
from keditv.services.classifier import classify

logger = logging.getLogger(__name__)

EXTINF_PREFIX = "#EXTINF:"
EXTM3U_HEADER = "#EXTM3U"
# str.strip() keeps U+FEFF, so a byte-order mark is removed separately
BYTE_ORDER_MARK = "\ufeff"

# Attribute values are read independently so their order on the line does not matter
GROUP_TITLE_PATTERN = re.compile(r'group-title="([^"]*)"')
TVG_NAME_PATTERN = re.compile(r'tvg-name="([^"]*)"')
TVG_LOGO_PATTERN = re.compile(r'tvg-logo="([^"]*)"')


@dataclass(frozen=True)
class PlaylistEntry:
    """An #EXTINF line and the stream URL paired with it."""
    metadata: str
    url: str


@dataclass(frozen=True)
class PlaylistAttributes:
    """The attributes read from an #EXTINF line."""
    group_title: str = ""
    tvg_name: str = ""
    tvg_logo: Optional[str] = None


def is_valid_playlist(text: str) -> bool:
    """Check whether text looks like an M3U playlist."""
    return text.strip().lstrip(BYTE_ORDER_MARK).lstrip().startswith(EXTM3U_HEADER) or EXTINF_PREFIX in text


def tokenize_entries(text: str) -> list[PlaylistEntry]:
    """
    Pair every #EXTINF line with the line that follows it.

    Lines are stripped and blank lines dropped first, so blank lines between
    metadata and URL are ignored. The line after an #EXTINF line is always
    taken as its URL. A trailing #EXTINF line gets an empty URL.
    """
    lines = [line.strip().strip(BYTE_ORDER_MARK).strip() for line in text.split("\n")]
    lines = [line for line in lines if line]

    entries = []
    i = 0
    while i < len(lines):
        line = lines[i]
        if line.startswith(EXTINF_PREFIX):
            url = lines[i + 1] if i + 1 < len(lines) else ""
            if not url:
                logger.debug(f"EXTINF line without URL: {line[:80]}")
            entries.append(PlaylistEntry(metadata=line, url=url))
            i += 2
        else:
            i += 1

    return entries


def _attribute(pattern: re.Pattern, line: str) -> Optional[str]:
    match = pattern.search(line)
    return match.group(1) if match else None


def extract_attributes(line: str) -> PlaylistAttributes:
    """Read group-title, tvg-name and tvg-logo from an #EXTINF line."""
    return PlaylistAttributes(
        group_title=_attribute(GROUP_TITLE_PATTERN, line) or "",
        tvg_name=_attribute(TVG_NAME_PATTERN, line) or "",
        tvg_logo=_attribute(TVG_LOGO_PATTERN, line),
    )


def build_item(
    position: int,
    attributes: PlaylistAttributes,
    url: str,
    source: str = SOURCE_IPTV,
) -> ContentItem:
    """Assemble the record for the entry at a 1-based position."""
    fields = classify(attributes.group_title, attributes.tvg_name)
    return ContentItem(
        id=position,
        name=fields.name,
        language=fields.language,
        media=fields.media,
        type=fields.type,
        category=fields.category,
        quality=fields.quality,
        platform=fields.platform,
        year=fields.year,
        season=fields.season,
        episode=fields.episode,
        logo=attributes.tvg_logo,
        url=url,
        source=source,
    )


def parse_playlist(text: str, source: str = SOURCE_IPTV) -> list[ContentItem]:
    """
    Parse M3U text into classified records.

    Never raises on malformed entries: missing attributes give null fields
    and a missing URL gives an empty string.
    """
    items = [
        build_item(position, extract_attributes(entry.metadata), entry.url, source)
        for position, entry in enumerate(tokenize_entries(text), start=1)
    ]
    logger.info(f"Parsed {len(items)} playlist entries")
    return items


class M3UParser:
    """Parse M3U playlists into records tagged with one source."""

    def __init__(self, source: str = SOURCE_IPTV):
        self.source = source

    def parse_text(self, text: str) -> list[ContentItem]:
        return parse_playlist(text, source=self.source)


def read_playlist_file(filepath: str | Path) -> str:
    """
    Read a local M3U file as text.

    A leading byte-order mark is dropped by the utf-8-sig codec.

    Raises:
        FileNotFoundError: the file does not exist
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"M3U file not found: {filepath}")

    logger.info(f"Reading M3U file: {filepath}")
    return filepath.read_text(encoding='utf-8-sig', errors='ignore')
