"""
Pytest configuration and fixtures for catalog backend tests.
"""
import pytest
import sys
from pathlib import Path

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def sample_m3u_content():
    """Sample M3U content covering live, movie, series and radio entries."""
    return """#EXTM3U
#EXTINF:-1 group-title="[TR]" tvg-name="TR:Kanal 7" tvg-logo="http://x/logo.png",Kanal 7
http://example.com/live1
#EXTINF:-1 group-title="SINEMA | NETFLIX | 4K | 2024" tvg-name="The Great Movie (2023)" tvg-logo="http://logo/x.jpg",The Great Movie
http://example.com/m1
#EXTINF:-1 group-title="DIZI" tvg-name="Breaking Bad S01E05" tvg-logo="",Breaking Bad S01E05
http://example.com/ep5

#EXTINF:-1 group-title="DIZI" tvg-name="Breaking Bad S02E01" tvg-logo="",Breaking Bad S02E01
http://example.com/ep201
#EXTINF:-1 group-title="DIZI" tvg-name="Breaking Bad S01E01" tvg-logo="",Breaking Bad S01E01
http://example.com/ep1
#EXTINF:-1 group-title="RADYO" tvg-name="Power FM",Power FM
http://example.com/radio1
"""


@pytest.fixture
def sample_m3u_file(sample_m3u_content, tmp_path):
    """Create a temporary M3U file for testing."""
    m3u_file = tmp_path / "iptv.m3u"
    m3u_file.write_text(sample_m3u_content, encoding="utf-8")
    return m3u_file


@pytest.fixture
def make_item():
    """Factory for ContentItem records with sensible defaults."""
    from keditv.models.content import ContentItem

    counter = {"id": 0}

    def _make(**fields):
        counter["id"] += 1
        fields.setdefault("id", counter["id"])
        fields.setdefault("url", f"http://example.com/{fields['id']}")
        return ContentItem(**fields)

    return _make
