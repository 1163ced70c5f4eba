"""
Tests for filter facets.
"""
from datetime import datetime, timezone
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent))

from keditv.services.facets import build_filters
from keditv.services.m3u_parser import parse_playlist


class TestBuildFilters:

    def test_summary_from_playlist(self, sample_m3u_content):
        items = parse_playlist(sample_m3u_content)
        generated = datetime(2025, 1, 1, tzinfo=timezone.utc)

        summary = build_filters(items, generated=generated)

        assert summary.generated == "2025-01-01T00:00:00+00:00"
        assert summary.total_entries == 6
        assert list(summary.types) == ["TV", "Series", "Movie", "Radio"]
        assert summary.types["Series"].count == 3
        assert summary.types["TV"].language == ["tur"]

        movie = summary.types["Movie"]
        assert movie.category == ["Movies"]
        assert movie.quality == ["4K"]
        assert movie.platform == ["Netflix"]
        assert movie.year == ["2023"]

    def test_years_descending_and_distinct(self, make_item):
        items = [
            make_item(type="Movie", year="1999"),
            make_item(type="Movie", year="2024"),
            make_item(type="Movie", year="2010"),
            make_item(type="Movie", year="2024"),
        ]
        summary = build_filters(items)
        assert summary.types["Movie"].year == ["2024", "2010", "1999"]

    def test_untyped_items_only_counted_in_total(self, make_item):
        summary = build_filters([make_item(), make_item(type="TV")])

        assert summary.total_entries == 2
        assert list(summary.types) == ["TV"]

    def test_empty_catalog(self):
        summary = build_filters([])
        assert summary.total_entries == 0
        assert summary.types == {}
