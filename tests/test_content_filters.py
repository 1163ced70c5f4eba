"""
Tests for catalog filtering.
"""
import pytest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent))

from keditv.models.content import ContentRowFilters, YearFilter
from keditv.services.content_filters import (
    apply_live_tv_filters,
    apply_radio_filters,
    apply_simple_filters,
    filter_content,
    paginate,
)


@pytest.fixture
def catalog(make_item):
    return [
        make_item(id=1, name="Kanal 7", language="tur", media="Live", type="TV", quality="FHD"),
        make_item(id=2, name="The Great Movie", type="Movie", category="Movies",
                  quality="4K", platform="Netflix", year="2023"),
        make_item(id=3, name="Old Movie", type="Movie", category="Movies",
                  platform="Amazon Prime", year="1999", language="eng"),
        make_item(id=4, name="Breaking Bad", type="Series", season="1", episode="5"),
        make_item(id=5, name=None, type="Radio", category="Music", language="tur"),
    ]


def ids(items):
    return [item.id for item in items]


class TestFilterContent:

    def test_no_filters_match_all(self, catalog):
        assert ids(filter_content(catalog, ContentRowFilters())) == [1, 2, 3, 4, 5]

    def test_language_case_insensitive(self, catalog):
        result = filter_content(catalog, ContentRowFilters(language=["TUR"]))
        assert ids(result) == [1, 5]

    def test_multi_select_category_and_quality(self, catalog):
        filters = ContentRowFilters(category=["movies"], quality=["4k", "fhd"])
        assert ids(filter_content(catalog, filters)) == [2]

    def test_platform_normalized(self, catalog):
        filters = ContentRowFilters(platform=["amazon-prime"])
        assert ids(filter_content(catalog, filters)) == [3]

    def test_media_and_type_exact(self, catalog):
        assert ids(filter_content(catalog, ContentRowFilters(media="Live"))) == [1]
        assert ids(filter_content(catalog, ContentRowFilters(type="Movie"))) == [2, 3]

    def test_name_substring_skips_unnamed(self, catalog):
        assert ids(filter_content(catalog, ContentRowFilters(name="movie"))) == [2, 3]

    def test_year_bounds_only_apply_to_dated_items(self, catalog):
        filters = ContentRowFilters(year=YearFilter(after="2000"))
        assert ids(filter_content(catalog, filters)) == [1, 2, 4, 5]

        filters = ContentRowFilters(year=YearFilter(before="2000"))
        assert ids(filter_content(catalog, filters)) == [1, 3, 4, 5]

    def test_season_and_episode(self, catalog):
        filters = ContentRowFilters(season="1", episode="5")
        assert ids(filter_content(catalog, filters)) == [4]


class TestPageFilters:

    def test_simple_filters_all(self, catalog):
        assert len(apply_simple_filters(catalog)) == 5

    def test_simple_filters_platform_with_spaces(self, catalog):
        assert ids(apply_simple_filters(catalog, platform="Amazon Prime")) == [3]

    def test_simple_filters_decade(self, catalog):
        assert ids(apply_simple_filters(catalog, year="1990s")) == [3]

    def test_simple_filters_exact_year(self, catalog):
        assert ids(apply_simple_filters(catalog, year="2023")) == [2]

    def test_live_tv_filters(self, catalog):
        assert ids(apply_live_tv_filters(catalog, quality="fhd", language="tur")) == [1]

    def test_radio_filters(self, catalog):
        assert ids(apply_radio_filters(catalog, category="music")) == [5]


class TestPaginate:

    def test_pages(self):
        page, total = paginate(list(range(45)), page=3, page_size=20)
        assert page == list(range(40, 45))
        assert total == 3

    def test_page_past_end(self):
        page, total = paginate([1, 2], page=5, page_size=20)
        assert page == []
        assert total == 1
