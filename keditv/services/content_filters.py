"""
Catalog filtering.
Filters used by content rows and the Movies/Series, Live TV and Radio pages.
"""
import math
import re
from typing import Optional

from keditv.models.content import ContentItem, ContentRowFilters

ALL = "all"


def _lower(value: Optional[str]) -> str:
    return (value or "").lower()


def _platform_key(value: Optional[str]) -> str:
    """Platforms compare lowercased with whitespace runs turned into '-'."""
    return re.sub(r"\s+", "-", _lower(value))


def _year(value: Optional[str]) -> int:
    match = re.match(r"\s*(\d+)", value or "")
    return int(match.group(1)) if match else 0


def _matches(selected: str, actual: Optional[str]) -> bool:
    return selected == ALL or _lower(selected) == _lower(actual)


def _matches_year(selected: str, actual: Optional[str]) -> bool:
    if selected == ALL:
        return True
    if selected.endswith("s"):
        # Decade, e.g. "2010s"
        decade = _year(selected)
        return decade <= _year(actual) < decade + 10
    return actual == selected


def filter_content(items: list[ContentItem], filters: ContentRowFilters) -> list[ContentItem]:
    """Apply a content row's filters. Unset filters match everything."""
    languages = {_lower(value) for value in filters.language}
    categories = {_lower(value) for value in filters.category}
    qualities = {_lower(value) for value in filters.quality}
    platforms = {_platform_key(value) for value in filters.platform}
    name = _lower(filters.name)

    result = []
    for item in items:
        if languages and _lower(item.language) not in languages:
            continue
        if filters.media and item.media != filters.media:
            continue
        if filters.type and item.type != filters.type:
            continue
        if categories and _lower(item.category) not in categories:
            continue
        if qualities and _lower(item.quality) not in qualities:
            continue
        if platforms and _platform_key(item.platform) not in platforms:
            continue
        if name and name not in _lower(item.name):
            continue
        if filters.year and item.year:
            if filters.year.after and _year(item.year) < _year(filters.year.after):
                continue
            if filters.year.before and _year(item.year) > _year(filters.year.before):
                continue
        if filters.season and item.season != filters.season:
            continue
        if filters.episode and item.episode != filters.episode:
            continue
        result.append(item)

    return result


def apply_simple_filters(
    items: list[ContentItem],
    category: str = ALL,
    platform: str = ALL,
    quality: str = ALL,
    year: str = ALL,
    language: str = ALL,
) -> list[ContentItem]:
    """Single-choice filters of the Movies and Series pages."""
    return [
        item for item in items
        if _matches(category, item.category)
        and (platform == ALL or _platform_key(platform) == _platform_key(item.platform))
        and _matches(quality, item.quality)
        and _matches_year(year, item.year)
        and _matches(language, item.language)
    ]


def apply_live_tv_filters(
    items: list[ContentItem],
    category: str = ALL,
    quality: str = ALL,
    language: str = ALL,
) -> list[ContentItem]:
    return [
        item for item in items
        if _matches(category, item.category)
        and _matches(quality, item.quality)
        and _matches(language, item.language)
    ]


def apply_radio_filters(
    items: list[ContentItem],
    category: str = ALL,
    language: str = ALL,
) -> list[ContentItem]:
    return [
        item for item in items
        if _matches(category, item.category) and _matches(language, item.language)
    ]


def paginate(items: list, page: int = 1, page_size: int = 20) -> tuple[list, int]:
    """Return one page of items and the total page count."""
    start = (page - 1) * page_size
    total_pages = math.ceil(len(items) / page_size) if page_size > 0 else 0
    return items[start:start + page_size], total_pages
