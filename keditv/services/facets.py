"""
Filter facets.
Summarizes which filter values exist for each content type in a catalog.
"""
from datetime import datetime, timezone
from typing import Optional

from keditv.models.content import CONTENT_TYPES, ContentItem, FiltersSummary, TypeFilters
from keditv.services.turkish_sort import sort_strings_turkish


def _distinct(values: list[Optional[str]]) -> list[str]:
    return sort_strings_turkish(list({value for value in values if value}))


def build_type_filters(items: list[ContentItem]) -> TypeFilters:
    years = {item.year for item in items if item.year}
    return TypeFilters(
        count=len(items),
        category=_distinct([item.category for item in items]),
        quality=_distinct([item.quality for item in items]),
        platform=_distinct([item.platform for item in items]),
        year=sorted(years, reverse=True),
        language=_distinct([item.language for item in items]),
    )


def build_filters(items: list[ContentItem], generated: Optional[datetime] = None) -> FiltersSummary:
    """
    Build the facet summary for a catalog.

    Only content types that occur in the catalog are listed. Records
    without a type are counted in total_entries only.
    """
    by_type: dict[str, list[ContentItem]] = {}
    for item in items:
        if item.type:
            by_type.setdefault(item.type, []).append(item)

    generated = generated or datetime.now(timezone.utc)
    return FiltersSummary(
        generated=generated.isoformat(),
        total_entries=len(items),
        types={
            content_type: build_type_filters(by_type[content_type])
            for content_type in CONTENT_TYPES
            if content_type in by_type
        },
    )
