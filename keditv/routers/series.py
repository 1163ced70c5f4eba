"""
Series API endpoints.
Show-level views over the grouped catalog.
"""
from fastapi import APIRouter, Query, HTTPException
from typing import Optional

from keditv.services.catalog import get_catalog_service
from keditv.services.series_grouping import representative_items, sorted_seasons

router = APIRouter(prefix="/api/series", tags=["series"])


@router.get("")
async def list_series(
    type: Optional[str] = Query("Series", description="Only groups of this type; empty for all"),
):
    """
    One representative record per group.
    Series are collapsed to their latest episode; other records stand alone.
    """
    groups = get_catalog_service().catalog.groups
    items = representative_items(groups)
    keys = list(groups.keys())

    entries = [
        {"key": key, "item": item}
        for key, item in zip(keys, items)
        if not type or item.type == type
    ]
    return {"series": entries, "total": len(entries)}


@router.get("/{key:path}")
async def get_series(key: str):
    """Group detail with seasons, highest season first."""
    group = get_catalog_service().catalog.groups.get(key)
    if not group:
        raise HTTPException(status_code=404, detail="Series not found")

    return {
        "key": group.key,
        "representative": group.representative,
        "episode_count": len(group.all_items),
        "seasons": sorted_seasons(group),
    }
