"""
Catalog API endpoints.
Playlist upload, content listing and filter facets.
"""
from fastapi import APIRouter, Header, Query, HTTPException, Request
from typing import Optional

from keditv.config import get_settings
from keditv.limiter import limiter
from keditv.models.content import ContentRowFilters, YearFilter
from keditv.services.catalog import (
    EmptyPlaylistError,
    InvalidPlaylistError,
    get_catalog_service,
)
from keditv.services.content_filters import filter_content, paginate
from keditv.services.facets import build_filters
from keditv.services.turkish_sort import sort_by_name_turkish

router = APIRouter(prefix="/api", tags=["catalog"])


@router.post("/playlist")
@limiter.limit(f"{get_settings().rate_limit_per_minute}/minute")
async def upload_playlist(
    request: Request,
    source_name: Optional[str] = Query(None, description="Name recorded for this playlist"),
    x_admin_key: Optional[str] = Header(None, description="Admin API key"),
):
    """
    Replace the catalog with an uploaded playlist.
    The request body is the raw M3U text.
    """
    settings = get_settings()
    if x_admin_key != settings.admin_api_key:
        raise HTTPException(status_code=401, detail="Invalid or missing admin API key")

    body = await request.body()
    text = body.decode("utf-8-sig", errors="ignore")

    service = get_catalog_service()
    try:
        catalog = service.load_text(text, source_name=source_name)
    except InvalidPlaylistError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except EmptyPlaylistError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return {
        "status": "loaded",
        "items": len(catalog.items),
        "groups": len(catalog.groups),
        "source": catalog.source_name,
    }


@router.get("/content")
async def list_content(
    language: list[str] = Query([], description="Language codes (e.g., tur, eng)"),
    category: list[str] = Query([], description="Categories (e.g., Sports, Kids)"),
    quality: list[str] = Query([], description="Qualities (4K, UHD, FHD)"),
    platform: list[str] = Query([], description="Platforms (e.g., Netflix, HBO Max)"),
    media: Optional[str] = Query(None, description="Live or On Demand"),
    type: Optional[str] = Query(None, description="TV, Series, Movie or Radio"),
    name: Optional[str] = Query(None, description="Search in names"),
    year_after: Optional[str] = Query(None, description="Earliest year"),
    year_before: Optional[str] = Query(None, description="Latest year"),
    season: Optional[str] = Query(None),
    episode: Optional[str] = Query(None),
    sort: Optional[str] = Query(None, description="'name' for alphabetical order"),
    page: int = Query(1, ge=1, description="Page number"),
    per_page: Optional[int] = Query(None, ge=1, description="Results per page"),
):
    """
    List catalog records with filtering and pagination.

    - **language**, **category**, **quality**, **platform**: repeat to select several
    - **year_after** / **year_before**: only applied to records that have a year
    - **sort**: `name` sorts with the Turkish alphabet; default is playlist order
    """
    settings = get_settings()
    per_page = min(per_page or settings.default_page_size, settings.max_page_size)

    year = None
    if year_after or year_before:
        year = YearFilter(after=year_after, before=year_before)

    filters = ContentRowFilters(
        language=language,
        media=media,
        type=type,
        category=category,
        quality=quality,
        platform=platform,
        name=name,
        year=year,
        season=season,
        episode=episode,
    )

    items = filter_content(get_catalog_service().catalog.items, filters)
    if sort == "name":
        items = sort_by_name_turkish(items)

    page_items, total_pages = paginate(items, page, per_page)
    return {
        "items": page_items,
        "total": len(items),
        "page": page,
        "per_page": per_page,
        "total_pages": total_pages,
        "has_more": page < total_pages,
    }


@router.get("/content/{item_id}")
async def get_content_item(item_id: int):
    """Get a single record by id."""
    item = get_catalog_service().catalog.get_item(item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Content not found")
    return item


@router.get("/filters")
async def list_filters():
    """Filter values available for each content type."""
    return build_filters(get_catalog_service().catalog.items)
