"""
Content catalog data models.
Classified playlist records and the show-level groups built from them.
"""
from pydantic import BaseModel, Field
from typing import Optional


SOURCE_IPTV = "IPTV"

# Media values
MEDIA_LIVE = "Live"
MEDIA_ON_DEMAND = "On Demand"

# Type values
TYPE_TV = "TV"
TYPE_SERIES = "Series"
TYPE_MOVIE = "Movie"
TYPE_RADIO = "Radio"
CONTENT_TYPES = (TYPE_TV, TYPE_SERIES, TYPE_MOVIE, TYPE_RADIO)

LANGUAGES = ("alb", "aze", "deu", "dut", "eng", "fra", "por", "tur")

CATEGORIES = (
    "Sports",
    "Movies",
    "Kids",
    "News",
    "Documentary",
    "Classic",
    "Relaxation",
    "Music",
    "Adult",
    "Language Education",
)

QUALITIES = ("4K", "UHD", "FHD")

PLATFORMS = (
    "Amazon Prime",
    "BluTV",
    "Disney+",
    "Exxen",
    "GAİN",
    "HBO Max",
    "Netflix",
    "Paramount Plus",
    "Tabii",
    "Yeşilçam",
    "Apple TV",
)

UNKNOWN_SEASON = "unknown"


class ContentItem(BaseModel):
    """One classified playlist entry."""
    id: int
    name: Optional[str] = None
    language: Optional[str] = None
    media: Optional[str] = None
    type: Optional[str] = None
    category: Optional[str] = None
    quality: Optional[str] = None
    platform: Optional[str] = None
    year: Optional[str] = None
    season: Optional[str] = None
    episode: Optional[str] = None
    logo: Optional[str] = None
    url: str = ""
    source: str = SOURCE_IPTV


class GroupedSeries(BaseModel):
    """All records of one show plus the episode chosen to stand in for it."""
    key: str
    representative: ContentItem
    all_items: list[ContentItem] = Field(default_factory=list)
    seasons: dict[str, list[ContentItem]] = Field(default_factory=dict)


class SeasonBucket(BaseModel):
    """Episodes of a single season, latest episode first."""
    season: str
    episodes: list[ContentItem] = Field(default_factory=list)


# Filter models
class YearFilter(BaseModel):
    before: Optional[str] = None
    after: Optional[str] = None


class ContentRowFilters(BaseModel):
    """Filters for a content row. Empty lists and None values match everything."""
    language: list[str] = Field(default_factory=list)
    media: Optional[str] = None
    type: Optional[str] = None
    category: list[str] = Field(default_factory=list)
    quality: list[str] = Field(default_factory=list)
    platform: list[str] = Field(default_factory=list)
    name: Optional[str] = None
    year: Optional[YearFilter] = None
    season: Optional[str] = None
    episode: Optional[str] = None


class TypeFilters(BaseModel):
    """Distinct filter values available for one content type."""
    count: int = 0
    category: list[str] = Field(default_factory=list)
    quality: list[str] = Field(default_factory=list)
    platform: list[str] = Field(default_factory=list)
    year: list[str] = Field(default_factory=list)
    language: list[str] = Field(default_factory=list)


class FiltersSummary(BaseModel):
    """Facet summary of a whole catalog."""
    generated: str
    total_entries: int
    types: dict[str, TypeFilters] = Field(default_factory=dict)
