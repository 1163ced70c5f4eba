"""
Series grouping.
Collapses per-episode records into one group per show, with the latest
episode as the group's representative.
"""
from typing import Optional

from keditv.models.content import (
    ContentItem,
    GroupedSeries,
    SeasonBucket,
    TYPE_SERIES,
    UNKNOWN_SEASON,
)


def _as_int(value: Optional[str]) -> int:
    """Leading-digit integer of a season/episode string, 0 when absent."""
    digits = ""
    for char in (value or "").strip():
        if not char.isdigit():
            break
        digits += char
    return int(digits) if digits else 0


def _position(item: ContentItem) -> tuple[int, int]:
    return _as_int(item.season), _as_int(item.episode)


def group_key(item: ContentItem) -> str:
    """
    Series share a key built from name, language and type. Everything else
    is keyed by its own id, so it ends up alone in its group.
    """
    if item.type == TYPE_SERIES:
        return f"{item.name}-{item.language or 'no-lang'}-{item.type}"
    return f"{item.type}-{item.id}"


def group_series(items: list[ContentItem]) -> dict[str, GroupedSeries]:
    """
    Group records by show.

    Groups keep the order in which their first record appears. The
    representative is the record with the highest (season, episode); on a
    tie the earliest record is kept.
    """
    members: dict[str, list[ContentItem]] = {}
    representatives: dict[str, ContentItem] = {}

    for item in items:
        key = group_key(item)
        if key not in members:
            members[key] = [item]
            representatives[key] = item
            continue

        members[key].append(item)
        if _position(item) > _position(representatives[key]):
            representatives[key] = item

    groups = {}
    for key, group_items in members.items():
        seasons: dict[str, list[ContentItem]] = {}
        for item in group_items:
            seasons.setdefault(item.season or UNKNOWN_SEASON, []).append(item)

        for episodes in seasons.values():
            episodes.sort(key=lambda episode: _as_int(episode.episode), reverse=True)

        groups[key] = GroupedSeries(
            key=key,
            representative=representatives[key],
            all_items=group_items,
            seasons=seasons,
        )

    return groups


def representative_items(groups: dict[str, GroupedSeries]) -> list[ContentItem]:
    """One record per group, for list views."""
    return [group.representative for group in groups.values()]


def group_for(item: ContentItem, groups: dict[str, GroupedSeries]) -> Optional[GroupedSeries]:
    """Find the group a record belongs to."""
    return groups.get(group_key(item))


def sorted_seasons(group: GroupedSeries) -> list[SeasonBucket]:
    """Season buckets, highest season first. 'unknown' counts as season 0."""
    buckets = [
        SeasonBucket(season=season, episodes=episodes)
        for season, episodes in group.seasons.items()
    ]
    buckets.sort(key=lambda bucket: _as_int(bucket.season), reverse=True)
    return buckets
