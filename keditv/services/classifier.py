"""
Playlist entry classifier.
Derives language, media, type, category, quality, platform, year,
season/episode and a display name from the group-title and tvg-name
attributes of an M3U entry.

Every rule is a pure function over its input strings. Rules inside a
function are checked in order and the first match wins.
"""
import re
from dataclasses import dataclass
from typing import Optional

from keditv.models.content import (
    MEDIA_LIVE,
    MEDIA_ON_DEMAND,
    TYPE_MOVIE,
    TYPE_RADIO,
    TYPE_SERIES,
    TYPE_TV,
)


# Uppercase Turkish letters folded onto their ASCII base letter
TURKISH_FOLD = str.maketrans({
    "İ": "I",
    "Ğ": "G",
    "Ş": "S",
    "Ç": "C",
    "Ö": "O",
    "Ü": "U",
})

LANGUAGE_CODES = {
    "TR": "tur", "TUR": "tur",
    "ALB": "alb", "AL": "alb",
    "AZ": "aze", "AZE": "aze",
    "DE": "deu", "DEU": "deu", "GER": "deu",
    "NL": "dut", "DUT": "dut", "NED": "dut",
    "EN": "eng", "ENG": "eng", "UK": "eng", "US": "eng", "USA": "eng",
    "FR": "fra", "FRA": "fra",
    "PT": "por", "POR": "por",
}

BRACKET_CODE_PATTERN = re.compile(r"\[([A-Z]{2,3})\]")
PIPE_CODE_PATTERN = re.compile(r"\|([A-Z]{2,3})\|")
LANGUAGE_CODE_PATTERN = re.compile(r"\[([A-Z]{2,3})\]|\|([A-Z]{2,3})\|")
EPISODE_TOKEN_PATTERN = re.compile(r"S\d{2,}E\d{2,}")
SEASON_EPISODE_PATTERN = re.compile(r"S(\d{2,})E(\d{2,})", re.IGNORECASE)
NAME_YEAR_PATTERN = re.compile(r"\(((?:19|20)\d{2})\)")
TITLE_YEAR_PATTERN = re.compile(r"202[0-9]")

# Name cleanup, applied in order
NAME_EPISODE_PATTERN = re.compile(r"S\d{2,}E\d{2,}", re.IGNORECASE)
NAME_YEAR_STRIP_PATTERN = re.compile(r"\s*\((?:19|20)\d{2}\)\s*")
NAME_CODE_PATTERN = re.compile(r"\s*(?:\[[A-Z0-9]+\]|\|[A-Z0-9]+\|)\s*")
NAME_PREFIX_PATTERN = re.compile(r"^[A-Z]{2,3}\s*:\s*", re.IGNORECASE)
NAME_QUALITY_PATTERN = re.compile(r"\b(?:4K|UHD|FHD|HD)\b", re.IGNORECASE)
WHITESPACE_PATTERN = re.compile(r"\s+")

CATEGORY_RULES = (
    (("SPOR",), "Sports"),
    (("SINEMA", "FILM", "CINEMA", "BIOSCOOP", "MOVIE"), "Movies"),
    (("COCUK", "KIDS", "KINDER", "ENFANT"), "Kids"),
    (("HABER", "NEWS"), "News"),
    (("BELGESEL", "DOCUMENTARE", "DOCUMANTAIRE"), "Documentary"),
    (("CLASSIC",), "Classic"),
    (("RELAXATION",), "Relaxation"),
    (("MUZIK", "MUSIQUE", "MUZIEK"), "Music"),
    (("ADULT",), "Adult"),
    (("DIL EGITIMI",), "Language Education"),
)

QUALITY_RULES = (
    ("4K", "4K"),
    ("UHD", "UHD"),
    ("FHD", "FHD"),
)

# Matched against the lowercased title
PLATFORM_RULES = (
    (("amazon",), "Amazon Prime"),
    (("blu",), "BluTV"),
    (("disney",), "Disney+"),
    (("ex-xen", "exxen"), "Exxen"),
    (("gain",), "GAİN"),
    (("hbo",), "HBO Max"),
    (("netflix", "netfliix", "netfilix"), "Netflix"),
    (("paramount-plus",), "Paramount Plus"),
    (("tabii",), "Tabii"),
    (("yesilcam",), "Yeşilçam"),
    (("apple",), "Apple TV"),
)

SERIES_MARKERS = ("DIZI", "SERIES")
MOVIE_MARKERS = ("FILM", "MOVIE", "CINEMA", "SINEMA", "BIOSCOOP")
RADIO_MARKERS = ("RADIO", "RADYO")
TURKISH_MARKERS = ("TURKCE", "TURKIYE")


@dataclass(frozen=True)
class Classification:
    """Every field the classifier derives for one entry."""
    name: Optional[str]
    language: Optional[str]
    media: Optional[str]
    type: Optional[str]
    category: Optional[str]
    quality: Optional[str]
    platform: Optional[str]
    year: Optional[str]
    season: Optional[str]
    episode: Optional[str]


def normalize_text(text: str) -> str:
    """
    Uppercase text and fold Turkish letters to ASCII.

    str.upper() maps 'i' to 'I' and 'ı' to 'I' but leaves 'İ' alone, so
    'Dİzİ' and 'dizi' both come out as 'DIZI'.
    """
    return (text or "").upper().translate(TURKISH_FOLD)


def _contains_any(text: str, markers) -> bool:
    return any(marker in text for marker in markers)


def detect_language(group_title: str) -> Optional[str]:
    """Language from a [XX] / |XXX| code in the group title."""
    title = normalize_text(group_title)

    match = LANGUAGE_CODE_PATTERN.search(title)
    if match:
        code = match.group(1) or match.group(2)
        if code in LANGUAGE_CODES:
            return LANGUAGE_CODES[code]

    if _contains_any(title, TURKISH_MARKERS):
        return "tur"

    return None


def detect_media(group_title: str) -> Optional[str]:
    title = normalize_text(group_title)

    if BRACKET_CODE_PATTERN.search(title):
        return MEDIA_LIVE
    if _contains_any(title, RADIO_MARKERS):
        return MEDIA_LIVE
    if PIPE_CODE_PATTERN.search(title):
        return MEDIA_ON_DEMAND

    return None


def detect_type(group_title: str, tvg_name: str) -> Optional[str]:
    """
    Content type. An episode token in tvg-name beats anything in the
    group title; the bracket/pipe fallback is checked on the title
    directly, not on the detected media.
    """
    title = normalize_text(group_title)
    name = normalize_text(tvg_name)

    if EPISODE_TOKEN_PATTERN.search(name):
        return TYPE_SERIES
    if _contains_any(title, SERIES_MARKERS):
        return TYPE_SERIES
    if _contains_any(title, MOVIE_MARKERS):
        return TYPE_MOVIE
    if _contains_any(title, RADIO_MARKERS):
        return TYPE_RADIO
    if BRACKET_CODE_PATTERN.search(title):
        return TYPE_TV
    if PIPE_CODE_PATTERN.search(title):
        return TYPE_MOVIE

    return None


def detect_season_episode(tvg_name: str) -> tuple[Optional[str], Optional[str]]:
    """Season and episode numbers without leading zeros, or (None, None)."""
    match = SEASON_EPISODE_PATTERN.search(tvg_name or "")
    if not match:
        return None, None
    return str(int(match.group(1))), str(int(match.group(2)))


def detect_category(group_title: str) -> Optional[str]:
    title = normalize_text(group_title)
    for markers, category in CATEGORY_RULES:
        if _contains_any(title, markers):
            return category
    return None


def detect_quality(group_title: str) -> Optional[str]:
    title = normalize_text(group_title)
    for marker, quality in QUALITY_RULES:
        if marker in title:
            return quality
    return None


def detect_platform(group_title: str) -> Optional[str]:
    title = normalize_text(group_title).lower()
    for markers, platform in PLATFORM_RULES:
        if _contains_any(title, markers):
            return platform
    return None


def detect_year(group_title: str, tvg_name: str) -> Optional[str]:
    """Parenthesized year in tvg-name, else a 202x year in the group title."""
    match = NAME_YEAR_PATTERN.search(tvg_name or "")
    if match:
        return match.group(1)

    match = TITLE_YEAR_PATTERN.search(group_title or "")
    if match:
        return match.group(0)

    return None


def extract_name(tvg_name: str) -> Optional[str]:
    """
    Display name from tvg-name.

    Strips episode tokens, parenthesized years, [XX]/|XX| codes, a leading
    country prefix ("TR:", "NL: ") and standalone quality words.
    """
    name = tvg_name or ""
    name = NAME_EPISODE_PATTERN.sub(" ", name)
    name = NAME_YEAR_STRIP_PATTERN.sub(" ", name)
    name = NAME_CODE_PATTERN.sub(" ", name)
    name = NAME_PREFIX_PATTERN.sub("", name.strip())
    name = NAME_QUALITY_PATTERN.sub(" ", name)
    name = WHITESPACE_PATTERN.sub(" ", name).strip()
    return name or None


def classify(group_title: str, tvg_name: str) -> Classification:
    """Run every rule over one entry's group-title and tvg-name."""
    season, episode = detect_season_episode(tvg_name)
    return Classification(
        name=extract_name(tvg_name),
        language=detect_language(group_title),
        media=detect_media(group_title),
        type=detect_type(group_title, tvg_name),
        category=detect_category(group_title),
        quality=detect_quality(group_title),
        platform=detect_platform(group_title),
        year=detect_year(group_title, tvg_name),
        season=season,
        episode=episode,
    )
