"""
Turkish-aware alphabetical sorting.

Sorts by the Turkish alphabet:
A B C Ç D E F G Ğ H I İ J K L M N O Ö P R S Ş T U Ü V Y Z
Comparison ignores case, so 'ı' sorts with 'I' and 'i' with 'İ'.
"""
import unicodedata
from functools import cmp_to_key

from keditv.models.content import ContentItem

TURKISH_ALPHABET = "ABCÇDEFGĞHIİJKLMNOÖPRSŞTUÜVYZ"

_RANK = {letter: index for index, letter in enumerate(TURKISH_ALPHABET)}

# Turkish casing differs from str.upper() for the dotted and dotless i
_TURKISH_UPPER = str.maketrans({"i": "İ", "ı": "I"})


def _base_letter(char: str) -> str:
    """Drop accents from letters outside the Turkish alphabet (Â -> A, É -> E)."""
    if char in _RANK:
        return char
    decomposed = unicodedata.normalize("NFD", char)
    return "".join(c for c in decomposed if not unicodedata.combining(c)) or char


def _letter_key(char: str) -> tuple[int, int, str]:
    char = _base_letter(char)
    if char in _RANK:
        return (1, _RANK[char], "")
    if char.isalpha():
        # Letters outside the Turkish alphabet (Q, W, X, ...) go after Z
        return (2, 0, char)
    # Digits, spaces and punctuation go first, in code point order
    return (0, 0, char)


def turkish_sort_key(text: str) -> tuple:
    upper = (text or "").translate(_TURKISH_UPPER).upper()
    return tuple(_letter_key(char) for char in upper)


def turkish_compare(a: str, b: str) -> int:
    """Negative if a sorts before b, positive if after, 0 if equal."""
    key_a = turkish_sort_key(a)
    key_b = turkish_sort_key(b)
    return (key_a > key_b) - (key_a < key_b)


def sort_by_name_turkish(items: list[ContentItem]) -> list[ContentItem]:
    """New list of items sorted by name. Items without a name come first."""
    return sorted(items, key=lambda item: turkish_sort_key(item.name or ""))


def sort_strings_turkish(strings: list[str]) -> list[str]:
    return sorted(strings, key=cmp_to_key(turkish_compare))
