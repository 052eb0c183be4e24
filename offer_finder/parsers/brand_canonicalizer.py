"""
Brand spelling canonicalization ("Hdfc" -> "HDFC", "Makemytrip" -> "MakeMyTrip").
"""

import re
from functools import lru_cache
from typing import Optional, Pattern, Tuple

from offer_finder.config.settings import DEFAULT_SETTINGS, MatchingSettings


@lru_cache(maxsize=32)
def _compile_rewrites(table: Tuple[Tuple[str, str], ...]) -> Tuple[Tuple[Pattern, str], ...]:
    """One whole-word, case-insensitive pattern per configured brand."""
    return tuple(
        (re.compile(r'\b' + re.escape(spelling) + r'\b', re.IGNORECASE), canonical)
        for spelling, canonical in table
    )


def canonicalize(text: Optional[str], settings: Optional[MatchingSettings] = None) -> str:
    """
    Rewrites known brand abbreviations to their canonical casing.

    Matches on word boundaries only, so a word that merely contains the
    letters of a brand is left untouched.
    """
    if not text:
        return ""

    settings = settings or DEFAULT_SETTINGS
    result = str(text)
    for pattern, canonical in _compile_rewrites(tuple(settings.brand_forms.items())):
        result = pattern.sub(canonical, result)

    return result
