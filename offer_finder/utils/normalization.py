"""
Centralized normalization utilities for the Card Offer Finder.

Every "same text" comparison in the system goes through `normalize_text`:
catalog identity keys, eligibility matching and offer dedup keys.
"""

import re
import unicodedata
from typing import Optional, Tuple

_NON_WORD = re.compile(r'[^\w\s]|_')
_WHITESPACE = re.compile(r'\s+')
_URL_SCHEME = re.compile(r'^https?://')


def normalize_text(text: Optional[str]) -> str:
    """
    Reduces a name or comparison key to its canonical form.

    Transformation pipeline:
    1. Unicode compatibility decomposition (NFKD) and lowercase
    2. Replace anything that is not a letter, digit or whitespace with a space;
       accents split off by the decomposition become spaces too ("résumé" -> "re sume")
    3. Collapse whitespace runs and trim

    Total over its input: None or "" yields "".
    """
    if not text:
        return ""

    norm = unicodedata.normalize('NFKD', str(text)).lower()
    norm = _NON_WORD.sub(' ', norm)
    norm = _WHITESPACE.sub(' ', norm)

    return norm.strip()


def normalize_url(url: Optional[str]) -> str:
    """Case-folds a URL and strips its scheme, a leading 'www.' and one trailing slash."""
    if not url:
        return ""

    norm = str(url).strip().lower()
    norm = _URL_SCHEME.sub('', norm)
    if norm.startswith('www.'):
        norm = norm[4:]
    if norm.endswith('/'):
        norm = norm[:-1]

    return norm


def locale_sort_key(text: str) -> Tuple[str, str]:
    """
    Sort key approximating locale-aware collation for display names.

    Primary order ignores case and accents; ties put lowercase before uppercase.
    """
    decomposed = unicodedata.normalize('NFKD', text)
    base = ''.join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), text.swapcase()
