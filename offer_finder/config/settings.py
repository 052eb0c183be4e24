"""
Matching configuration for the Card Offer Finder.

Everything here is data: column synonyms, brand spellings, sentinels and
ranking constants. The core modules receive a `MatchingSettings` instance
(defaulting to DEFAULT_SETTINGS) and never read the environment themselves;
`load_settings()` is the only place environment overrides are applied.
"""

import os
from typing import Dict, List, Tuple

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from offer_finder.utils.logging_config import logger


# Accepted column names per logical field, in priority order
FIELD_SYNONYMS: Dict[str, List[str]] = {
    "credit": ["Eligible Credit Cards", "Eligible Cards"],
    "debit": ["Eligible Debit Cards", "Applicable Debit Cards"],
    "title": ["Offer Title", "Title", "Offer"],
    "image": ["Image", "Credit Card Image", "Offer Image"],
    "link": ["Link", "Offer Link"],
    "desc": ["Description", "Details", "Offer Description", "Flight Benefit"],
    "coupon": ["Coupon Code", "Coupon", "Code", "Promo Code"],
    "terms": ["Terms and Conditions", "Terms & Conditions", "T&C"],
}

# Column listing credit and debit cards together; entries are classified by wording
MIXED_ELIGIBILITY_FIELD = "Eligible Cards"

# Whole-word, case-insensitive brand rewrites
BRAND_CANONICAL_FORMS: Dict[str, str] = {
    "makemytrip": "MakeMyTrip",
    "icici": "ICICI",
    "hdfc": "HDFC",
    "sbi": "SBI",
    "idfc": "IDFC",
    "pnb": "PNB",
    "rbl": "RBL",
    "yes": "YES",
}

BLANKET_SENTINELS: Dict[str, str] = {
    "credit": "all cc",
    "debit": "all dc",
}

# Substrings in the raw query that put debit suggestions first
DEBIT_HINTS: Tuple[str, ...] = ("debit cards", "debit card", "debit", "dc")

FUZZY_THRESHOLD = 0.3
MAX_SUGGESTIONS = 50
WORD_WEIGHT = 0.7
SIMILARITY_WEIGHT = 0.3
EXACT_MATCH_SCORE = 100.0


class MatchingSettings(BaseModel):
    """Immutable bundle of every tunable used by the resolution engine."""
    model_config = ConfigDict(frozen=True)

    field_synonyms: Dict[str, List[str]] = Field(default_factory=lambda: {k: list(v) for k, v in FIELD_SYNONYMS.items()})
    mixed_field: str = MIXED_ELIGIBILITY_FIELD
    brand_forms: Dict[str, str] = Field(default_factory=lambda: dict(BRAND_CANONICAL_FORMS))
    sentinels: Dict[str, str] = Field(default_factory=lambda: dict(BLANKET_SENTINELS))
    debit_hints: Tuple[str, ...] = DEBIT_HINTS
    fuzzy_threshold: float = Field(default=FUZZY_THRESHOLD, ge=0.0, le=1.0)
    max_suggestions: int = Field(default=MAX_SUGGESTIONS, gt=0)
    word_weight: float = Field(default=WORD_WEIGHT, ge=0.0)
    similarity_weight: float = Field(default=SIMILARITY_WEIGHT, ge=0.0)
    exact_match_score: float = EXACT_MATCH_SCORE

    @field_validator('field_synonyms')
    @classmethod
    def validate_synonyms(cls, v):
        """Every logical field needs at least one accepted column name."""
        missing = [name for name in FIELD_SYNONYMS if not v.get(name)]
        if missing:
            raise ValueError(f"Missing column synonyms for: {', '.join(missing)}")
        return v

    def columns_for(self, field: str) -> List[str]:
        """Accepted column names for a logical field."""
        return self.field_synonyms.get(field, [])


DEFAULT_SETTINGS = MatchingSettings()


_ENV_OVERRIDES = {
    "OFFER_FINDER_FUZZY_THRESHOLD": "fuzzy_threshold",
    "OFFER_FINDER_MAX_SUGGESTIONS": "max_suggestions",
    "OFFER_FINDER_WORD_WEIGHT": "word_weight",
    "OFFER_FINDER_SIMILARITY_WEIGHT": "similarity_weight",
}


def load_settings() -> MatchingSettings:
    """
    Builds settings from defaults plus environment overrides (.env supported).

    Raises:
        pydantic.ValidationError: if an override is not a valid value.
    """
    load_dotenv()

    overrides = {}
    for env_name, field_name in _ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value is not None and value.strip():
            overrides[field_name] = value.strip()

    if overrides:
        logger.info(f"Applying matching overrides from environment: {sorted(overrides)}")
    return MatchingSettings(**overrides)


def get_data_dir(default: str = "data") -> str:
    """Directory holding the card and offer feed files."""
    load_dotenv()
    return os.getenv("OFFER_FINDER_DATA_DIR", default)

