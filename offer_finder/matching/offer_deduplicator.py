"""
Cross-source offer deduplication.

The same promotion is often listed verbatim by several merchant feeds. Each
offer gets a content key built from its normalized title, description, link
and image; the first offer to claim a key survives, later repeats are dropped.
"""

from typing import Iterable, List, MutableSet, Optional

from offer_finder.config.settings import DEFAULT_SETTINGS, MatchingSettings
from offer_finder.models import MatchedOffer, OfferRecord
from offer_finder.utils.fields import resolve_field
from offer_finder.utils.logging_config import logger
from offer_finder.utils.merge import merge_first_wins
from offer_finder.utils.normalization import normalize_text, normalize_url

KEY_SEPARATOR = "\x1f"


def offer_identity_key(offer: OfferRecord, settings: Optional[MatchingSettings] = None) -> str:
    """Content key of an offer; used only for dedup, never displayed."""
    settings = settings or DEFAULT_SETTINGS
    row = offer.row

    title = normalize_text(resolve_field(row, settings.columns_for("title")))
    desc = normalize_text(resolve_field(row, settings.columns_for("desc")))
    link = normalize_url(resolve_field(row, settings.columns_for("link")))
    image = normalize_url(resolve_field(row, settings.columns_for("image")))

    return KEY_SEPARATOR.join([title, desc, link, image])


def dedupe(
    matches: Iterable[MatchedOffer],
    seen: MutableSet[str],
    settings: Optional[MatchingSettings] = None
) -> List[MatchedOffer]:
    """
    Drops offers whose key is already in `seen` and records the keys of the rest.

    `seen` belongs to one aggregation pass: share it across every source of a
    selection, in a fixed source order, and start a fresh one per selection.
    """
    kept = []
    for match in matches:
        key = offer_identity_key(match.offer, settings)
        if merge_first_wins(seen, key):
            kept.append(match)
        else:
            logger.debug(f"Dropping repeated offer from '{match.source_id}'")

    return kept
