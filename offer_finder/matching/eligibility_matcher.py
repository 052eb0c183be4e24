"""
Eligibility matching: is the selected card listed on an offer?

An offer lists eligible cards per kind (credit / debit synonyms) and sometimes
in a mixed column whose entries say which kind they are ("... Debit Card").
A blanket sentinel ("All CC" / "All DC") makes every card of that kind eligible.
"""

from typing import Iterable, List, Mapping, Optional

from offer_finder.config.settings import DEFAULT_SETTINGS, MatchingSettings
from offer_finder.models import CardIdentity, CardKind, MatchedOffer, OfferRecord
from offer_finder.parsers import canonicalize, split_base_and_variant, split_eligibility_list
from offer_finder.utils.fields import resolve_column
from offer_finder.utils.logging_config import logger
from offer_finder.utils.normalization import normalize_text


def classify_mixed_entry(entry: str) -> Optional[CardKind]:
    """Kind named by a mixed-column entry, or None when it names neither."""
    lower = entry.lower()
    if "debit" in lower:
        return CardKind.DEBIT
    if "credit" in lower:
        return CardKind.CREDIT
    return None


def eligibility_entries(
    row: Mapping[str, str],
    kind: CardKind,
    settings: Optional[MatchingSettings] = None,
    include_mixed: bool = True
) -> List[str]:
    """
    Raw eligibility entries of one kind for a feed row.

    The kind's own column (first non-blank synonym) comes first, followed by
    the mixed-column entries classified as that kind. When the kind's column
    is the mixed column itself, entries naming the other kind are left out.
    """
    settings = settings or DEFAULT_SETTINGS
    column = resolve_column(row, settings.columns_for(kind.value))
    entries = split_eligibility_list(row[column]) if column else []

    if not include_mixed or not settings.mixed_field:
        return entries

    if column == settings.mixed_field:
        return [entry for entry in entries if classify_mixed_entry(entry) in (None, kind)]

    for entry in split_eligibility_list(row.get(settings.mixed_field)):
        if classify_mixed_entry(entry) is kind:
            entries.append(entry)

    return entries


def is_blanket_sentinel(entry: str, kind: CardKind, settings: Optional[MatchingSettings] = None) -> bool:
    """True for "All CC" (credit) / "All DC" (debit), compared after normalization."""
    settings = settings or DEFAULT_SETTINGS
    sentinel = settings.sentinels.get(kind.value, "")
    return bool(sentinel) and normalize_text(entry) == sentinel


def match_offer(
    offer: OfferRecord,
    selected: CardIdentity,
    settings: Optional[MatchingSettings] = None
) -> Optional[MatchedOffer]:
    """
    Decides whether `offer` is eligible for `selected`.

    Returns:
        MatchedOffer carrying the matching entry's variant qualifier (or "" for
        blanket eligibility), or None when the card is not listed.
    """
    settings = settings or DEFAULT_SETTINGS
    entries = eligibility_entries(offer.row, selected.kind, settings)

    if any(is_blanket_sentinel(entry, selected.kind, settings) for entry in entries):
        return MatchedOffer(offer=offer, source_id=offer.source_id, variant_note="")

    for entry in entries:
        base, variant = split_base_and_variant(entry)
        key = normalize_text(canonicalize(base, settings))
        if key and key == selected.normalized_key:
            return MatchedOffer(offer=offer, source_id=offer.source_id, variant_note=variant)

    return None


def match_offers(
    offers: Iterable[OfferRecord],
    selected: CardIdentity,
    settings: Optional[MatchingSettings] = None
) -> List[MatchedOffer]:
    """All offers of one source that the selected card is eligible for, in feed order."""
    matches = []
    for offer in offers:
        matched = match_offer(offer, selected, settings)
        if matched is not None:
            matches.append(matched)

    logger.debug(f"'{selected.canonical_name}' matched {len(matches)} offers")
    return matches
