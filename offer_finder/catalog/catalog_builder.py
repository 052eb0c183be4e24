"""
Card catalog construction.

Card names arrive in many spellings across feeds ("Hdfc Regalia",
"HDFC Regalia (Visa Signature)"). The catalog keeps one entry per normalized
key and per kind, displayed with the first spelling seen for that key so the
suggestion list does not flicker between reloads.
"""

from typing import Dict, Iterable, List, Mapping, Optional

from offer_finder.config.settings import DEFAULT_SETTINGS, MatchingSettings
from offer_finder.matching.eligibility_matcher import eligibility_entries, is_blanket_sentinel
from offer_finder.models import CardCatalog, CardIdentity, CardKind, OfferRecord
from offer_finder.utils.logging_config import logger
from offer_finder.utils.merge import merge_first_wins
from offer_finder.utils.normalization import locale_sort_key


class CatalogBuilder:
    """
    Accumulates card names from any number of feeds into a CardCatalog.

    Usage:
        builder = CatalogBuilder()
        builder.add_rows(all_cards_rows)
        catalog = builder.build()
    """

    def __init__(self, settings: Optional[MatchingSettings] = None):
        self.settings = settings or DEFAULT_SETTINGS
        self._entries: Dict[CardKind, Dict[str, CardIdentity]] = {
            CardKind.CREDIT: {},
            CardKind.DEBIT: {},
        }

    def add_name(self, raw_name: str, kind: CardKind) -> bool:
        """
        Registers one raw card name. Returns True if it introduced a new card.

        Names that normalize to nothing, and blanket sentinels, are ignored.
        """
        if is_blanket_sentinel(raw_name, kind, self.settings):
            return False

        identity = CardIdentity.from_raw(raw_name, kind, self.settings)
        if not identity.normalized_key:
            return False

        return merge_first_wins(self._entries[kind], identity.normalized_key, identity)

    def add_rows(self, rows: Iterable[Mapping[str, str]], include_mixed: bool = False) -> int:
        """
        Harvests the credit and debit eligibility columns of every row.

        Returns:
            Number of new cards registered.
        """
        added = 0
        for row in rows:
            for kind in CardKind:
                for raw_name in eligibility_entries(row, kind, self.settings, include_mixed=include_mixed):
                    if self.add_name(raw_name, kind):
                        added += 1
        return added

    def build(self) -> CardCatalog:
        """Snapshot of the catalog, each kind sorted by display name."""
        return CardCatalog(
            credit=self._sorted(CardKind.CREDIT),
            debit=self._sorted(CardKind.DEBIT),
        )

    def _sorted(self, kind: CardKind) -> List[CardIdentity]:
        return sorted(self._entries[kind].values(), key=lambda card: locale_sort_key(card.canonical_name))


def build_catalog(
    sources: Iterable[Iterable[Mapping[str, str]]],
    settings: Optional[MatchingSettings] = None
) -> CardCatalog:
    """
    Builds the card catalog from one or more card feeds (sequences of rows).

    Sources are consumed in order; the first spelling seen for a card wins.
    """
    builder = CatalogBuilder(settings)
    for rows in sources:
        builder.add_rows(rows)

    catalog = builder.build()
    logger.debug(f"Catalog built: {len(catalog.credit)} credit, {len(catalog.debit)} debit cards")
    return catalog


def build_catalog_from_offers(
    feeds: Iterable[Iterable[OfferRecord]],
    settings: Optional[MatchingSettings] = None
) -> CardCatalog:
    """
    Catalog of cards that currently have at least one listed offer.

    Harvests the credit, debit and mixed eligibility columns of every offer,
    skipping blanket sentinels. Drives the quick-pick card chips.
    """
    builder = CatalogBuilder(settings)
    for offers in feeds:
        builder.add_rows((offer.row for offer in offers), include_mixed=True)

    catalog = builder.build()
    logger.debug(f"Quick-pick catalog built: {len(catalog.credit)} credit, {len(catalog.debit)} debit cards")
    return catalog
