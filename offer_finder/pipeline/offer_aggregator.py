"""
Orchestrator for the Card Offer Finder.
"""

from typing import Iterable, List, Mapping, Optional, Sequence

from offer_finder.catalog import build_catalog, build_catalog_from_offers
from offer_finder.config.settings import DEFAULT_SETTINGS, MatchingSettings
from offer_finder.config.sources import CATALOG_FILE, DEFAULT_SOURCES
from offer_finder.ingestion import FeedLoadError, SourceFeed, load_catalog_rows, load_offer_feeds
from offer_finder.matching import dedupe, match_offers
from offer_finder.models import (
    CardCatalog, CardIdentity, CardKind, OfferSource, RankedSuggestions, SourceOffers,
)
from offer_finder.query import FuzzyRanker
from offer_finder.utils.logging_config import logger


def aggregate_offers(
    selected: CardIdentity,
    feeds: Iterable[SourceFeed],
    settings: Optional[MatchingSettings] = None
) -> List[SourceOffers]:
    """
    Matches the selected card against every source and removes repeats.

    One `seen` set is threaded through all sources in the given order, so an
    offer listed by two feeds only survives in the first one. A fresh set is
    used for every call.
    """
    seen = set()
    results = []
    for source, offers in feeds:
        matches = match_offers(offers, selected, settings)
        kept = dedupe(matches, seen, settings)
        results.append(SourceOffers(source=source, matches=kept))
        logger.debug(f"{source.display_label}: {len(matches)} matched, {len(kept)} after dedup")

    return results


def has_offers(results: Sequence[SourceOffers]) -> bool:
    """True if any source has at least one offer left."""
    return any(result.matches for result in results)


class OfferAggregator:
    """
    Wires the resolution engine together for one data-load cycle.

    Responsibilities:
    1. Catalog: builds the card catalog and the quick-pick catalog once.
    2. Suggestions: ranks catalog cards against live query text.
    3. Selection: resolves a picked card into a CardIdentity.
    4. Offers: per-source, deduplicated matches for the selection.
    """

    def __init__(
        self,
        catalog_rows: Iterable[Mapping[str, str]],
        feeds: Sequence[SourceFeed],
        settings: Optional[MatchingSettings] = None
    ):
        """Builds both catalogs from already-loaded rows and offer feeds."""
        self.settings = settings or DEFAULT_SETTINGS
        self.feeds: List[SourceFeed] = [(source, list(offers)) for source, offers in feeds]
        self.ranker = FuzzyRanker(self.settings)

        self.catalog: CardCatalog = build_catalog([catalog_rows], self.settings)
        self.quick_picks: CardCatalog = build_catalog_from_offers(
            (offers for _, offers in self.feeds), self.settings
        )
        logger.info(
            f"OfferAggregator ready: {self.catalog.size} catalog cards, "
            f"{self.quick_picks.size} cards with offers, {len(self.feeds)} sources"
        )

    @classmethod
    def from_data_dir(
        cls,
        data_dir: str,
        sources: Optional[Sequence[OfferSource]] = None,
        settings: Optional[MatchingSettings] = None,
        catalog_file: str = CATALOG_FILE
    ) -> "OfferAggregator":
        """
        Loads the catalog feed and every offer feed from a directory.

        A missing or broken catalog feed is logged and yields an empty catalog;
        broken offer feeds are treated as empty by the loader.
        """
        try:
            catalog_rows = load_catalog_rows(data_dir, catalog_file)
        except FeedLoadError as e:
            logger.error(f"Card catalog load error: {e}")
            catalog_rows = []

        feeds = load_offer_feeds(sources if sources is not None else DEFAULT_SOURCES, data_dir)
        return cls(catalog_rows, feeds, settings)

    def suggest(self, query: str) -> RankedSuggestions:
        """Grouped suggestions for the current query text."""
        return self.ranker.suggest(query, self.catalog)

    def select(self, name: str, kind: CardKind) -> CardIdentity:
        """Identity for a card picked by name (suggestion or quick-pick chip)."""
        return CardIdentity.from_raw(name, kind, self.settings)

    def offers_for(self, selected: CardIdentity) -> List[SourceOffers]:
        """Deduplicated offers for the selected card, one entry per source."""
        logger.info(f"Collecting offers for '{selected.canonical_name}' ({selected.kind.value})")
        return aggregate_offers(selected, self.feeds, self.settings)
