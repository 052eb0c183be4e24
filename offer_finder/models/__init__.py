"""
Data models for card identity resolution and offer aggregation.
"""

from .card import (
    CardKind, CardIdentity, CardCatalog, OfferRecord, MatchedOffer,
    RenderPolicy, OfferSource, SourceOffers, SuggestionGroup, RankedSuggestions,
)

__all__ = [
    "CardKind", "CardIdentity", "CardCatalog", "OfferRecord", "MatchedOffer",
    "RenderPolicy", "OfferSource", "SourceOffers", "SuggestionGroup", "RankedSuggestions",
]
