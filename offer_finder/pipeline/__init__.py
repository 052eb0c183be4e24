"""
End-to-end offer aggregation.
"""

from .offer_aggregator import OfferAggregator, aggregate_offers, has_offers

__all__ = ["OfferAggregator", "aggregate_offers", "has_offers"]
