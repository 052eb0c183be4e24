"""
Offer eligibility matching and cross-source deduplication.
"""

from .eligibility_matcher import match_offer, match_offers, eligibility_entries, classify_mixed_entry, is_blanket_sentinel
from .offer_deduplicator import dedupe, offer_identity_key

__all__ = [
    "match_offer", "match_offers", "eligibility_entries", "classify_mixed_entry",
    "is_blanket_sentinel", "dedupe", "offer_identity_key",
]
