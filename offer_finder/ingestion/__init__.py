"""
Feed ingestion (CSV files -> row mappings and offer records).
"""

from .feed_loader import FeedLoadError, SourceFeed, load_feed, load_catalog_rows, load_offer_feeds

__all__ = ["FeedLoadError", "SourceFeed", "load_feed", "load_catalog_rows", "load_offer_feeds"]
