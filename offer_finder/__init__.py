"""
Card Offer Finder: resolves bank card names across merchant offer feeds.
"""

__version__ = "0.1.0"
