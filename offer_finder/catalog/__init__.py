"""
Card catalog construction.
"""

from .catalog_builder import CatalogBuilder, build_catalog, build_catalog_from_offers

__all__ = ["CatalogBuilder", "build_catalog", "build_catalog_from_offers"]
