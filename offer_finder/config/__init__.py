"""
Configuration for the Card Offer Finder.
"""

from .settings import MatchingSettings, DEFAULT_SETTINGS, load_settings, get_data_dir

__all__ = ["MatchingSettings", "DEFAULT_SETTINGS", "load_settings", "get_data_dir"]
