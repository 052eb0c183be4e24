"""
Card name parsing and brand canonicalization.
"""

from .card_name_parser import split_eligibility_list, split_base_and_variant
from .brand_canonicalizer import canonicalize

__all__ = ["split_eligibility_list", "split_base_and_variant", "canonicalize"]
