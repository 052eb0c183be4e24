"""
Suggestion ranking for live card-name queries.
"""

from .fuzzy_ranker import FuzzyRanker, rank, rank_suggestions

__all__ = ["FuzzyRanker", "rank", "rank_suggestions"]
