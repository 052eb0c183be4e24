"""
Fuzzy Ranker - orders catalog cards against what the user is typing.

Scoring per candidate:
- Containment: if the normalized query is a substring of the normalized
  card name, the card scores 100 and can never be beaten by a fuzzy score.
- Otherwise a composite in [0, 1]:
      0.7 * (share of query words found inside some card word)
    + 0.3 * (1 - Levenshtein distance / length of the longer string)

A card is admitted when it contains the query or its composite exceeds 0.3.
Results are ordered by score, then by display name, and capped at 50.
The ranking is pure: the same query and candidates always give the same list.
"""

from typing import List, Optional, Sequence, Tuple

from rapidfuzz.distance import Levenshtein

from offer_finder.config.settings import DEFAULT_SETTINGS, MatchingSettings
from offer_finder.models import CardCatalog, CardIdentity, CardKind, RankedSuggestions, SuggestionGroup
from offer_finder.utils.logging_config import logger
from offer_finder.utils.normalization import locale_sort_key, normalize_text


class FuzzyRanker:
    """
    Scores and orders card identities against free-text input.

    Weights, admission threshold and result cap come from MatchingSettings.
    """

    def __init__(self, settings: Optional[MatchingSettings] = None):
        self.settings = settings or DEFAULT_SETTINGS

    def score(self, query: str, candidate: str) -> float:
        """
        Relevance of a candidate display name for a query.

        Returns 0.0 when the query normalizes to nothing.
        """
        query_norm = normalize_text(query)
        cand_norm = normalize_text(candidate)
        if not query_norm:
            return 0.0

        if query_norm in cand_norm:
            return self.settings.exact_match_score

        query_words = query_norm.split()
        cand_words = cand_norm.split()
        matching_words = sum(
            1 for q_word in query_words
            if any(q_word in c_word for c_word in cand_words)
        )
        word_share = matching_words / max(1, len(query_words))

        # query_norm is non-empty, so the longer length is never zero
        longest = max(len(query_norm), len(cand_norm))
        similarity = 1.0 - Levenshtein.distance(query_norm, cand_norm) / longest

        return self.settings.word_weight * word_share + self.settings.similarity_weight * similarity

    def rank(self, query: str, candidates: Sequence[CardIdentity]) -> List[CardIdentity]:
        """
        Admitted candidates ordered by descending score, ties by display name.

        An empty (or punctuation-only) query yields no results without scoring.
        """
        if not normalize_text(query):
            return []

        scored: List[Tuple[float, CardIdentity]] = []
        for candidate in candidates:
            score = self.score(query, candidate.canonical_name)
            if score >= self.settings.exact_match_score or score > self.settings.fuzzy_threshold:
                scored.append((score, candidate))

        scored.sort(key=lambda pair: (-pair[0], locale_sort_key(pair[1].canonical_name)))
        return [candidate for _, candidate in scored[:self.settings.max_suggestions]]

    def prefers_debit(self, query: str) -> bool:
        """True when the raw query hints at debit cards ("debit", "dc", ...)."""
        lowered = query.strip().lower()
        return any(hint in lowered for hint in self.settings.debit_hints)

    def suggest(self, query: str, catalog: CardCatalog) -> RankedSuggestions:
        """
        Ranked suggestions for a live query, grouped by card kind.

        Credit cards come first unless the query hints at debit cards.
        Empty groups are omitted.
        """
        if not query or not query.strip():
            return RankedSuggestions(query=query or "")

        ranked = {kind: self.rank(query, catalog.for_kind(kind)) for kind in CardKind}
        if not any(ranked.values()):
            logger.debug(f"No suggestions for '{query}'")
            return RankedSuggestions(query=query, no_matches=True)

        order = [CardKind.DEBIT, CardKind.CREDIT] if self.prefers_debit(query) else [CardKind.CREDIT, CardKind.DEBIT]
        groups = [SuggestionGroup(kind=kind, entries=ranked[kind]) for kind in order if ranked[kind]]

        logger.debug(f"'{query}' -> {sum(len(g.entries) for g in groups)} suggestions")
        return RankedSuggestions(query=query, groups=groups)


# Convenience functions for callers that only need the default configuration
def rank(
    query: str,
    candidates: Sequence[CardIdentity],
    settings: Optional[MatchingSettings] = None
) -> List[CardIdentity]:
    """Ranks candidates against a query (see FuzzyRanker.rank)."""
    return FuzzyRanker(settings).rank(query, candidates)


def rank_suggestions(
    query: str,
    catalog: CardCatalog,
    settings: Optional[MatchingSettings] = None
) -> RankedSuggestions:
    """Grouped suggestion list for a query (see FuzzyRanker.suggest)."""
    return FuzzyRanker(settings).suggest(query, catalog)
