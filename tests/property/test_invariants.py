"""
Property-based tests using hypothesis for edge case discovery.
Tests system invariants that should always hold true.
"""
from hypothesis import given, strategies as st, settings

from offer_finder.catalog import build_catalog
from offer_finder.matching import dedupe
from offer_finder.models import CardIdentity, CardKind, MatchedOffer, OfferRecord
from offer_finder.parsers import split_base_and_variant, split_eligibility_list
from offer_finder.query import rank
from offer_finder.utils.normalization import normalize_text

latin_text = st.text(alphabet=st.characters(max_codepoint=0x2FF))

card_names = st.text(
    alphabet=st.sampled_from("abcdefghHDFCSBI ()-"),
    min_size=1,
    max_size=20,
)


class TestNormalizationProperties:
    """Invariants of the text normalizer."""

    @given(text=latin_text)
    @settings(max_examples=300)
    def test_normalize_is_idempotent(self, text):
        once = normalize_text(text)
        assert normalize_text(once) == once

    @given(text=latin_text)
    def test_normalize_has_no_outer_or_double_spaces(self, text):
        norm = normalize_text(text)
        assert norm == norm.strip()
        assert "  " not in norm


class TestParserProperties:
    """Invariants of eligibility-list and variant parsing."""

    @given(names=st.lists(st.text(alphabet=st.characters(blacklist_characters=",\n\r"), min_size=1), max_size=10))
    def test_split_list_pieces_are_trimmed_and_non_empty(self, names):
        pieces = split_eligibility_list(", ".join(names))
        assert all(piece and piece == piece.strip() for piece in pieces)
        assert all("," not in piece for piece in pieces)

    @given(base=st.text(alphabet="abc XYZ", min_size=1, max_size=15), variant=st.text(alphabet="abc xyz", min_size=1, max_size=10))
    def test_trailing_variant_is_split_off(self, base, variant):
        parsed_base, parsed_variant = split_base_and_variant(f"{base} ({variant})")
        assert parsed_base == base.strip()
        assert parsed_variant == variant.strip()


class TestCatalogProperties:
    """Catalog membership does not depend on input order."""

    @given(names=st.lists(card_names, max_size=12), data=st.data())
    @settings(max_examples=50)
    def test_membership_is_order_insensitive(self, names, data):
        rows = [{"Eligible Credit Cards": name} for name in names]
        shuffled = data.draw(st.permutations(rows))

        keys = {card.normalized_key for card in build_catalog([rows]).credit}
        shuffled_keys = {card.normalized_key for card in build_catalog([shuffled]).credit}
        assert keys == shuffled_keys

    @given(names=st.lists(card_names, max_size=12))
    @settings(max_examples=50)
    def test_catalog_keys_are_unique(self, names):
        catalog = build_catalog([[{"Eligible Credit Cards": ", ".join(names)}]])
        keys = [card.normalized_key for card in catalog.credit]
        assert len(keys) == len(set(keys))
        assert all(keys)


class TestRankingProperties:
    """Ranking is pure, capped and puts containment matches first."""

    @given(query=card_names, names=st.lists(card_names, max_size=30))
    @settings(max_examples=50)
    def test_rank_is_pure_and_bounded(self, query, names):
        candidates = [CardIdentity.from_raw(name, CardKind.CREDIT) for name in names]
        first = rank(query, candidates)

        assert first == rank(query, candidates)
        assert len(first) <= 50

    @given(query=card_names, names=st.lists(card_names, max_size=30))
    @settings(max_examples=50)
    def test_containment_matches_come_first(self, query, names):
        candidates = [CardIdentity.from_raw(name, CardKind.CREDIT) for name in names]
        query_norm = normalize_text(query)
        flags = [query_norm in normalize_text(c.canonical_name) for c in rank(query, candidates)]
        assert flags == sorted(flags, reverse=True)


class TestDedupProperties:
    """A shared seen-set never lets the same key through twice."""

    @given(titles=st.lists(st.sampled_from(["A", "a", "B", "b!", "C"]), max_size=15))
    def test_dedupe_twice_keeps_nothing_new(self, titles):
        matches = [
            MatchedOffer(offer=OfferRecord(source_id="s", row={"Offer Title": t}), source_id="s")
            for t in titles
        ]
        seen = set()
        kept = dedupe(matches, seen)

        assert len(kept) == len({normalize_text(t) for t in titles})
        assert dedupe(matches, seen) == []
