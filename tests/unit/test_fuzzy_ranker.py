import pytest

from offer_finder.config.settings import MatchingSettings
from offer_finder.models import CardCatalog, CardIdentity, CardKind
from offer_finder.query import FuzzyRanker, rank, rank_suggestions


def cards(*names, kind=CardKind.CREDIT):
    return [CardIdentity.from_raw(name, kind) for name in names]


@pytest.fixture
def ranker():
    return FuzzyRanker()


@pytest.fixture
def catalog():
    return CardCatalog(
        credit=cards("Axis Ace", "HDFC Millennia", "HDFC Regalia", "ICICI Amazon Pay", "SBI Card Elite"),
        debit=cards("HDFC Millennia Debit", "SBI Debit Card", kind=CardKind.DEBIT),
    )


def test_containment_scores_100(ranker):
    assert ranker.score("hdfc", "HDFC Regalia") == 100.0
    assert ranker.score("Axis-Ace", "Axis Ace") == 100.0


def test_composite_score_range(ranker):
    score = ranker.score("hdfc regalai", "HDFC Regalia")
    assert 0.3 < score < 1.0


def test_blank_query_scores_zero(ranker):
    assert ranker.score("", "HDFC Regalia") == 0.0
    assert ranker.score("!!", "HDFC Regalia") == 0.0


def test_containment_matches_sorted_alphabetically():
    candidates = cards("HDFC Regalia", "ICICI Amazon Pay", "HDFC Millennia", "Axis Ace")
    result = rank("hdfc", candidates)
    assert [c.canonical_name for c in result] == ["HDFC Millennia", "HDFC Regalia"]


def test_typo_is_ranked_by_composite_score():
    candidates = cards("HDFC Millennia", "HDFC Regalia")
    result = rank("hdfc regalai", candidates)
    assert result[0].canonical_name == "HDFC Regalia"


def test_unrelated_query_admits_nothing():
    assert rank("zzzz", cards("Axis Ace", "HDFC Regalia")) == []


def test_empty_query_returns_nothing_without_scoring(monkeypatch):
    ranker = FuzzyRanker()

    def fail(*args, **kwargs):
        raise AssertionError("score should not be called")

    monkeypatch.setattr(ranker, "score", fail)
    assert ranker.rank("", cards("Axis Ace")) == []
    assert ranker.rank("   ", cards("Axis Ace")) == []


def test_results_are_capped():
    candidates = cards(*[f"Card {i:02d}" for i in range(60)])
    result = rank("card", candidates)

    assert len(result) == 50
    assert result[0].canonical_name == "Card 00"
    assert result[-1].canonical_name == "Card 49"


def test_cap_is_configurable():
    candidates = cards(*[f"Card {i:02d}" for i in range(10)])
    assert len(rank("card", candidates, MatchingSettings(max_suggestions=3))) == 3


def test_ranking_is_reproducible():
    candidates = cards("HDFC Regalia", "HDFC Millennia", "Axis Ace", "ICICI Amazon Pay")
    assert rank("hdfc mil", candidates) == rank("hdfc mil", list(reversed(candidates)))


def test_suggest_credit_first_by_default(ranker, catalog):
    suggestions = ranker.suggest("sbi", catalog)

    assert [g.label for g in suggestions.groups] == ["Credit Cards", "Debit Cards"]
    assert suggestions.entries[0].canonical_name == "SBI Card Elite"
    assert not suggestions.no_matches


@pytest.mark.parametrize("query", ["sbi dc", "SBI Debit", "sbi debit cards"])
def test_suggest_debit_hint_puts_debit_first(ranker, catalog, query):
    suggestions = ranker.suggest(query, catalog)
    assert suggestions.groups[0].kind is CardKind.DEBIT


def test_suggest_omits_empty_groups(ranker, catalog):
    suggestions = ranker.suggest("regalia", catalog)
    assert [g.kind for g in suggestions.groups] == [CardKind.CREDIT]
    assert [c.canonical_name for c in suggestions.entries] == ["HDFC Regalia"]


def test_suggest_no_matches(catalog):
    suggestions = rank_suggestions("zzzz", catalog)
    assert suggestions.no_matches
    assert suggestions.groups == []


def test_suggest_blank_query(catalog):
    suggestions = rank_suggestions("  ", catalog)
    assert suggestions.groups == []
    assert not suggestions.no_matches


def test_prefers_debit(ranker):
    assert ranker.prefers_debit("Axis DC")
    assert ranker.prefers_debit("any debit card")
    assert not ranker.prefers_debit("hdfc regalia")
