import pytest
from pydantic import ValidationError

from offer_finder.config.settings import DEFAULT_SETTINGS, MatchingSettings, load_settings
from offer_finder.models import CardIdentity, CardKind, OfferRecord, OfferSource


def test_card_identity_from_raw():
    card = CardIdentity.from_raw("Hdfc Regalia (Visa Signature)", CardKind.CREDIT)
    assert card.canonical_name == "HDFC Regalia"
    assert card.normalized_key == "hdfc regalia"
    assert card.kind is CardKind.CREDIT


def test_card_identity_equality_uses_normalized_key():
    a = CardIdentity.from_raw("HDFC Regalia", CardKind.CREDIT)
    b = CardIdentity.from_raw("hdfc  regalia (Visa)", CardKind.CREDIT)
    assert a == b
    assert len({a, b}) == 1


def test_card_identity_is_immutable():
    card = CardIdentity.from_raw("Axis Ace", CardKind.CREDIT)
    with pytest.raises(ValidationError):
        card.canonical_name = "Other"


def test_offer_record_coerces_cells():
    record = OfferRecord(source_id="amazon", row={"Min Spend": 5000, "Image": None})
    assert record.row == {"Min Spend": "5000", "Image": ""}


def test_offer_source_requires_label():
    with pytest.raises(ValidationError):
        OfferSource(source_id="amazon", display_label="  ")


def test_kind_labels():
    assert CardKind.CREDIT.label == "Credit Cards"
    assert CardKind.DEBIT.label == "Debit Cards"


def test_default_settings():
    assert DEFAULT_SETTINGS.fuzzy_threshold == 0.3
    assert DEFAULT_SETTINGS.max_suggestions == 50
    assert (DEFAULT_SETTINGS.word_weight, DEFAULT_SETTINGS.similarity_weight) == (0.7, 0.3)
    assert DEFAULT_SETTINGS.sentinels == {"credit": "all cc", "debit": "all dc"}


def test_settings_require_every_field_synonym():
    with pytest.raises(ValidationError):
        MatchingSettings(field_synonyms={"credit": ["Eligible Credit Cards"]})


def test_load_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("OFFER_FINDER_FUZZY_THRESHOLD", "0.5")
    monkeypatch.setenv("OFFER_FINDER_MAX_SUGGESTIONS", "10")
    settings = load_settings()
    assert settings.fuzzy_threshold == 0.5
    assert settings.max_suggestions == 10


def test_load_settings_rejects_bad_override(monkeypatch):
    monkeypatch.setenv("OFFER_FINDER_FUZZY_THRESHOLD", "high")
    with pytest.raises(ValidationError):
        load_settings()
