import sys
import os

import pytest

# Ensure the project root is in the python path for all tests
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from offer_finder.models import CardIdentity, CardKind, OfferRecord


@pytest.fixture
def catalog_rows():
    """Rows shaped like allCards.csv, with the header variants seen in real feeds."""
    return [
        {
            "Eligible Credit Cards": "HDFC Regalia (Visa Signature), ICICI Amazon Pay",
            "Eligible Debit Cards": "SBI Debit Card (Rupay Classic)",
        },
        {
            "Eligible Cards": "Hdfc Millennia,\nAxis Ace",
            "Applicable Debit Cards": "Hdfc Millennia Debit",
        },
    ]


@pytest.fixture
def regalia():
    return CardIdentity.from_raw("HDFC Regalia", CardKind.CREDIT)


@pytest.fixture
def make_offer():
    """Factory for offer records: make_offer("amazon", {"Offer Title": ...})."""
    def _make(source_id, row):
        return OfferRecord(source_id=source_id, row=row)
    return _make
