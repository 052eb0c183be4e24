"""
Streamlit UI for finding bank card offers across merchant feeds.
"""

import os
import sys

import streamlit as st

# Add project root to path
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))

from offer_finder.config import get_data_dir, load_settings
from offer_finder.models import CardIdentity
from offer_finder.pipeline import OfferAggregator, has_offers
from offer_finder.ui.components.card_picker import render_quick_picks, render_suggestions
from offer_finder.ui.components.offer_card import render_offer_sections
from offer_finder.utils.logging_config import logger, setup_logging

# Initialize logging for the UI
setup_logging("offer_finder_ui")

DISCLAIMER = (
    "All offers, coupons, and discounts listed on our platform are provided for informational "
    "purposes only. We do not guarantee the accuracy, availability, or validity of any offer. "
    "Users are advised to verify the terms and conditions with the respective merchants before "
    "making any purchase. We are not responsible for any discrepancies, expired offers, or losses "
    "arising from the use of these coupons."
)


@st.cache_resource
def get_aggregator() -> OfferAggregator:
    """Loads all feeds once per process and builds the catalogs."""
    data_dir = get_data_dir()
    logger.info(f"Loading feeds from '{data_dir}'")
    return OfferAggregator.from_data_dir(data_dir, settings=load_settings())


def setup_page_config():
    """Configure Streamlit page settings."""
    st.set_page_config(
        page_title="Card Offer Finder",
        page_icon="💳",
        layout="wide",
    )


def init_session_state():
    """Initialize session state variables."""
    if 'selected_card' not in st.session_state:
        st.session_state.selected_card = None
    if 'query' not in st.session_state:
        st.session_state.query = ""
    if 'pending_query' not in st.session_state:
        st.session_state.pending_query = None


def select_card(card: CardIdentity):
    """Remember the picked card and show its name in the search box on the next run."""
    st.session_state.selected_card = card
    st.session_state.pending_query = card.canonical_name
    st.rerun()


def render_search(aggregator: OfferAggregator):
    """Search box with live grouped suggestions."""
    # The text_input value can only be changed before the widget is created
    if st.session_state.pending_query is not None:
        st.session_state.query = st.session_state.pending_query
        st.session_state.pending_query = None

    query = st.text_input(
        "Card",
        key="query",
        placeholder="Type a Credit or Debit Card....",
        label_visibility="collapsed",
    )

    selected = st.session_state.selected_card
    if not query.strip():
        st.session_state.selected_card = None
        return
    if selected is not None and query == selected.canonical_name:
        return

    suggestions = aggregator.suggest(query)
    if suggestions.no_matches:
        st.session_state.selected_card = None
        st.error("No matching cards found. Please try a different name.")
        return

    picked = render_suggestions(suggestions)
    if picked is not None:
        select_card(picked)


def render_offers(aggregator: OfferAggregator):
    """Offer sections for the selected card."""
    selected = st.session_state.selected_card
    if selected is None:
        return

    results = aggregator.offers_for(selected)
    if not has_offers(results):
        st.warning("No offers for this card")
        return

    render_offer_sections(results)


def main():
    """Main application entry point."""
    setup_page_config()
    init_session_state()

    st.title("💳 Card Offer Finder")
    aggregator = get_aggregator()

    chip = render_quick_picks(aggregator.quick_picks)
    if chip is not None:
        select_card(aggregator.select(chip.canonical_name, chip.kind))

    render_search(aggregator)
    render_offers(aggregator)

    st.markdown("---")
    st.markdown("### Disclaimer")
    st.caption(DISCLAIMER)


if __name__ == "__main__":
    main()
